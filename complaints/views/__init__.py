from .auth_views import LoginView, AdminLoginView, SignupView
from .user_views import MeView, WorkerView
from .complaint_views import ComplaintViewSet
