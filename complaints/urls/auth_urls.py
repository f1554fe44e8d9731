# auth_urls.py
from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView
from ..views import LoginView, AdminLoginView, SignupView

urlpatterns = [
    path('login/', LoginView.as_view(), name='api_login'),
    path('admin/login/', AdminLoginView.as_view(), name='api_admin_login'),
    path('signup/', SignupView.as_view(), name='api_signup'),
    path('token/refresh/', TokenRefreshView.as_view(), name='api_token_refresh'),
]
