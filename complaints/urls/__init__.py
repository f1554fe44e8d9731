# __init__.py
from .auth_urls import urlpatterns as auth_urls
from .complaint_urls import urlpatterns as complaint_urls
from .user_urls import urlpatterns as user_urls

urlpatterns = auth_urls + complaint_urls + user_urls
