from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('site-admin/', admin.site.urls),
    path('api/v1/', include('complaints.urls')),  # REST API used by the client
    path('', include('complaints.urls.page_urls')),  # server-rendered screens
]
