# user_urls.py
from django.urls import path
from ..views import MeView, WorkerView

urlpatterns = [
    path('me/', MeView.as_view(), name='api_me'),
    path('workers/', WorkerView.as_view(), name='api_workers'),
]
