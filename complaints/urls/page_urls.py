# page_urls.py
from django.urls import path
from ..views import page_views

urlpatterns = [
    path('', page_views.auth_screen, name='auth_screen'),
    path('auth/admin/', page_views.admin_login, name='admin_login'),
    path('auth/employee/', page_views.employee_login, name='employee_login'),
    path('logout/', page_views.logout_view, name='logout'),
    path('admin/status/<slug:status_slug>/', page_views.admin_status, name='admin_status'),
    path('admin/complaints/<int:pk>/', page_views.admin_complaint_detail, name='admin_complaint_detail'),
    path('employee/complaints/', page_views.employee_complaints, name='employee_complaints'),
    path('employee/complaints/closed/', page_views.employee_closed_complaints, name='employee_closed_complaints'),
    path('employee/complaints/<int:pk>/feedback/', page_views.employee_feedback, name='employee_feedback'),
    path('worker/complaints/', page_views.worker_complaints, name='worker_complaints'),
    path('worker/complaints/<int:pk>/resolve/', page_views.worker_resolve, name='worker_resolve'),
]
