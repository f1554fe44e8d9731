# page_views.py
# Server-rendered screens: auth screen, admin status lists and detail, employee and worker tables
from functools import wraps

from django.contrib import messages
from django.contrib.auth import login, logout
from django.contrib.auth.decorators import login_required
from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST
import logging

from ..forms import (
    AdminAuthenticationForm, AssignForm, ComplaintForm, FeedbackForm, RoleAuthenticationForm,
)
from ..models import Complaint, ComplaintStateError, Employee

logger = logging.getLogger('complaints')

# URL slug -> complaint status for the admin lists
STATUS_SLUGS = {
    'new-complaints': Complaint.STATUS_OPENED,
    'in-progress': Complaint.STATUS_PROCESSING,
    'closed': Complaint.STATUS_CLOSED,
}


def role_required(*roles):
    def decorator(view_func):
        @wraps(view_func)
        @login_required
        def wrapper(request, *args, **kwargs):
            if request.user.role not in roles:
                raise PermissionDenied
            return view_func(request, *args, **kwargs)
        return wrapper
    return decorator


def redirect_to_dashboard(user):
    if user.is_admin:
        return redirect('admin_status', status_slug='new-complaints')
    if user.is_worker:
        return redirect('worker_complaints')
    return redirect('employee_complaints')


def auth_screen(request):
    return render(request, 'complaints/auth_screen.html')


def _login_page(request, form_class, title):
    form = form_class(request, data=request.POST or None)
    if request.method == 'POST' and form.is_valid():
        user = form.get_user()
        login(request, user)
        logger.info(f"{user.role} {user.employee_id} signed in to the screens")
        return redirect_to_dashboard(user)
    return render(request, 'complaints/login.html', {'form': form, 'title': title})


def admin_login(request):
    return _login_page(request, AdminAuthenticationForm, 'Admin Login')


def employee_login(request):
    return _login_page(request, RoleAuthenticationForm, 'Employee Login')


def logout_view(request):
    logout(request)
    return redirect('auth_screen')


# Admin screens
@role_required(Employee.ROLE_ADMIN)
def admin_status(request, status_slug):
    complaint_status = STATUS_SLUGS.get(status_slug)
    if complaint_status is None:
        raise Http404("Unknown complaint status")

    complaints = (Complaint.objects
                  .select_related('employee', 'attended_by')
                  .filter(status=complaint_status))
    return render(request, 'complaints/admin_status.html', {
        'complaints': complaints,
        'status': complaint_status,
        'status_slug': status_slug,
        'status_slugs': STATUS_SLUGS,
    })


@role_required(Employee.ROLE_ADMIN)
def admin_complaint_detail(request, pk):
    complaint = get_object_or_404(Complaint.objects.select_related('employee', 'attended_by'), pk=pk)
    form = AssignForm(request.POST or None)

    if request.method == 'POST':
        worker = form.cleaned_data.get('worker') if form.is_valid() else None
        if worker is None:
            messages.error(request, "Please select a worker to assign")
            return redirect('admin_complaint_detail', pk=complaint.pk)

        try:
            complaint.assign(worker)
        except ComplaintStateError as e:
            messages.error(request, str(e))
            return redirect('admin_complaint_detail', pk=complaint.pk)

        logger.info(f"Complaint {complaint.complaint_id} assigned to {worker.employee_id} by {request.user.employee_id}")
        messages.success(request, "Complaint Assigned Successfully")
        return redirect('admin_status', status_slug='new-complaints')

    return render(request, 'complaints/admin_complaint_detail.html', {
        'complaint': complaint,
        'form': form,
    })


# Employee screens
@role_required(Employee.ROLE_EMPLOYEE)
def employee_complaints(request):
    user = request.user
    form = ComplaintForm(request.POST or None, initial={
        'employee_phone': user.phone,
        'employee_location': user.employee_location,
    })

    if request.method == 'POST' and form.is_valid():
        complaint = form.save(commit=False)
        complaint.employee = user
        complaint.employee_phone = complaint.employee_phone or user.phone
        complaint.employee_location = complaint.employee_location or user.employee_location
        complaint.save()
        messages.success(request, f"Complaint {complaint.complaint_id} registered successfully.")
        return redirect('employee_complaints')

    complaints = user.complaints.select_related('attended_by')
    return render(request, 'complaints/employee_complaints.html', {
        'complaints': complaints,
        'form': form,
    })


@role_required(Employee.ROLE_EMPLOYEE)
def employee_closed_complaints(request):
    closed_complaints = (request.user.complaints
                         .select_related('attended_by')
                         .filter(status=Complaint.STATUS_CLOSED))
    return render(request, 'complaints/closed_complaints.html', {
        'complaints': closed_complaints,
        'feedback_form': FeedbackForm(),
    })


@require_POST
@role_required(Employee.ROLE_EMPLOYEE)
def employee_feedback(request, pk):
    complaint = get_object_or_404(Complaint, pk=pk, employee=request.user)
    form = FeedbackForm(request.POST)

    try:
        complaint.add_feedback(form.cleaned_data['feedback'] if form.is_valid() else '')
    except ComplaintStateError as e:
        messages.error(request, str(e))
    else:
        messages.success(request, "Thank you for your feedback.")
    return redirect('employee_closed_complaints')


# Worker screens
@role_required(Employee.ROLE_WORKER)
def worker_complaints(request):
    complaints = (request.user.assigned_complaints
                  .select_related('employee')
                  .order_by('-status', '-assigned_date'))
    return render(request, 'complaints/worker_complaints.html', {'complaints': complaints})


@require_POST
@role_required(Employee.ROLE_WORKER)
def worker_resolve(request, pk):
    complaint = get_object_or_404(Complaint, pk=pk, attended_by=request.user)

    try:
        complaint.close()
    except ComplaintStateError as e:
        messages.error(request, str(e))
    else:
        logger.info(f"Complaint {complaint.complaint_id} closed by {request.user.employee_id}")
        messages.success(request, f"Complaint {complaint.complaint_id} closed.")
    return redirect('worker_complaints')
