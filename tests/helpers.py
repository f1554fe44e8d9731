from rest_framework_simplejwt.tokens import RefreshToken

from complaints.models import Complaint, Employee

PASSWORD = 'Passw0rd!'


def make_user(employee_id, role=Employee.ROLE_EMPLOYEE, **extra):
    extra.setdefault('employee_name', employee_id.title())
    extra.setdefault('employee_department', 'Electrical')
    extra.setdefault('employee_location', 'Block A')
    extra.setdefault('phone', '9999900000')
    return Employee.objects.create_user(employee_id, PASSWORD, role=role, **extra)


def make_complaint(employee, **extra):
    extra.setdefault('complaint_asset', 'Printer')
    extra.setdefault('complaint_details', 'Paper jam on every print')
    extra.setdefault('employee_location', employee.employee_location)
    extra.setdefault('employee_phone', employee.phone)
    return Complaint.objects.create(employee=employee, **extra)


def bearer(user):
    return f'Bearer {RefreshToken.for_user(user).access_token}'
