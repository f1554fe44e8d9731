# permissions.py
# Role checks layered on top of IsAuthenticated
from rest_framework.permissions import BasePermission


class IsAdminRole(BasePermission):
    message = "Only administrators can perform this action."

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and request.user.is_admin)


class IsEmployeeRole(BasePermission):
    message = "Only employees can file complaints."

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated
                    and request.user.role == request.user.ROLE_EMPLOYEE)


class IsWorkerRole(BasePermission):
    message = "Only workers can resolve complaints."

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and request.user.is_worker)
