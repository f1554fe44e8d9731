# auth_views.py
# Login (employee / admin) and employee signup
from django.contrib.auth.hashers import check_password
from django.db import transaction
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken
import logging

from ..models import Employee
from ..serializers import EmployeeSerializer, LoginSerializer

logger = logging.getLogger('complaints')

INVALID_CREDENTIALS = "Invalid employee ID or password. Please try again."


def issue_tokens(user):
    refresh = RefreshToken.for_user(user)
    return {
        'access': str(refresh.access_token),
        'refresh': str(refresh),
        'user': EmployeeSerializer(user).data,
    }


# Login API shared by both login screens
class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    admin_only = False

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": "Employee ID and password are required.", "errors": serializer.errors},
                            status=status.HTTP_400_BAD_REQUEST)

        employee_id = serializer.validated_data['employee_id']
        password = serializer.validated_data['password']

        try:
            user = Employee.objects.get(employee_id=employee_id, is_active=True)
        except Employee.DoesNotExist:
            return Response({"error": INVALID_CREDENTIALS}, status=status.HTTP_401_UNAUTHORIZED)

        if not check_password(password, user.password):
            logger.info(f"Failed login for {employee_id}")
            return Response({"error": INVALID_CREDENTIALS}, status=status.HTTP_401_UNAUTHORIZED)

        if self.admin_only and not user.is_admin:
            return Response({"error": "This account is not an administrator."}, status=status.HTTP_403_FORBIDDEN)
        if not self.admin_only and user.is_admin:
            return Response({"error": "Administrators must use the admin login."}, status=status.HTTP_403_FORBIDDEN)

        user.last_login = timezone.now()
        user.save(update_fields=['last_login'])
        logger.info(f"{user.role} {employee_id} logged in")

        return Response(issue_tokens(user), status=status.HTTP_200_OK)


class AdminLoginView(LoginView):
    admin_only = True


# Employee signup API
class SignupView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        user_data = {
            'employee_id': request.data.get('employee_id'),
            'password': request.data.get('password'),
            'employee_name': request.data.get('employee_name'),
            'employee_department': request.data.get('employee_department', ''),
            'employee_location': request.data.get('employee_location', ''),
            'phone': request.data.get('phone', ''),
            'email': request.data.get('email') if request.data.get('email') else None,
        }

        if Employee.objects.filter(employee_id=user_data['employee_id']).exists():
            return Response({
                'success': False,
                'message': 'This employee ID is already registered.'
            }, status=status.HTTP_409_CONFLICT)

        with transaction.atomic():
            user_serializer = EmployeeSerializer(data=user_data, context={'role': Employee.ROLE_EMPLOYEE})
            if not user_serializer.is_valid():
                return Response({
                    'success': False,
                    'message': 'Signup failed.',
                    'errors': user_serializer.errors
                }, status=status.HTTP_400_BAD_REQUEST)

            user = user_serializer.save()

        logger.info(f"Employee {user.employee_id} signed up")
        return Response({
            'success': True,
            'message': 'Employee account created successfully.',
            'user': EmployeeSerializer(user).data,
        }, status=status.HTTP_201_CREATED)
