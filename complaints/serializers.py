from rest_framework import serializers
from django.contrib.auth.hashers import make_password
from .models import Employee, Complaint
import re


def validate_password_strength(value):
    if len(value) < 8 or len(value) > 20:
        raise serializers.ValidationError("Password must be between 8 and 20 characters.")
    has_upper = re.search(r'[A-Z]', value) is not None
    has_lower = re.search(r'[a-z]', value) is not None
    has_digit = re.search(r'\d', value) is not None
    has_special = re.search(r'[!@#$%^&*]', value) is not None
    if sum([has_upper, has_lower, has_digit, has_special]) < 2:
        raise serializers.ValidationError(
            "Password must contain at least two of: uppercase, lowercase, digits, special characters."
        )
    return value


# User serializers
class EmployeeSerializer(serializers.ModelSerializer):
    class Meta:
        model = Employee
        fields = ['user_id', 'employee_id', 'password', 'employee_name', 'employee_department',
                  'employee_location', 'phone', 'email', 'role', 'created_at']
        read_only_fields = ['user_id', 'role', 'created_at']
        extra_kwargs = {
            'password': {'write_only': True},
            'email': {'required': False},
            'employee_name': {'required': True, 'allow_blank': False},
        }

    def validate_employee_id(self, value):
        if not re.match(r'^[A-Za-z0-9_-]{3,20}$', value):
            raise serializers.ValidationError(
                "Employee ID must be 3-20 characters of letters, digits, '-' or '_'."
            )
        return value

    def validate_password(self, value):
        return validate_password_strength(value)

    def create(self, validated_data):
        validated_data['password'] = make_password(validated_data['password'])
        validated_data['role'] = self.context.get('role', Employee.ROLE_EMPLOYEE)
        return super().create(validated_data)


class EmployeeProfileSerializer(serializers.ModelSerializer):
    """Contact details the user may change on their own profile."""
    class Meta:
        model = Employee
        fields = ['employee_name', 'employee_department', 'employee_location', 'phone', 'email']
        extra_kwargs = {
            'email': {'required': False},
            'employee_name': {'allow_blank': False},
        }


class EmployeeSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Employee
        fields = ['user_id', 'employee_id', 'employee_name', 'employee_department']


class WorkerSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source='display_name', read_only=True)

    class Meta:
        model = Employee
        fields = ['user_id', 'employee_id', 'employee_name', 'name', 'employee_department', 'phone']


# Login request
class LoginSerializer(serializers.Serializer):
    employee_id = serializers.CharField()
    password = serializers.CharField()


class AttendedBySerializer(serializers.ModelSerializer):
    name = serializers.CharField(source='display_name', read_only=True)

    class Meta:
        model = Employee
        fields = ['user_id', 'name']


class ComplaintSerializer(serializers.ModelSerializer):
    employee = EmployeeSummarySerializer(read_only=True)
    attended_by = AttendedBySerializer(read_only=True)

    class Meta:
        model = Complaint
        fields = ['id', 'complaint_id', 'employee', 'complaint_asset', 'complaint_details',
                  'employee_phone', 'employee_location', 'status', 'attended_by', 'feedback',
                  'created_date', 'assigned_date', 'closed_date']
        read_only_fields = ['complaint_id', 'status', 'feedback', 'created_date',
                            'assigned_date', 'closed_date']

    def validate(self, data):
        if not (data.get('complaint_asset') or '').strip():
            raise serializers.ValidationError({"complaint_asset": "Asset type is required."})
        if not (data.get('complaint_details') or '').strip():
            raise serializers.ValidationError({"complaint_details": "Complaint details are required."})
        return data

    def create(self, validated_data):
        employee = validated_data['employee']
        # Contact details fall back to the filer's profile
        if not validated_data.get('employee_phone'):
            validated_data['employee_phone'] = employee.phone
        if not validated_data.get('employee_location'):
            validated_data['employee_location'] = employee.employee_location
        return super().create(validated_data)
