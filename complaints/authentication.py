import logging
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed
from .models import Employee

logger = logging.getLogger('complaints')


class EmployeeJWTAuthentication(JWTAuthentication):
    def get_user(self, validated_token):
        user_id = validated_token.get("user_id")
        try:
            user = Employee.objects.get(user_id=user_id)
        except Employee.DoesNotExist:
            logger.warning(f"Token refers to unknown user_id: {user_id}")
            raise AuthenticationFailed("User not found.", code="user_not_found")

        if not user.is_active:
            raise AuthenticationFailed("User is inactive.", code="user_inactive")
        return user
