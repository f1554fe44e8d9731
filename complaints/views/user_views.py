# user_views.py
# Current user profile and worker management
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
import logging

from ..authentication import EmployeeJWTAuthentication
from ..models import Employee
from ..permissions import IsAdminRole
from ..serializers import EmployeeProfileSerializer, EmployeeSerializer, WorkerSerializer

logger = logging.getLogger('complaints')


class MeView(APIView):
    authentication_classes = [EmployeeJWTAuthentication]
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response(EmployeeSerializer(request.user).data)

    def put(self, request):
        """Update contact details of the logged in user."""
        serializer = EmployeeProfileSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"Profile of {user.employee_id} updated")

        return Response({
            'message': 'Profile updated successfully',
            'user': EmployeeSerializer(user).data,
        }, status=status.HTTP_200_OK)


class WorkerView(APIView):
    authentication_classes = [EmployeeJWTAuthentication]
    permission_classes = [IsAuthenticated, IsAdminRole]

    def get(self, request):
        workers = Employee.objects.workers()
        return Response(WorkerSerializer(workers, many=True).data, status=status.HTTP_200_OK)

    def post(self, request):
        serializer = EmployeeSerializer(data=request.data, context={'role': Employee.ROLE_WORKER})
        if not serializer.is_valid():
            return Response({"status": "error", "errors": serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        worker = serializer.save()
        logger.info(f"Admin {request.user.employee_id} created worker {worker.employee_id}")
        return Response({
            "status": "success",
            "message": "Worker created successfully.",
            "data": WorkerSerializer(worker).data,
        }, status=status.HTTP_201_CREATED)
