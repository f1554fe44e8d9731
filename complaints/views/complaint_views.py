# complaint_views.py
# Filing, listing, assignment, resolution and feedback of complaints
from django.db.models import Count
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet
from rest_framework.decorators import action
import logging

from ..authentication import EmployeeJWTAuthentication
from ..models import Complaint, ComplaintStateError, Employee
from ..permissions import IsAdminRole, IsEmployeeRole, IsWorkerRole
from ..serializers import ComplaintSerializer

logger = logging.getLogger('complaints')


def complaints_for(user):
    """Complaints visible to the given user."""
    queryset = Complaint.objects.select_related('employee', 'attended_by')
    if user.is_admin:
        return queryset
    if user.is_worker:
        return queryset.filter(attended_by=user)
    return queryset.filter(employee=user)


class ComplaintViewSet(ViewSet):
    authentication_classes = [EmployeeJWTAuthentication]
    permission_classes = [IsAuthenticated]
    lookup_value_regex = r'\d+'

    def get_permissions(self):
        if self.action == 'create':
            return [IsAuthenticated(), IsEmployeeRole()]
        return super().get_permissions()

    def list(self, request):
        """List complaints (scoped by role, optional ?status= filter)"""
        complaints = complaints_for(request.user)

        status_filter = request.query_params.get('status')
        if status_filter:
            if status_filter not in dict(Complaint.STATUS_CHOICES):
                return Response({"status": "error", "message": f"Invalid status: {status_filter}"},
                                status=status.HTTP_400_BAD_REQUEST)
            complaints = complaints.filter(status=status_filter)

        serializer = ComplaintSerializer(complaints, many=True)
        return Response(serializer.data, status=status.HTTP_200_OK)

    def create(self, request):
        """File a complaint"""
        logger.debug(f"Received complaint data: {request.data}")

        serializer = ComplaintSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        complaint = serializer.save(employee=request.user)

        logger.info(f"Complaint {complaint.complaint_id} filed by {request.user.employee_id}")
        return Response({
            "status": "success",
            "message": "Complaint registered successfully.",
            "data": ComplaintSerializer(complaint).data,
        }, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        complaint = get_object_or_404(complaints_for(request.user), pk=pk)
        return Response(ComplaintSerializer(complaint).data, status=status.HTTP_200_OK)

    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated, IsAdminRole])
    def assign(self, request, pk=None):
        """Assign an opened complaint to a worker"""
        complaint = get_object_or_404(Complaint, pk=pk)
        worker_id = request.data.get('worker_id')

        if not worker_id:
            return Response({"status": "error", "message": "Please select a worker to assign"},
                            status=status.HTTP_400_BAD_REQUEST)

        try:
            worker = Employee.objects.get(pk=worker_id)
        except (Employee.DoesNotExist, ValueError):
            return Response({"status": "error", "message": "Worker not found."}, status=status.HTTP_404_NOT_FOUND)

        try:
            complaint.assign(worker)
        except ComplaintStateError as e:
            return Response({"status": "error", "message": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        logger.info(f"Complaint {complaint.complaint_id} assigned to {worker.employee_id} by {request.user.employee_id}")
        return Response({
            "status": "success",
            "message": "Complaint Assigned Successfully",
            "data": ComplaintSerializer(complaint).data,
        }, status=status.HTTP_200_OK)

    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated, IsWorkerRole])
    def resolve(self, request, pk=None):
        """Close a complaint assigned to the requesting worker"""
        complaint = get_object_or_404(Complaint, pk=pk, attended_by=request.user)

        try:
            complaint.close()
        except ComplaintStateError as e:
            return Response({"status": "error", "message": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        logger.info(f"Complaint {complaint.complaint_id} closed by {request.user.employee_id}")
        return Response({
            "status": "success",
            "message": "Complaint closed successfully.",
            "data": ComplaintSerializer(complaint).data,
        }, status=status.HTTP_200_OK)

    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated, IsEmployeeRole])
    def feedback(self, request, pk=None):
        """Leave feedback on one of your own closed complaints"""
        complaint = get_object_or_404(Complaint, pk=pk, employee=request.user)

        try:
            complaint.add_feedback(request.data.get('feedback'))
        except ComplaintStateError as e:
            return Response({"status": "error", "message": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            "status": "success",
            "message": "Feedback saved successfully.",
            "data": ComplaintSerializer(complaint).data,
        }, status=status.HTTP_200_OK)

    @action(detail=False, methods=['get'], permission_classes=[IsAuthenticated, IsAdminRole])
    def stats(self, request):
        counts = dict(
            Complaint.objects.values_list('status').annotate(total=Count('id')).order_by()
        )
        data = {value: counts.get(value, 0) for value, _ in Complaint.STATUS_CHOICES}
        data['Total'] = sum(data.values())
        return Response(data, status=status.HTTP_200_OK)
