from django.db import models
from django.utils import timezone

# Custom user model shared by admins, employees and workers
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager


class ComplaintStateError(ValueError):
    """Raised when a complaint cannot move to the requested state."""


class EmployeeManager(BaseUserManager):
    def create_user(self, employee_id, password=None, **extra_fields):
        if not employee_id:
            raise ValueError('Employee ID is required.')
        user = self.model(employee_id=employee_id, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, employee_id, password=None, **extra_fields):
        extra_fields.setdefault('role', Employee.ROLE_ADMIN)
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        return self.create_user(employee_id, password, **extra_fields)

    def workers(self):
        return self.filter(role=Employee.ROLE_WORKER, is_active=True).order_by('employee_name')


class Employee(AbstractBaseUser):
    ROLE_ADMIN = 'admin'
    ROLE_EMPLOYEE = 'employee'
    ROLE_WORKER = 'worker'
    ROLE_CHOICES = [
        (ROLE_ADMIN, 'Admin'),
        (ROLE_EMPLOYEE, 'Employee'),
        (ROLE_WORKER, 'Worker'),
    ]

    user_id = models.AutoField(primary_key=True)
    employee_id = models.CharField(max_length=20, unique=True)
    employee_name = models.CharField(max_length=50, blank=True)
    employee_department = models.CharField(max_length=100, blank=True)
    employee_location = models.CharField(max_length=100, blank=True)
    phone = models.CharField(max_length=15, blank=True)
    email = models.EmailField(max_length=50, blank=True, null=True)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_EMPLOYEE)
    created_at = models.DateTimeField(auto_now_add=True, blank=True, null=True)

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    is_superuser = models.BooleanField(default=False)

    objects = EmployeeManager()

    USERNAME_FIELD = 'employee_id'
    REQUIRED_FIELDS = ['employee_name']

    @property
    def is_admin(self):
        return self.role == self.ROLE_ADMIN

    @property
    def is_worker(self):
        return self.role == self.ROLE_WORKER

    @property
    def display_name(self):
        return self.employee_name or self.employee_id

    # Django admin site permission hooks
    def has_perm(self, perm, obj=None):
        return self.is_active and self.is_superuser

    def has_module_perms(self, app_label):
        return self.is_active and self.is_superuser

    def deactivate(self):
        self.is_active = False
        self.save()

    def __str__(self):
        return self.employee_id


class Complaint(models.Model):
    STATUS_OPENED = 'Opened'
    STATUS_PROCESSING = 'Processing'
    STATUS_CLOSED = 'Closed'
    STATUS_CHOICES = [
        (STATUS_OPENED, 'Opened'),
        (STATUS_PROCESSING, 'Processing'),
        (STATUS_CLOSED, 'Closed'),
    ]

    complaint_id = models.CharField(max_length=20, unique=True, editable=False)
    employee = models.ForeignKey(Employee, on_delete=models.CASCADE, related_name='complaints')
    complaint_asset = models.CharField(max_length=100)
    complaint_details = models.TextField()
    employee_phone = models.CharField(max_length=15, blank=True)
    employee_location = models.CharField(max_length=100, blank=True)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_OPENED)
    attended_by = models.ForeignKey(
        Employee, on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_complaints'
    )
    feedback = models.TextField(blank=True, null=True)
    created_date = models.DateTimeField(auto_now_add=True)
    assigned_date = models.DateTimeField(blank=True, null=True)
    closed_date = models.DateTimeField(blank=True, null=True)

    class Meta:
        ordering = ['-created_date', '-id']

    def __str__(self):
        return f"{self.complaint_id} - {self.complaint_asset}"

    def save(self, *args, **kwargs):
        # Number complaints per local day: YYYYMMDD-001, YYYYMMDD-002, ...
        if not self.complaint_id:
            today = timezone.localdate().strftime('%Y%m%d')
            last_complaint = (
                Complaint.objects
                .filter(complaint_id__startswith=today)
                .order_by('-complaint_id')
                .first()
            )

            if last_complaint:
                last_number = int(last_complaint.complaint_id.split('-')[1])
                new_number = str(last_number + 1).zfill(3)
            else:
                new_number = "001"

            self.complaint_id = f"{today}-{new_number}"

        super().save(*args, **kwargs)

    def assign(self, worker):
        """Hand an opened complaint over to a worker."""
        if self.status != self.STATUS_OPENED:
            raise ComplaintStateError(f"Only opened complaints can be assigned (current status: {self.status}).")
        if worker is None or not worker.is_worker or not worker.is_active:
            raise ComplaintStateError("Complaints can only be assigned to an active worker.")

        self.attended_by = worker
        self.assigned_date = timezone.now()
        self.status = self.STATUS_PROCESSING
        self.save()

    def close(self):
        if self.status != self.STATUS_PROCESSING:
            raise ComplaintStateError(f"Only complaints in progress can be closed (current status: {self.status}).")

        self.closed_date = timezone.now()
        self.status = self.STATUS_CLOSED
        self.save()

    def add_feedback(self, feedback):
        if self.status != self.STATUS_CLOSED:
            raise ComplaintStateError("Feedback can only be given on closed complaints.")
        if self.feedback:
            raise ComplaintStateError("Feedback has already been given for this complaint.")
        if not isinstance(feedback, str) or not feedback.strip():
            raise ComplaintStateError("Feedback cannot be empty.")

        self.feedback = feedback.strip()
        self.save()
