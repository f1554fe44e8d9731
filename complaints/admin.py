from django.contrib import admin
from .models import Employee, Complaint


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ('employee_id', 'employee_name', 'role', 'employee_department', 'phone', 'is_active')
    list_filter = ('role', 'is_active')
    search_fields = ('employee_id', 'employee_name', 'email')
    ordering = ('employee_id',)
    fields = ('employee_id', 'password', 'employee_name', 'role', 'employee_department',
              'employee_location', 'phone', 'email', 'is_active', 'is_staff', 'is_superuser')

    def save_model(self, request, obj, form, change):
        """
        Hash the password when it was entered as plain text.
        """
        if 'password' in form.changed_data:
            obj.set_password(form.cleaned_data['password'])
        obj.save()


@admin.register(Complaint)
class ComplaintAdmin(admin.ModelAdmin):
    list_display = ('complaint_id', 'employee', 'complaint_asset', 'status', 'attended_by', 'created_date')
    list_filter = ('status',)
    search_fields = ('complaint_id', 'complaint_asset', 'employee__employee_id')
    readonly_fields = ('complaint_id', 'created_date')
