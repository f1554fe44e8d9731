from django import forms
from django.contrib.auth.forms import AuthenticationForm
from .models import Complaint, Employee


class RoleAuthenticationForm(AuthenticationForm):
    """Login form for one of the two login screens."""
    admin_only = False

    error_messages = {
        **AuthenticationForm.error_messages,
        'wrong_screen': "Administrators must use the admin login.",
        'not_admin': "This account is not an administrator.",
    }

    def confirm_login_allowed(self, user):
        super().confirm_login_allowed(user)
        if self.admin_only and not user.is_admin:
            raise forms.ValidationError(self.error_messages['not_admin'], code='not_admin')
        if not self.admin_only and user.is_admin:
            raise forms.ValidationError(self.error_messages['wrong_screen'], code='wrong_screen')


class AdminAuthenticationForm(RoleAuthenticationForm):
    admin_only = True


class ComplaintForm(forms.ModelForm):
    class Meta:
        model = Complaint
        fields = ['complaint_asset', 'complaint_details', 'employee_phone', 'employee_location']
        labels = {
            'complaint_asset': 'Asset Type',
            'complaint_details': 'Complaint Details',
            'employee_phone': 'Mobile No',
            'employee_location': 'Location',
        }
        widgets = {
            'complaint_details': forms.Textarea(attrs={'rows': 4}),
        }


class AssignForm(forms.Form):
    # Optional so an empty selection reaches the view and gets a friendly message
    worker = forms.ModelChoiceField(
        queryset=Employee.objects.none(),
        required=False,
        empty_label="Select a worker",
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['worker'].queryset = Employee.objects.workers()
        self.fields['worker'].label_from_instance = lambda worker: worker.display_name


class FeedbackForm(forms.Form):
    feedback = forms.CharField(widget=forms.Textarea(attrs={'rows': 2}), max_length=1000)
