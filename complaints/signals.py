from django.db.models.signals import post_save
from django.dispatch import receiver
from django.utils.timezone import now
from .models import Employee, Complaint
from .utils import send_slack_notification
import logging

logger = logging.getLogger('complaints')


@receiver(post_save, sender=Employee)
def send_employee_creation_notification(sender, instance, created, **kwargs):
    if created:
        message = f"New {instance.role} account {instance.employee_id} ({instance.display_name}) registered."
        send_slack_notification(message)


@receiver(post_save, sender=Complaint)
def send_complaint_notification(sender, instance, created, **kwargs):
    if created:
        message = (
            f"🔔 *New complaint filed*\n"
            f"- *Complaint*: {instance.complaint_id}\n"
            f"- *Employee*: {instance.employee.display_name}\n"
            f"- *Asset*: {instance.complaint_asset}\n"
            f"- *Location*: {instance.employee_location}\n"
            f"- *Filed at*: {now().strftime('%Y-%m-%d %H:%M')}\n"
        )
        send_slack_notification(message)
