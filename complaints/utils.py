# utils.py
from slack_sdk.webhook import WebhookClient
import logging

logger = logging.getLogger('complaints')


def send_slack_notification(message):
    """
    Post a message to the configured Slack channel.
    """
    from django.conf import settings
    slack_webhook_url = getattr(settings, 'SLACK_WEBHOOK_URL', None)
    if not slack_webhook_url:
        logger.debug("SLACK_WEBHOOK_URL is not set; skipping notification.")
        return

    try:
        webhook = WebhookClient(slack_webhook_url)
        response = webhook.send(text=message)
        if response.status_code != 200:
            logger.error(f"Slack notification failed: {response.status_code}, {response.body}")
    except Exception as e:
        logger.error(f"Error while sending Slack notification: {str(e)}")
