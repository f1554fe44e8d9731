# notifications.py
import logging
import time

logger = logging.getLogger('complaint_client')


class Notifier:
    """
    Keeps track of on-screen notifications by id so the same banner is not
    stacked while it is still visible.
    """

    def __init__(self, display=None, clock=time.monotonic):
        self.display = display
        self.clock = clock
        self._expires_at = {}

    def is_active(self, notification_id):
        expires_at = self._expires_at.get(notification_id)
        if expires_at is None:
            return False
        if expires_at <= self.clock():
            del self._expires_at[notification_id]
            return False
        return True

    def show(self, notification_id, text, duration=10.0):
        """Show ``text`` unless ``notification_id`` is already on screen."""
        if self.is_active(notification_id):
            return False
        self._expires_at[notification_id] = self.clock() + duration
        if self.display is not None:
            self.display(notification_id, text)
        else:
            logger.info(f"[Notification] {text}")
        return True

    def dismiss(self, notification_id):
        self._expires_at.pop(notification_id, None)
