"""Domain exceptions for notifications app."""


class NotificationsServiceError(Exception):
    """Base exception for notification service errors."""
    pass


class InvalidNotificationError(NotificationsServiceError):
    """Notification refers to a product that does not exist."""
    pass
