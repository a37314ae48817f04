"""Notification service - per-caller inbox operations."""

import logging
from typing import Optional

from django.db import transaction
from django.db.models import QuerySet

from apps.products.models import Product
from .exceptions import InvalidNotificationError
from .models import Notification

logger = logging.getLogger(__name__)


def create_notification(
    *,
    user_id: str,
    title: str,
    message: str,
    product_id: Optional[int] = None
) -> Notification:
    """
    Add a notification to the caller's inbox, unread.

    Raises:
        InvalidNotificationError: If product_id is given and the product doesn't exist
    """
    if product_id is not None and not Product.objects.filter(id=product_id).exists():
        raise InvalidNotificationError("Product not found")

    return Notification.objects.create(
        user_id=user_id,
        title=title,
        message=message,
        product_id=product_id,
    )


def get_notifications(*, user_id: str) -> QuerySet[Notification]:
    """The caller's notifications, newest first."""
    return Notification.objects.filter(user_id=user_id).order_by('-created_at', '-id')


def get_unread_count(*, user_id: str) -> int:
    return Notification.objects.filter(user_id=user_id, is_read=False).count()


def mark_as_read(*, notification_id: int) -> bool:
    """
    Mark one notification read.

    Returns:
        True if a notification changed, False if it was missing or already read
    """
    updated = Notification.objects.filter(id=notification_id, is_read=False).update(is_read=True)
    return bool(updated)


def mark_all_as_read(*, user_id: str) -> int:
    """Mark all of the caller's unread notifications read in one update. Returns rows changed."""
    return Notification.objects.filter(user_id=user_id, is_read=False).update(is_read=True)


@transaction.atomic
def delete_notification(*, notification_id: int) -> bool:
    """
    Delete one notification.

    Missing notifications are not an error so clients can retry deletes.

    Returns:
        True if a notification was deleted
    """
    logger.info("Deleting notification with ID: %s", notification_id)
    deleted, _ = Notification.objects.filter(id=notification_id).delete()
    if not deleted:
        logger.warning("Notification %s not found for deletion", notification_id)
    return bool(deleted)


@transaction.atomic
def delete_all_notifications(*, user_id: str) -> int:
    """Delete every notification of the caller. Returns the number deleted."""
    deleted, _ = Notification.objects.filter(user_id=user_id).delete()
    return deleted
