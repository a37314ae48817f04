"""
Tests for notifications services layer.

Covers:
- Creating and listing notifications
- Read state
- Deletion, including of missing notifications
"""

import pytest
from apps.notifications.exceptions import InvalidNotificationError
from apps.notifications.models import Notification
from apps.notifications.services import (
    create_notification,
    get_notifications,
    get_unread_count,
    mark_as_read,
    mark_all_as_read,
    delete_notification,
    delete_all_notifications,
)


@pytest.mark.django_db
class TestCreateNotification:

    def test_create(self, watch):
        notification = create_notification(
            user_id='user-1', title='Back in stock', message='Order now.', product_id=watch.id
        )

        assert notification.is_read is False
        assert notification.product == watch

    def test_create_without_product(self, db):
        notification = create_notification(user_id='user-1', title='Hello', message='Welcome aboard.')

        assert notification.product is None

    def test_create_unknown_product(self, db):
        with pytest.raises(InvalidNotificationError):
            create_notification(user_id='user-1', title='Hello', message='Hi.', product_id=999)


@pytest.mark.django_db
class TestReadState:
    """Test listing and read state."""

    def test_newest_first(self, inbox):
        titles = [n.title for n in get_notifications(user_id='user-1')]

        assert titles == ['Old news', 'Price drop', 'Welcome']

    def test_unread_count(self, inbox):
        assert get_unread_count(user_id='user-1') == 2
        assert get_unread_count(user_id='user-2') == 1

    def test_mark_as_read(self, inbox):
        assert mark_as_read(notification_id=inbox[0].id) is True

        inbox[0].refresh_from_db()
        assert inbox[0].is_read is True
        assert get_unread_count(user_id='user-1') == 1

    def test_mark_as_read_already_read(self, inbox):
        assert mark_as_read(notification_id=inbox[2].id) is False

    def test_mark_as_read_missing(self, db):
        assert mark_as_read(notification_id=999) is False

    def test_mark_all_as_read(self, inbox):
        assert mark_all_as_read(user_id='user-1') == 2

        assert get_unread_count(user_id='user-1') == 0
        assert get_unread_count(user_id='user-2') == 1


@pytest.mark.django_db
class TestDeleteNotification:

    def test_delete(self, inbox):
        assert delete_notification(notification_id=inbox[0].id) is True
        assert not Notification.objects.filter(id=inbox[0].id).exists()

    def test_delete_missing_is_noop(self, db):
        assert delete_notification(notification_id=999) is False

    def test_delete_all(self, inbox):
        assert delete_all_notifications(user_id='user-1') == 3
        assert Notification.objects.filter(user_id='user-2').count() == 1

    def test_product_deletion_keeps_notification(self, inbox, watch):
        watch.delete()

        inbox[1].refresh_from_db()
        assert inbox[1].product is None
