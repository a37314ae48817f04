import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from apps.notifications.models import Notification
from apps.products.models import Product


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user_client():
    """Return an API client identifying as caller 'user-1'."""
    client = APIClient()
    client.credentials(HTTP_X_USER_ID='user-1')
    return client


@pytest.fixture
def watch(db):
    return Product.objects.create(
        name='Apple Watch Series 9',
        description='Smarter, brighter, and more powerful.',
        price=Decimal('399.00'),
    )


@pytest.fixture
def make_notification(db):
    def _make(user_id='user-1', title='Price drop', message='Now cheaper.', **kwargs):
        return Notification.objects.create(user_id=user_id, title=title, message=message, **kwargs)
    return _make


@pytest.fixture
def inbox(make_notification, watch):
    """Two unread and one read notification for user-1, one for user-2."""
    return [
        make_notification(title='Welcome'),
        make_notification(title='Price drop', product=watch),
        make_notification(title='Old news', is_read=True),
        make_notification(user_id='user-2', title='Not yours'),
    ]
