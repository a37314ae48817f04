"""Caller identification.

There are no accounts: clients send an opaque id in the ``X-User-ID``
header. Some endpoints accept anonymous callers, others require the header.
"""
from typing import Optional

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter

from .exceptions import InvalidUserIdError, MissingUserIdError

USER_ID_HEADER = 'X-User-ID'
USER_ID_MAX_LENGTH = 128


def user_id_parameter(required: bool) -> OpenApiParameter:
    return OpenApiParameter(
        USER_ID_HEADER,
        OpenApiTypes.STR,
        OpenApiParameter.HEADER,
        required=required,
        description='Opaque caller id',
    )


def get_user_id(request) -> Optional[str]:
    """
    Return the caller id, or None when the header is absent or blank.

    Raises:
        InvalidUserIdError: If the id is longer than USER_ID_MAX_LENGTH (HTTP 400)
    """
    value = request.headers.get(USER_ID_HEADER)
    if value is None:
        return None
    value = value.strip()
    if len(value) > USER_ID_MAX_LENGTH:
        raise InvalidUserIdError()
    return value or None


def require_user_id(request) -> str:
    """
    Return the caller id.

    Raises:
        MissingUserIdError: If the header is absent or blank (HTTP 400)
    """
    user_id = get_user_id(request)
    if user_id is None:
        raise MissingUserIdError()
    return user_id
