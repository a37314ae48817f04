"""Exceptions shared by the query helpers in the core app."""
from rest_framework.exceptions import APIException


class QueryParameterError(Exception):
    """Base exception for malformed paging or sorting parameters."""
    pass


class InvalidSortError(QueryParameterError):
    """Sort field is not sortable or direction is malformed."""
    pass


class InvalidPageError(QueryParameterError):
    """Page index or page size is out of range or not a number."""
    pass


class MissingUserIdError(APIException):
    """Endpoint requires the X-User-ID header."""
    status_code = 400
    default_detail = 'X-User-ID header is required.'
    default_code = 'missing_user_id'


class InvalidUserIdError(APIException):
    """X-User-ID header value is too long."""
    status_code = 400
    default_detail = 'X-User-ID header must be at most 128 characters.'
    default_code = 'invalid_user_id'
