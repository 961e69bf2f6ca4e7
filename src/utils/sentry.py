import logging

from sentry_sdk import capture_exception, capture_message, new_scope

logger = logging.getLogger(__name__)


def log_error(e, message=None, extra=None):
    """Captures an exception with the sentry sdk.

    Arguments:
        e (Exception)
        message (str) -- Optional message for additional info
        extra (dict) -- Optional values attached to the sentry event
    """
    from django.conf import settings

    if not settings.PRODUCTION:
        logger.error(f"{message or 'Error'}: {e}")

    with new_scope() as scope:
        if message is not None:
            scope.set_extra("message", message)
        for key, value in (extra or {}).items():
            scope.set_extra(key, value)
        capture_exception(e)


def log_info(message, error=None):
    """Captures a message with the sentry sdk.

    Arguments:
        message (str)
        error (obj) -- Optional error to send with the message
    """
    from django.conf import settings

    if not settings.PRODUCTION:
        logger.info(f"{message} {error or ''}".strip())

    with new_scope() as scope:
        if error is not None:
            scope.set_extra("error", error)
        capture_message(message)
