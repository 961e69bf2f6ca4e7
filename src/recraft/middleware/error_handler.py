import logging
import traceback

from django.conf import settings
from django.http import JsonResponse

from utils.sentry import log_error

logger = logging.getLogger(__name__)


class JsonErrorHandler(object):
    """Middleware that turns uncaught exceptions into a JSON 500 response.

    The stack trace is included outside of production.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        logger.error(f"Unhandled error on {request.method} {request.path}")
        log_error(exception)

        body = {"error": str(exception) or "Internal server error"}
        if not settings.PRODUCTION:
            body["stack"] = traceback.format_exception(
                type(exception), exception, exception.__traceback__
            )
        return JsonResponse(body, status=500)
