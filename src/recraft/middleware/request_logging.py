import logging

logger = logging.getLogger(__name__)


class RequestLogging(object):
    """Middleware that logs the method and path of every request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        logger.info(f"{request.method} {request.path}")
        return self.get_response(request)
