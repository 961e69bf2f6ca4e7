import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from utils.http import RequestMethods

logger = logging.getLogger(__name__)

ENDPOINTS = {
    "institutions": "/api/institutions",
    "ngos": "/api/ngos",
    "products": "/api/products",
    "donations": "/api/donations",
    "blockchain": "/api/blockchain",
}


@api_view([RequestMethods.GET])
@permission_classes(())
def index(request):
    return Response(
        {
            "message": "ReCraft API",
            "version": "1.0.0",
            "endpoints": ENDPOINTS,
        }
    )


@api_view([RequestMethods.GET])
@permission_classes(())
def healthcheck(request):
    """
    Reports process and database status.
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        database = "connected"
    except DatabaseError as e:
        logger.warning(f"Database health check failed: {e}")
        database = "disconnected"

    return Response(
        {
            "status": "OK",
            "timestamp": timezone.now().isoformat(),
            "database": database,
        }
    )


def route_not_found(request, exception=None):
    return JsonResponse({"error": "Route not found"}, status=404)
