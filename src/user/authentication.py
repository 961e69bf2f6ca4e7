from datetime import timedelta

from django.conf import settings
from django.utils import timezone
from rest_framework import exceptions
from rest_framework.authentication import TokenAuthentication


class BearerTokenAuthentication(TokenAuthentication):
    """
    Token authentication read from an `Authorization: Bearer <token>` header.

    Tokens older than `AUTH_TOKEN_TTL_DAYS` are rejected.
    """

    keyword = "Bearer"

    def authenticate_credentials(self, key):
        user, token = super().authenticate_credentials(key)

        expires_at = token.created + timedelta(days=settings.AUTH_TOKEN_TTL_DAYS)
        if timezone.now() >= expires_at:
            raise exceptions.AuthenticationFailed("Invalid token")

        return user, token
