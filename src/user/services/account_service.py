import logging

from django.db import transaction
from rest_framework.authtoken.models import Token

from user.models import User

logger = logging.getLogger(__name__)


class AccountService:
    """Creates accounts, checks credentials and issues bearer tokens."""

    @staticmethod
    def email_taken(email: str) -> bool:
        return User.objects.filter(email__iexact=email).exists()

    @staticmethod
    @transaction.atomic
    def create_account(email: str, password: str, account_type: str) -> User:
        email = email.lower()
        return User.objects.create_user(
            username=email,
            email=email,
            password=password,
            account_type=account_type,
        )

    @staticmethod
    def authenticate(email: str, password: str, account_type: str):
        """
        Returns the account matching `email` and `password`, or None.

        Accounts of another type never match, so an NGO cannot log in
        through the institution endpoint and vice versa.
        """
        if not email or not password:
            return None

        user = User.objects.filter(
            email__iexact=email, account_type=account_type, is_active=True
        ).first()
        if user is None or not user.check_password(password):
            logger.info(f"Failed {account_type} login for {email}")
            return None
        return user

    @staticmethod
    def issue_token(user: User) -> str:
        """Replaces any existing token of `user` with a fresh one."""
        Token.objects.filter(user=user).delete()
        return Token.objects.create(user=user).key
