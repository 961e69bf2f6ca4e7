from datetime import timedelta

from django.test import override_settings
from django.utils import timezone
from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase

from user.services.account_service import AccountService
from user.tests.helpers import PASSWORD, TestData, authenticate, create_institution


@override_settings(AUTH_TOKEN_TTL_DAYS=7)
class BearerTokenAuthenticationTests(APITestCase):
    def setUp(self):
        self.institution = create_institution()
        self.user = self.institution.user

    def test_bearer_token(self):
        authenticate(self.client, self.user)

        response = self.client.get("/api/institutions/profile/")

        self.assertEqual(response.status_code, 200)

    def test_token_keyword_is_rejected(self):
        token = Token.objects.create(user=self.user)
        self.client.credentials(HTTP_AUTHORIZATION=f"Token {token.key}")

        response = self.client.get("/api/institutions/profile/")

        self.assertEqual(response.status_code, 401)

    def test_expired_token(self):
        token = authenticate(self.client, self.user)
        Token.objects.filter(pk=token.pk).update(
            created=timezone.now() - timedelta(days=8)
        )

        response = self.client.get("/api/institutions/profile/")

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.data, {"error": "Invalid token"})

    def test_unknown_token(self):
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")

        response = self.client.get("/api/institutions/profile/")

        self.assertEqual(response.status_code, 401)


class AccountServiceTests(APITestCase):
    def setUp(self):
        self.institution = create_institution()

    def test_authenticate_is_case_insensitive_on_email(self):
        user = AccountService.authenticate(
            TestData.institution_email.upper(), PASSWORD, "INSTITUTION"
        )

        self.assertEqual(user, self.institution.user)

    def test_authenticate_checks_account_type(self):
        self.assertIsNone(
            AccountService.authenticate(TestData.institution_email, PASSWORD, "NGO")
        )

    def test_issue_token_replaces_previous(self):
        first = AccountService.issue_token(self.institution.user)
        second = AccountService.issue_token(self.institution.user)

        self.assertNotEqual(first, second)
        self.assertEqual(
            list(Token.objects.values_list("key", flat=True)), [second]
        )

    def test_email_taken(self):
        self.assertTrue(AccountService.email_taken(TestData.institution_email))
        self.assertFalse(AccountService.email_taken("new@school.edu"))
