from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Login account of an institution or an NGO.

    The organisation profile hangs off the account as `user.institution` or
    `user.ngo` depending on `account_type`.
    """

    INSTITUTION = "INSTITUTION"
    NGO = "NGO"
    ACCOUNT_TYPE_CHOICES = [
        (INSTITUTION, INSTITUTION),
        (NGO, NGO),
    ]

    email = models.EmailField(unique=True)
    account_type = models.CharField(
        max_length=16, choices=ACCOUNT_TYPE_CHOICES, null=True, blank=True
    )

    def __str__(self):
        return f"{self.email} ({self.account_type or 'No type'})"

    @property
    def is_institution(self):
        return self.account_type == self.INSTITUTION and hasattr(self, "institution")

    @property
    def is_ngo(self):
        return self.account_type == self.NGO and hasattr(self, "ngo")
