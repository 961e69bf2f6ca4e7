from django.db import models

from user.models import User
from utils.models import AddressContactModel, DefaultModel


class Institution(DefaultModel, AddressContactModel):
    """A school, college or office that donates recyclable material."""

    SCHOOL = "school"
    COLLEGE = "college"
    OFFICE = "office"
    UNIVERSITY = "university"
    OTHER = "other"
    TYPE_CHOICES = [
        (SCHOOL, SCHOOL),
        (COLLEGE, COLLEGE),
        (OFFICE, OFFICE),
        (UNIVERSITY, UNIVERSITY),
        (OTHER, OTHER),
    ]

    user = models.OneToOneField(
        User,
        on_delete=models.CASCADE,
        related_name="institution",
    )
    name = models.CharField(max_length=255)
    type = models.CharField(max_length=16, choices=TYPE_CHOICES)
    # Stored lowercased
    wallet_address = models.CharField(max_length=42, unique=True)
    verified = models.BooleanField(default=False)

    total_donations = models.PositiveIntegerField(default=0)
    # Minor units: wei for the native asset, 6-decimal units for the stable token
    total_revenue_native = models.DecimalField(
        max_digits=78, decimal_places=0, default=0
    )
    total_revenue_stable = models.DecimalField(
        max_digits=78, decimal_places=0, default=0
    )

    def __str__(self):
        return f"{self.name} ({self.type})"

    @property
    def email(self):
        return self.user.email
