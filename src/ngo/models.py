from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from user.models import User
from utils.models import AddressContactModel, DefaultModel


class NGO(DefaultModel, AddressContactModel):
    """An organisation whose artisans craft products from donations."""

    user = models.OneToOneField(
        User,
        on_delete=models.CASCADE,
        related_name="ngo",
    )
    name = models.CharField(max_length=255)
    registration_number = models.CharField(max_length=128, unique=True)
    # Stored lowercased
    wallet_address = models.CharField(max_length=42, unique=True)
    description = models.TextField(max_length=1000, blank=True, default="")
    verified = models.BooleanField(default=False)

    total_products_crafted = models.PositiveIntegerField(default=0)
    # Minor units: wei for the native asset, 6-decimal units for the stable token
    total_revenue_native = models.DecimalField(
        max_digits=78, decimal_places=0, default=0
    )
    total_revenue_stable = models.DecimalField(
        max_digits=78, decimal_places=0, default=0
    )
    rating = models.DecimalField(
        max_digits=3,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )

    class Meta:
        verbose_name = "NGO"
        verbose_name_plural = "NGOs"

    def __str__(self):
        return f"{self.name} ({self.registration_number})"

    @property
    def email(self):
        return self.user.email


class Artisan(DefaultModel):
    ngo = models.ForeignKey(NGO, on_delete=models.CASCADE, related_name="artisans")
    name = models.CharField(max_length=255)
    wallet_address = models.CharField(max_length=42, blank=True, default="")
    specialization = models.CharField(max_length=255, blank=True, default="")
    joined_date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ["joined_date", "id"]

    def __str__(self):
        return f"{self.name} ({self.ngo.name})"
