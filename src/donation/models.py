from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from donation.exceptions import InvalidStatusTransition
from institution.models import Institution
from ngo.models import NGO
from utils.models import DefaultModel


class Donation(DefaultModel):
    """Off-chain mirror of a donation recorded on the ReCraft contract."""

    class Status(models.TextChoices):
        AVAILABLE = "Available", "Available"
        ACCEPTED = "Accepted", "Accepted"
        CRAFTED = "Crafted", "Crafted"
        SOLD = "Sold", "Sold"

    # Order a donation moves through; no step may be skipped or repeated
    STATUS_ORDER = [
        Status.AVAILABLE,
        Status.ACCEPTED,
        Status.CRAFTED,
        Status.SOLD,
    ]

    MATERIAL_TYPE_CHOICES = [
        ("paper", "paper"),
        ("cardboard", "cardboard"),
        ("notebooks", "notebooks"),
        ("magazines", "magazines"),
        ("newspapers", "newspapers"),
        ("mixed", "mixed"),
    ]

    UNIT_CHOICES = [
        ("sheets", "sheets"),
        ("kg", "kg"),
        ("units", "units"),
        ("boxes", "boxes"),
    ]

    blockchain_id = models.PositiveBigIntegerField(unique=True)
    institution = models.ForeignKey(
        Institution,
        on_delete=models.CASCADE,
        related_name="donations",
    )
    institution_wallet = models.CharField(max_length=42)
    material_type = models.CharField(max_length=16, choices=MATERIAL_TYPE_CHOICES)
    quantity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    unit = models.CharField(max_length=8, choices=UNIT_CHOICES, default="sheets")
    description = models.CharField(max_length=500, blank=True, default="")
    images = models.JSONField(default=list, blank=True)
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.AVAILABLE,
        db_index=True,
    )
    ngo = models.ForeignKey(
        NGO,
        on_delete=models.SET_NULL,
        related_name="accepted_donations",
        null=True,
        blank=True,
    )
    ngo_wallet = models.CharField(max_length=42, blank=True, default="")
    accepted_date = models.DateTimeField(null=True, blank=True)
    transaction_hash = models.CharField(max_length=66, blank=True, default="")
    block_number = models.PositiveBigIntegerField(null=True, blank=True)

    class Meta:
        ordering = ["-created_date", "-id"]

    def __str__(self):
        return f"Donation {self.blockchain_id} ({self.status})"

    def can_advance_to(self, status):
        current = self.STATUS_ORDER.index(self.status)
        return (
            status in self.STATUS_ORDER
            and self.STATUS_ORDER.index(status) == current + 1
        )

    def advance_status(self, status):
        """Moves the donation one step forward. Does not save."""
        if not self.can_advance_to(status):
            raise InvalidStatusTransition(self.status, status)
        self.status = status

    def accept(self, ngo, transaction_hash="", block_number=None):
        self.advance_status(self.Status.ACCEPTED)
        self.ngo = ngo
        self.ngo_wallet = ngo.wallet_address
        self.accepted_date = timezone.now()
        if transaction_hash:
            self.transaction_hash = transaction_hash
        if block_number is not None:
            self.block_number = block_number
