from django.db import models

from donation.models import Donation
from ethereum.lib import Denomination, PaymentMethod
from institution.models import Institution
from marketplace.revenue import RevenueSplit
from ngo.models import NGO
from utils.models import DefaultModel


class Product(DefaultModel):
    """Off-chain mirror of a product listed on the ReCraft contract."""

    PRODUCT_TYPE_CHOICES = [
        ("decor", "decor"),
        ("frame", "frame"),
        ("lamp", "lamp"),
        ("basket", "basket"),
        ("coaster", "coaster"),
        ("notebook", "notebook"),
        ("gift-box", "gift-box"),
        ("other", "other"),
    ]

    blockchain_id = models.PositiveBigIntegerField(unique=True)
    donation = models.OneToOneField(
        Donation,
        on_delete=models.CASCADE,
        related_name="product",
    )
    donation_blockchain_id = models.PositiveBigIntegerField()
    product_name = models.CharField(max_length=255)
    product_type = models.CharField(
        max_length=16, choices=PRODUCT_TYPE_CHOICES, db_index=True
    )
    description = models.CharField(max_length=1000, blank=True, default="")
    images = models.JSONField(default=list, blank=True)

    ngo = models.ForeignKey(NGO, on_delete=models.CASCADE, related_name="products")
    ngo_wallet = models.CharField(max_length=42)
    artisan_wallet = models.CharField(max_length=42, blank=True, default="")
    artisan_name = models.CharField(max_length=255, blank=True, default="")
    institution = models.ForeignKey(
        Institution,
        on_delete=models.CASCADE,
        related_name="products",
    )
    institution_wallet = models.CharField(max_length=42)

    # Listing transaction
    transaction_hash = models.CharField(max_length=66, blank=True, default="")
    block_number = models.PositiveBigIntegerField(null=True, blank=True)

    # One-way: set once by the settlement write
    sold = models.BooleanField(default=False, db_index=True)
    sold_date = models.DateTimeField(null=True, blank=True)
    buyer_wallet = models.CharField(max_length=42, blank=True, default="")
    sale_transaction_hash = models.CharField(max_length=66, blank=True, default="")
    sale_block_number = models.PositiveBigIntegerField(null=True, blank=True)
    payment_method = models.CharField(
        max_length=16, choices=PaymentMethod.choices, null=True, blank=True
    )

    views = models.PositiveIntegerField(default=0)

    # Revenue breakdown, in minor units of `revenue_denomination`
    ngo_share = models.DecimalField(
        max_digits=78, decimal_places=0, null=True, blank=True
    )
    institution_share = models.DecimalField(
        max_digits=78, decimal_places=0, null=True, blank=True
    )
    platform_share = models.DecimalField(
        max_digits=78, decimal_places=0, null=True, blank=True
    )
    revenue_total = models.DecimalField(
        max_digits=78, decimal_places=0, null=True, blank=True
    )
    revenue_denomination = models.CharField(
        max_length=8, choices=Denomination.choices, null=True, blank=True
    )

    class Meta:
        ordering = ["-created_date", "-id"]

    def __str__(self):
        return f"{self.product_name} ({self.blockchain_id})"

    def get_price(self, denomination):
        """Returns the listed price in minor units, or None if not listed."""
        for price in self.prices.all():
            if price.denomination == denomination:
                return int(price.amount_minor)
        return None

    @property
    def revenue(self):
        if self.revenue_total is None:
            return None
        return RevenueSplit(
            ngo_share=int(self.ngo_share),
            institution_share=int(self.institution_share),
            platform_share=int(self.platform_share),
            total=int(self.revenue_total),
            denomination=self.revenue_denomination,
        )


class ProductPrice(DefaultModel):
    """Listed price of a product in one denomination."""

    product = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="prices"
    )
    denomination = models.CharField(max_length=8, choices=Denomination.choices)
    amount_minor = models.DecimalField(max_digits=78, decimal_places=0)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["product", "denomination"],
                name="unique_product_price_denomination",
            )
        ]

    def __str__(self):
        return f"{self.amount_minor} {self.denomination}"
