import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("donation", "0001_initial"),
        ("institution", "0001_initial"),
        ("ngo", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.AutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_date", models.DateTimeField(auto_now_add=True)),
                ("updated_date", models.DateTimeField(auto_now=True)),
                ("blockchain_id", models.PositiveBigIntegerField(unique=True)),
                ("donation_blockchain_id", models.PositiveBigIntegerField()),
                ("product_name", models.CharField(max_length=255)),
                (
                    "product_type",
                    models.CharField(
                        choices=[
                            ("decor", "decor"),
                            ("frame", "frame"),
                            ("lamp", "lamp"),
                            ("basket", "basket"),
                            ("coaster", "coaster"),
                            ("notebook", "notebook"),
                            ("gift-box", "gift-box"),
                            ("other", "other"),
                        ],
                        db_index=True,
                        max_length=16,
                    ),
                ),
                (
                    "description",
                    models.CharField(blank=True, default="", max_length=1000),
                ),
                ("images", models.JSONField(blank=True, default=list)),
                ("ngo_wallet", models.CharField(max_length=42)),
                (
                    "artisan_wallet",
                    models.CharField(blank=True, default="", max_length=42),
                ),
                (
                    "artisan_name",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                ("institution_wallet", models.CharField(max_length=42)),
                (
                    "transaction_hash",
                    models.CharField(blank=True, default="", max_length=66),
                ),
                ("block_number", models.PositiveBigIntegerField(blank=True, null=True)),
                ("sold", models.BooleanField(db_index=True, default=False)),
                ("sold_date", models.DateTimeField(blank=True, null=True)),
                (
                    "buyer_wallet",
                    models.CharField(blank=True, default="", max_length=42),
                ),
                (
                    "sale_transaction_hash",
                    models.CharField(blank=True, default="", max_length=66),
                ),
                (
                    "sale_block_number",
                    models.PositiveBigIntegerField(blank=True, null=True),
                ),
                (
                    "payment_method",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("ETH", "ETH"),
                            ("PYUSD", "PYUSD"),
                            ("CROSS_CHAIN_ETH", "Cross-chain ETH"),
                        ],
                        max_length=16,
                        null=True,
                    ),
                ),
                ("views", models.PositiveIntegerField(default=0)),
                (
                    "ngo_share",
                    models.DecimalField(
                        blank=True, decimal_places=0, max_digits=78, null=True
                    ),
                ),
                (
                    "institution_share",
                    models.DecimalField(
                        blank=True, decimal_places=0, max_digits=78, null=True
                    ),
                ),
                (
                    "platform_share",
                    models.DecimalField(
                        blank=True, decimal_places=0, max_digits=78, null=True
                    ),
                ),
                (
                    "revenue_total",
                    models.DecimalField(
                        blank=True, decimal_places=0, max_digits=78, null=True
                    ),
                ),
                (
                    "revenue_denomination",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("NATIVE", "Native asset"),
                            ("STABLE", "Stable token"),
                        ],
                        max_length=8,
                        null=True,
                    ),
                ),
                (
                    "donation",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="product",
                        to="donation.donation",
                    ),
                ),
                (
                    "institution",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="products",
                        to="institution.institution",
                    ),
                ),
                (
                    "ngo",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="products",
                        to="ngo.ngo",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_date", "-id"],
            },
        ),
        migrations.CreateModel(
            name="ProductPrice",
            fields=[
                (
                    "id",
                    models.AutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_date", models.DateTimeField(auto_now_add=True)),
                ("updated_date", models.DateTimeField(auto_now=True)),
                (
                    "denomination",
                    models.CharField(
                        choices=[
                            ("NATIVE", "Native asset"),
                            ("STABLE", "Stable token"),
                        ],
                        max_length=8,
                    ),
                ),
                (
                    "amount_minor",
                    models.DecimalField(decimal_places=0, max_digits=78),
                ),
                (
                    "product",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="prices",
                        to="marketplace.product",
                    ),
                ),
            ],
        ),
        migrations.AddConstraint(
            model_name="productprice",
            constraint=models.UniqueConstraint(
                fields=("product", "denomination"),
                name="unique_product_price_denomination",
            ),
        ),
    ]
