import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("institution", "0001_initial"),
        ("ngo", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Donation",
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
                ("institution_wallet", models.CharField(max_length=42)),
                (
                    "material_type",
                    models.CharField(
                        choices=[
                            ("paper", "paper"),
                            ("cardboard", "cardboard"),
                            ("notebooks", "notebooks"),
                            ("magazines", "magazines"),
                            ("newspapers", "newspapers"),
                            ("mixed", "mixed"),
                        ],
                        max_length=16,
                    ),
                ),
                (
                    "quantity",
                    models.PositiveIntegerField(
                        validators=[django.core.validators.MinValueValidator(1)]
                    ),
                ),
                (
                    "unit",
                    models.CharField(
                        choices=[
                            ("sheets", "sheets"),
                            ("kg", "kg"),
                            ("units", "units"),
                            ("boxes", "boxes"),
                        ],
                        default="sheets",
                        max_length=8,
                    ),
                ),
                (
                    "description",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                ("images", models.JSONField(blank=True, default=list)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Available", "Available"),
                            ("Accepted", "Accepted"),
                            ("Crafted", "Crafted"),
                            ("Sold", "Sold"),
                        ],
                        db_index=True,
                        default="Available",
                        max_length=16,
                    ),
                ),
                (
                    "ngo_wallet",
                    models.CharField(blank=True, default="", max_length=42),
                ),
                ("accepted_date", models.DateTimeField(blank=True, null=True)),
                (
                    "transaction_hash",
                    models.CharField(blank=True, default="", max_length=66),
                ),
                ("block_number", models.PositiveBigIntegerField(blank=True, null=True)),
                (
                    "institution",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="donations",
                        to="institution.institution",
                    ),
                ),
                (
                    "ngo",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="accepted_donations",
                        to="ngo.ngo",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_date", "-id"],
            },
        ),
    ]
