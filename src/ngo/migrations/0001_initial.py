import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="NGO",
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
                ("address", models.JSONField(blank=True, default=dict)),
                ("contact_person", models.JSONField(blank=True, default=dict)),
                ("name", models.CharField(max_length=255)),
                (
                    "registration_number",
                    models.CharField(max_length=128, unique=True),
                ),
                ("wallet_address", models.CharField(max_length=42, unique=True)),
                (
                    "description",
                    models.TextField(blank=True, default="", max_length=1000),
                ),
                ("verified", models.BooleanField(default=False)),
                ("total_products_crafted", models.PositiveIntegerField(default=0)),
                (
                    "total_revenue_native",
                    models.DecimalField(decimal_places=0, default=0, max_digits=78),
                ),
                (
                    "total_revenue_stable",
                    models.DecimalField(decimal_places=0, default=0, max_digits=78),
                ),
                (
                    "rating",
                    models.DecimalField(
                        decimal_places=2,
                        default=0,
                        max_digits=3,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(5),
                        ],
                    ),
                ),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="ngo",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "NGO",
                "verbose_name_plural": "NGOs",
            },
        ),
        migrations.CreateModel(
            name="Artisan",
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
                ("name", models.CharField(max_length=255)),
                (
                    "wallet_address",
                    models.CharField(blank=True, default="", max_length=42),
                ),
                (
                    "specialization",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                (
                    "joined_date",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                (
                    "ngo",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="artisans",
                        to="ngo.ngo",
                    ),
                ),
            ],
            options={
                "ordering": ["joined_date", "id"],
            },
        ),
    ]
