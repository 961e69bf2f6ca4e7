import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Institution",
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
                    "type",
                    models.CharField(
                        choices=[
                            ("school", "school"),
                            ("college", "college"),
                            ("office", "office"),
                            ("university", "university"),
                            ("other", "other"),
                        ],
                        max_length=16,
                    ),
                ),
                ("wallet_address", models.CharField(max_length=42, unique=True)),
                ("verified", models.BooleanField(default=False)),
                ("total_donations", models.PositiveIntegerField(default=0)),
                (
                    "total_revenue_native",
                    models.DecimalField(decimal_places=0, default=0, max_digits=78),
                ),
                (
                    "total_revenue_stable",
                    models.DecimalField(decimal_places=0, default=0, max_digits=78),
                ),
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="institution",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "abstract": False,
            },
        ),
    ]
