from django.db import models


class DefaultModel(models.Model):
    created_date = models.DateTimeField(auto_now_add=True)
    updated_date = models.DateTimeField(
        auto_now=True,
    )

    class Meta:
        abstract = True


class AddressContactModel(models.Model):
    """Postal address and contact person shared by institutions and NGOs."""

    # street, city, state, country, zip_code, coordinates {latitude, longitude}
    address = models.JSONField(default=dict, blank=True)
    # name, phone, designation
    contact_person = models.JSONField(default=dict, blank=True)

    class Meta:
        abstract = True
