from django.apps import AppConfig


class DonationConfig(AppConfig):
    name = "donation"
