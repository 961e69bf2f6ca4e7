from django.apps import AppConfig


class EthereumConfig(AppConfig):
    name = "ethereum"
