from django.conf import settings
from web3 import Web3

from utils.sentry import log_error


class Web3Provider:
    """Process-wide Web3 connection to WEB3_PROVIDER_URL.

    The provider is created lazily on first use so importing this module
    never opens a connection.
    """

    _instance = None
    _w3 = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Web3Provider, cls).__new__(cls)
        return cls._instance

    @classmethod
    def _initialize_provider(cls):
        try:
            cls._w3 = Web3(Web3.HTTPProvider(settings.WEB3_PROVIDER_URL))
        except Exception as e:
            log_error(e, message="Could not configure web3 provider")
            cls._w3 = None

    @property
    def w3(self):
        if self._w3 is None:
            self._initialize_provider()
        return self._w3

    @classmethod
    def reset(cls):
        cls._w3 = None


web3_provider = Web3Provider()
