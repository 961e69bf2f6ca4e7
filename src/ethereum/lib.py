from decimal import ROUND_HALF_UP, Context, Decimal

from django.conf import settings
from django.db import models

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# uint256 fits in 78 digits
UINT256_CONTEXT = Context(prec=78)


class Denomination(models.TextChoices):
    NATIVE = "NATIVE", "Native asset"
    STABLE = "STABLE", "Stable token"


class PaymentMethod(models.TextChoices):
    ETH = "ETH", "ETH"
    PYUSD = "PYUSD", "PYUSD"
    CROSS_CHAIN_ETH = "CROSS_CHAIN_ETH", "Cross-chain ETH"


PAYMENT_METHOD_DENOMINATIONS = {
    PaymentMethod.ETH: Denomination.NATIVE,
    PaymentMethod.PYUSD: Denomination.STABLE,
    PaymentMethod.CROSS_CHAIN_ETH: Denomination.NATIVE,
}

NETWORKS = {
    "localhost": {
        "name": "Localhost",
        "chain_id": 31337,
        "explorer_url": "http://localhost:4000/tx/",
    },
    "sepolia": {
        "name": "Sepolia",
        "chain_id": 11155111,
        "explorer_url": "https://sepolia.etherscan.io/tx/",
    },
    "polygon": {
        "name": "Polygon",
        "chain_id": 137,
        "explorer_url": "https://polygonscan.com/tx/",
    },
    "mainnet": {
        "name": "Ethereum",
        "chain_id": 1,
        "explorer_url": "https://etherscan.io/tx/",
    },
}


def get_network_config(network=None):
    """Get the configuration of `network`, defaulting to WEB3_NETWORK.

    Unknown networks fall back to the local node configuration.
    """
    network = network or settings.WEB3_NETWORK
    return NETWORKS.get(network, NETWORKS["localhost"])


def get_explorer_url(transaction_hash, network=None):
    return f"{get_network_config(network)['explorer_url']}{transaction_hash}"


def get_denomination_config(denomination):
    if denomination == Denomination.NATIVE:
        return {"ticker": "ETH", "decimals": settings.NATIVE_DECIMALS}
    if denomination == Denomination.STABLE:
        return {"ticker": "PYUSD", "decimals": settings.STABLE_DECIMALS}
    raise ValueError(f"Unknown denomination `{denomination}`")


def denomination_for_payment_method(payment_method):
    try:
        return PAYMENT_METHOD_DENOMINATIONS[PaymentMethod(payment_method)]
    except ValueError:
        raise ValueError(f"Unknown payment method `{payment_method}`")


def to_minor_units(amount, denomination):
    """Converts a human-readable `amount` into integer minor units.

    Every price conversion goes through here so that a value in one
    denomination is never scaled with the other's decimals. Digits beyond
    the denomination's precision are rounded half up.

    Returns:
        int -- Amount in the smallest unit of `denomination`.
    """
    value = Decimal(str(amount))
    if value < 0:
        raise ValueError("`amount` must be a positive number")

    decimals = get_denomination_config(denomination)["decimals"]
    scaled = value.scaleb(decimals, context=UINT256_CONTEXT).quantize(
        Decimal(1), rounding=ROUND_HALF_UP, context=UINT256_CONTEXT
    )
    return int(scaled)


def from_minor_units(amount_minor, denomination):
    decimals = get_denomination_config(denomination)["decimals"]
    value = Decimal(int(amount_minor)).scaleb(-decimals, context=UINT256_CONTEXT)
    return value.normalize(context=UINT256_CONTEXT)


def format_amount(amount_minor, denomination):
    """Returns `amount_minor` as a plain decimal string, e.g. "0.01"."""
    value = from_minor_units(amount_minor, denomination)
    return f"{value:f}"


def native_to_stable_minor(native_minor, rate=None):
    """Derives a stable-token price from a native price at a fixed rate."""
    rate = Decimal(str(rate if rate is not None else settings.NATIVE_TO_STABLE_RATE))
    native = from_minor_units(native_minor, Denomination.NATIVE)
    return to_minor_units(UINT256_CONTEXT.multiply(native, rate), Denomination.STABLE)


def is_configured_address(address):
    return bool(address) and address.lower() != ZERO_ADDRESS
