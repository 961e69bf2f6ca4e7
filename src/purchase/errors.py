from ethereum.exceptions import (
    BridgeSimulationFailed,
    Error,
    InsufficientNativeBalance,
    InsufficientStableBalance,
    PaymentRailNotConfigured,
    PurchaseFailed,
    RateLimited,
    TransactionFailed,
    UserRejected,
    WrongNetwork,
)
from ethereum.lib import NETWORKS, format_amount, get_network_config
from purchase.session import WalletNotConnected


def _chain_name(chain_id):
    for network in NETWORKS.values():
        if network["chain_id"] == int(chain_id):
            return network["name"]
    return f"chain {chain_id}"


def _insufficient(e, ticker):
    if e.shortfall is None:
        return f"Insufficient {ticker} balance."
    return (
        f"Insufficient {ticker} balance: requires "
        f"{format_amount(e.required, e.denomination)} {ticker}, has "
        f"{format_amount(e.available, e.denomination)} {ticker} "
        f"(short {format_amount(e.shortfall, e.denomination)} {ticker})."
    )


def describe_purchase_error(e):
    """Returns the user-facing message for a failed purchase."""
    if isinstance(e, UserRejected):
        return "Transaction was rejected by user."
    if isinstance(e, WrongNetwork):
        return (
            f"Wrong network: please switch to {_chain_name(e.expected_chain_id)} "
            f"(connected to {_chain_name(e.actual_chain_id)})."
        )
    if isinstance(e, InsufficientStableBalance):
        return _insufficient(e, "PYUSD")
    if isinstance(e, InsufficientNativeBalance):
        network = get_network_config()["name"]
        if e.shortfall is None:
            return (
                "Insufficient funds for gas fees. "
                f"Make sure you have enough {network} ETH."
            )
        return _insufficient(e, "ETH")
    if isinstance(e, RateLimited):
        return "RPC rate limit reached. Please wait a moment and try again."
    if isinstance(e, WalletNotConnected):
        return "Please connect your wallet first."
    if isinstance(e, PaymentRailNotConfigured):
        return e.message
    if isinstance(e, BridgeSimulationFailed):
        return f"Cross-chain simulation failed: {e.message}"
    if isinstance(e, TransactionFailed):
        return f"Transaction {e.transaction_hash} was reverted on chain."
    if isinstance(e, PurchaseFailed):
        return f"Purchase failed: {e.message}"
    if isinstance(e, Error):
        return f"Purchase failed: {e.message or e}"
    return f"Purchase failed: {e}"
