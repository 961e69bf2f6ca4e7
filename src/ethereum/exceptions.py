class Error(Exception):
    def __init__(self, message="", trigger=None):
        super().__init__(message)
        self.message = message
        self.trigger = trigger


class UserRejected(Error):
    pass


class WrongNetwork(Error):
    def __init__(self, expected_chain_id, actual_chain_id, trigger=None):
        self.expected_chain_id = expected_chain_id
        self.actual_chain_id = actual_chain_id
        super().__init__(
            f"Connected to chain {actual_chain_id}, expected {expected_chain_id}",
            trigger=trigger,
        )


class InsufficientBalance(Error):
    """Raised before submission when the buyer cannot cover the price.

    Amounts are in minor units of `denomination`.
    """

    def __init__(self, required=None, available=None, denomination=None, trigger=None):
        self.required = required
        self.available = available
        self.denomination = denomination
        if required is None or available is None:
            message = "Insufficient balance"
        else:
            message = (
                f"Insufficient balance: requires {required}, "
                f"has {available} (short {self.shortfall})"
            )
        super().__init__(message, trigger=trigger)

    @property
    def shortfall(self):
        if self.required is None or self.available is None:
            return None
        return max(self.required - self.available, 0)


class InsufficientNativeBalance(InsufficientBalance):
    pass


class InsufficientStableBalance(InsufficientBalance):
    pass


class RateLimited(Error):
    pass


class PaymentRailNotConfigured(Error):
    pass


class BridgeSimulationFailed(Error):
    pass


class BridgeNotEnabled(PaymentRailNotConfigured):
    pass


class EventNotFound(Error):
    pass


class TransactionFailed(Error):
    def __init__(self, transaction_hash, trigger=None):
        self.transaction_hash = transaction_hash
        super().__init__(f"Transaction {transaction_hash} reverted", trigger=trigger)


class PurchaseFailed(Error):
    pass
