import logging
from enum import Enum

logger = logging.getLogger(__name__)


class PurchaseState(str, Enum):
    IDLE = "Idle"
    APPROVING = "Approving"
    APPROVED = "Approved"
    PURCHASING = "Purchasing"
    CONFIRMED = "Confirmed"
    FAILED = "Failed"


TRANSITIONS = {
    PurchaseState.IDLE: {
        PurchaseState.APPROVING,
        PurchaseState.PURCHASING,
        PurchaseState.FAILED,
    },
    PurchaseState.APPROVING: {PurchaseState.APPROVED, PurchaseState.FAILED},
    PurchaseState.APPROVED: {PurchaseState.PURCHASING, PurchaseState.FAILED},
    PurchaseState.PURCHASING: {PurchaseState.CONFIRMED, PurchaseState.FAILED},
    PurchaseState.CONFIRMED: set(),
    PurchaseState.FAILED: {PurchaseState.IDLE},
}


class InvalidPurchaseTransition(Exception):
    pass


class PurchaseStateMachine:
    """
    Tracks one purchase attempt. A new attempt starts at Idle; the stable
    token rail goes Idle -> Approving -> Approved -> Purchasing -> Confirmed,
    skipping the approval steps when the allowance already covers the price.
    """

    def __init__(self):
        self.state = PurchaseState.IDLE
        self.history = [PurchaseState.IDLE]
        self.error = None
        self.transactions = {}

    def transition(self, state, transaction_hash=None):
        state = PurchaseState(state)
        if state not in TRANSITIONS[self.state]:
            raise InvalidPurchaseTransition(
                f"Cannot move purchase from {self.state.value} to {state.value}"
            )
        logger.debug(f"Purchase {self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)
        if transaction_hash:
            self.transactions[state] = transaction_hash

    def fail(self, error):
        self.error = error
        if self.state != PurchaseState.FAILED:
            self.transition(PurchaseState.FAILED)

    def reset(self):
        self.transition(PurchaseState.IDLE)
        self.error = None

    @property
    def is_terminal(self):
        return self.state in (PurchaseState.CONFIRMED, PurchaseState.FAILED)
