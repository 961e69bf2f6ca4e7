from django.test import SimpleTestCase

from ethereum.exceptions import RateLimited
from purchase.state import (
    InvalidPurchaseTransition,
    PurchaseState,
    PurchaseStateMachine,
)


class PurchaseStateMachineTests(SimpleTestCase):
    def setUp(self):
        self.machine = PurchaseStateMachine()

    def test_starts_idle(self):
        self.assertEqual(self.machine.state, PurchaseState.IDLE)
        self.assertFalse(self.machine.is_terminal)

    def test_stable_token_path(self):
        self.machine.transition(PurchaseState.APPROVING)
        self.machine.transition(PurchaseState.APPROVED, transaction_hash="0xapprove")
        self.machine.transition(PurchaseState.PURCHASING)
        self.machine.transition(PurchaseState.CONFIRMED, transaction_hash="0xbuy")

        self.assertEqual(
            self.machine.history,
            [
                PurchaseState.IDLE,
                PurchaseState.APPROVING,
                PurchaseState.APPROVED,
                PurchaseState.PURCHASING,
                PurchaseState.CONFIRMED,
            ],
        )
        self.assertEqual(
            self.machine.transactions,
            {
                PurchaseState.APPROVED: "0xapprove",
                PurchaseState.CONFIRMED: "0xbuy",
            },
        )
        self.assertTrue(self.machine.is_terminal)

    def test_purchase_can_skip_approval(self):
        self.machine.transition(PurchaseState.PURCHASING)
        self.assertEqual(self.machine.state, PurchaseState.PURCHASING)

    def test_cannot_purchase_while_approving(self):
        self.machine.transition(PurchaseState.APPROVING)
        with self.assertRaises(InvalidPurchaseTransition):
            self.machine.transition(PurchaseState.PURCHASING)

    def test_confirmed_is_final(self):
        self.machine.transition(PurchaseState.PURCHASING)
        self.machine.transition(PurchaseState.CONFIRMED)
        with self.assertRaises(InvalidPurchaseTransition):
            self.machine.transition(PurchaseState.IDLE)

    def test_fail_records_error_and_reset_returns_to_idle(self):
        error = RateLimited("slow down")
        self.machine.transition(PurchaseState.APPROVING)
        self.machine.fail(error)

        self.assertEqual(self.machine.state, PurchaseState.FAILED)
        self.assertIs(self.machine.error, error)

        self.machine.reset()
        self.assertEqual(self.machine.state, PurchaseState.IDLE)
        self.assertIsNone(self.machine.error)

    def test_accepts_state_values(self):
        self.machine.transition("Purchasing")
        self.assertEqual(self.machine.state, PurchaseState.PURCHASING)
