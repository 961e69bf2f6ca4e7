from django.test import SimpleTestCase, override_settings

from ethereum.exceptions import (
    BridgeSimulationFailed,
    InsufficientNativeBalance,
    InsufficientStableBalance,
    PaymentRailNotConfigured,
    PurchaseFailed,
    RateLimited,
    TransactionFailed,
    UserRejected,
    WrongNetwork,
)
from ethereum.lib import Denomination
from purchase.errors import describe_purchase_error
from purchase.session import WalletNotConnected


@override_settings(WEB3_NETWORK="sepolia")
class DescribePurchaseErrorTests(SimpleTestCase):
    def test_stable_shortfall(self):
        error = InsufficientStableBalance(
            required=20 * 10**6, available=5 * 10**6, denomination=Denomination.STABLE
        )
        self.assertEqual(
            describe_purchase_error(error),
            "Insufficient PYUSD balance: requires 20 PYUSD, has 5 PYUSD "
            "(short 15 PYUSD).",
        )

    def test_native_shortfall(self):
        error = InsufficientNativeBalance(
            required=10**16, available=0, denomination=Denomination.NATIVE
        )
        self.assertEqual(
            describe_purchase_error(error),
            "Insufficient ETH balance: requires 0.01 ETH, has 0 ETH (short 0.01 ETH).",
        )

    def test_gas_shortfall_from_provider(self):
        self.assertEqual(
            describe_purchase_error(InsufficientNativeBalance()),
            "Insufficient funds for gas fees. Make sure you have enough Sepolia ETH.",
        )

    def test_wrong_network(self):
        self.assertEqual(
            describe_purchase_error(WrongNetwork(11155111, 1)),
            "Wrong network: please switch to Sepolia (connected to Ethereum).",
        )

    def test_each_category_has_its_own_message(self):
        errors = [
            UserRejected(),
            WrongNetwork(11155111, 1),
            InsufficientNativeBalance(),
            InsufficientStableBalance(),
            RateLimited(),
            PaymentRailNotConfigured("PYUSD is not configured"),
            BridgeSimulationFailed("no route"),
            TransactionFailed("0xabc"),
            PurchaseFailed("boom"),
            WalletNotConnected(),
        ]
        messages = [describe_purchase_error(error) for error in errors]
        self.assertEqual(len(set(messages)), len(messages))

    def test_known_messages(self):
        self.assertEqual(
            describe_purchase_error(UserRejected()),
            "Transaction was rejected by user.",
        )
        self.assertEqual(
            describe_purchase_error(RateLimited()),
            "RPC rate limit reached. Please wait a moment and try again.",
        )
        self.assertEqual(
            describe_purchase_error(BridgeSimulationFailed("no route")),
            "Cross-chain simulation failed: no route",
        )
        self.assertEqual(
            describe_purchase_error(PurchaseFailed("boom")), "Purchase failed: boom"
        )

    def test_unknown_error(self):
        self.assertEqual(
            describe_purchase_error(ValueError("bad")), "Purchase failed: bad"
        )
