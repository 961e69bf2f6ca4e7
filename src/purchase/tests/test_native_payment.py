from django.test import SimpleTestCase, override_settings

from ethereum.exceptions import InsufficientNativeBalance, PurchaseFailed, WrongNetwork
from ethereum.lib import Denomination, PaymentMethod
from ethereum.tests.helpers import TRANSACTION_HASH
from purchase.services.native_payment import NativePaymentRail
from purchase.session import WalletNotConnected, WalletSession
from purchase.state import PurchaseState, PurchaseStateMachine
from purchase.tests.helpers import (
    listed_product,
    mock_contract,
    mock_rpc,
    wallet_session,
)


@override_settings(WEB3_CHAIN_ID=31337)
class NativePaymentRailTests(SimpleTestCase):
    def setUp(self):
        self.session = wallet_session()
        self.rpc = mock_rpc()
        self.contract = mock_contract()
        self.rail = NativePaymentRail(
            self.session, rpc=self.rpc, contract=self.contract
        )
        self.state = PurchaseStateMachine()
        self.product = listed_product(price="0.01")

    def test_purchase_sends_value_and_waits(self):
        self.rpc.native_balance.return_value = 10**18

        result = self.rail.purchase(self.product, self.state)

        self.rpc.ensure_chain.assert_called_once_with(31337)
        self.contract.functions.purchaseProductWithETH.assert_called_once_with(3)
        self.rpc.send_transaction.assert_called_once_with(
            self.contract.functions.purchaseProductWithETH.return_value,
            self.session.require_signer(),
            value=10**16,
        )
        self.rpc.wait_for_receipt.assert_called_once_with(TRANSACTION_HASH)
        self.assertEqual(result.transaction_hash, TRANSACTION_HASH)
        self.assertEqual(result.block_number, 42)
        self.assertEqual(result.payment_method, PaymentMethod.ETH)
        self.assertEqual(result.denomination, Denomination.NATIVE)
        self.assertEqual(result.amount_minor, 10**16)
        self.assertEqual(self.state.state, PurchaseState.CONFIRMED)

    def test_insufficient_balance_sends_nothing(self):
        self.rpc.native_balance.return_value = 10**15

        with self.assertRaises(InsufficientNativeBalance) as context:
            self.rail.purchase(self.product, self.state)

        self.assertEqual(context.exception.shortfall, 9 * 10**15)
        self.rpc.send_transaction.assert_not_called()
        self.assertEqual(self.state.state, PurchaseState.IDLE)

    def test_wrong_network_sends_nothing(self):
        self.rpc.ensure_chain.side_effect = WrongNetwork(31337, 1)

        with self.assertRaises(WrongNetwork):
            self.rail.purchase(self.product, self.state)

        self.rpc.native_balance.assert_not_called()
        self.rpc.send_transaction.assert_not_called()

    def test_requires_connected_wallet(self):
        rail = NativePaymentRail(
            WalletSession(), rpc=self.rpc, contract=self.contract
        )
        with self.assertRaises(WalletNotConnected):
            rail.purchase(self.product, self.state)

    def test_requires_native_price(self):
        product = listed_product(prices={})
        with self.assertRaises(PurchaseFailed):
            self.rail.purchase(product, self.state)
