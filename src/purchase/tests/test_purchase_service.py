from unittest.mock import Mock

import requests
from django.test import SimpleTestCase
from web3.exceptions import Web3RPCError

from ethereum.exceptions import PurchaseFailed, RateLimited, UserRejected
from ethereum.lib import Denomination, PaymentMethod
from ethereum.tests.helpers import TRANSACTION_HASH
from purchase.services.native_payment import NativePaymentRail
from purchase.services.payment_rail import PurchaseResult
from purchase.services.purchase_service import PurchaseService
from purchase.state import PurchaseState
from purchase.tests.helpers import listed_product, wallet_session


def purchase_result():
    return PurchaseResult(
        transaction_hash=TRANSACTION_HASH,
        block_number=42,
        payment_method=PaymentMethod.ETH,
        denomination=Denomination.NATIVE,
        amount_minor=10**16,
    )


class PurchaseServiceTests(SimpleTestCase):
    def setUp(self):
        self.session = wallet_session()
        self.marketplace = Mock()
        self.notifier = Mock()
        self.rail = Mock()
        self.service = PurchaseService(
            self.session,
            marketplace=self.marketplace,
            notifier=self.notifier,
            rails={PaymentMethod.ETH: self.rail},
        )
        self.product = listed_product()

    def test_notifies_backend_after_confirmation(self):
        result = purchase_result()
        self.rail.purchase.return_value = result

        self.assertIs(self.service.purchase(self.product, "ETH"), result)

        self.rail.purchase.assert_called_once_with(self.product, self.service.state)
        self.notifier.notify.assert_called_once_with(7, self.session.address, result)

    def test_taxonomy_errors_propagate_without_notifying(self):
        self.rail.purchase.side_effect = UserRejected("Transaction was rejected")

        with self.assertRaises(UserRejected):
            self.service.purchase(self.product, "ETH")

        self.notifier.notify.assert_not_called()
        self.assertEqual(self.service.state.state, PurchaseState.FAILED)

    def test_unknown_errors_become_purchase_failed(self):
        self.rail.purchase.side_effect = RuntimeError("execution reverted")

        with self.assertRaises(PurchaseFailed) as context:
            self.service.purchase(self.product, "ETH")

        self.assertEqual(context.exception.message, "execution reverted")
        self.assertIsInstance(self.service.state.error, PurchaseFailed)

    def test_contract_revert_becomes_purchase_failed(self):
        revert = Web3RPCError(
            "Internal JSON-RPC error.",
            rpc_response={
                "error": {
                    "code": -32603,
                    "message": "reverted with reason string 'Product already sold'",
                }
            },
        )
        self.rail.purchase.side_effect = revert

        with self.assertRaises(PurchaseFailed) as context:
            self.service.purchase(self.product, "ETH")

        self.assertIs(context.exception.trigger, revert)
        self.notifier.notify.assert_not_called()

    def test_raw_rate_limit_is_classified(self):
        response = requests.Response()
        response.status_code = 429
        self.rail.purchase.side_effect = requests.HTTPError(response=response)

        with self.assertRaises(RateLimited):
            self.service.purchase(self.product, "ETH")

    def test_sold_product_is_rejected(self):
        with self.assertRaises(PurchaseFailed):
            self.service.purchase(listed_product(sold=True), "ETH")
        self.rail.purchase.assert_not_called()

    def test_purchase_by_id_fetches_product(self):
        self.marketplace.fetch_product.return_value = self.product
        self.rail.purchase.return_value = purchase_result()

        self.service.purchase_by_id(7, PaymentMethod.ETH)

        self.marketplace.fetch_product.assert_called_once_with(7)
        self.rail.purchase.assert_called_once()

    def test_purchase_by_id_unreachable_backend(self):
        self.marketplace.fetch_product.side_effect = requests.ConnectionError()

        with self.assertRaises(PurchaseFailed):
            self.service.purchase_by_id(7, PaymentMethod.ETH)

    def test_builds_rail_for_payment_method(self):
        service = PurchaseService(
            self.session, marketplace=self.marketplace, notifier=self.notifier
        )
        rail = service.get_rail("ETH")

        self.assertIsInstance(rail, NativePaymentRail)
        self.assertIs(service.get_rail(PaymentMethod.ETH), rail)
