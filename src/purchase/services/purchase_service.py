import logging

import requests

from ethereum.exceptions import Error, PurchaseFailed
from ethereum.lib import PaymentMethod
from ethereum.rpc import classify_rpc_error
from purchase.marketplace_client import MarketplaceClient
from purchase.services.cross_chain_payment import CrossChainPaymentRail
from purchase.services.native_payment import NativePaymentRail
from purchase.services.settlement_notifier import SettlementNotifier
from purchase.services.stable_token_payment import StableTokenPaymentRail
from purchase.state import PurchaseStateMachine
from utils.sentry import log_info

logger = logging.getLogger(__name__)

PAYMENT_RAILS = {
    PaymentMethod.ETH: NativePaymentRail,
    PaymentMethod.PYUSD: StableTokenPaymentRail,
    PaymentMethod.CROSS_CHAIN_ETH: CrossChainPaymentRail,
}


class PurchaseService:
    """
    Runs a purchase on the chosen payment rail and reports the confirmed
    sale to the backend.

    Errors raised by a rail are always members of the purchase error
    taxonomy in `ethereum.exceptions`; anything unrecognised is wrapped in
    PurchaseFailed.
    """

    def __init__(self, session, marketplace=None, notifier=None, rails=None):
        self.session = session
        self.marketplace = marketplace or MarketplaceClient(token=session.token)
        self.notifier = notifier or SettlementNotifier(token=session.token)
        self.rails = rails or {}
        self.state = PurchaseStateMachine()

    def get_rail(self, payment_method):
        payment_method = PaymentMethod(payment_method)
        if payment_method not in self.rails:
            self.rails[payment_method] = PAYMENT_RAILS[payment_method](self.session)
        return self.rails[payment_method]

    def purchase(self, product, payment_method, **options):
        if product.sold:
            raise PurchaseFailed("Product already sold")

        self.state = PurchaseStateMachine()
        try:
            rail = self.get_rail(payment_method)
            result = rail.purchase(product, self.state, **options)
        except Error as e:
            self.state.fail(e)
            log_info(f"Purchase of product {product.id} failed", error=str(e))
            raise
        except Exception as e:
            classified = classify_rpc_error(e)
            if not isinstance(classified, Error):
                classified = PurchaseFailed(str(e), trigger=e)
            self.state.fail(classified)
            raise classified from e

        logger.info(
            f"Purchased product {product.id} via {payment_method}: "
            f"{result.transaction_hash}"
        )
        self.notifier.notify(product.id, self.session.address, result)
        return result

    def purchase_by_id(self, product_id, payment_method, **options):
        try:
            product = self.marketplace.fetch_product(product_id)
        except requests.RequestException as e:
            raise PurchaseFailed(f"Could not load product {product_id}: {e}", trigger=e)
        return self.purchase(product, payment_method, **options)
