import logging

from ethereum.exceptions import InsufficientNativeBalance
from ethereum.lib import Denomination, PaymentMethod
from purchase.services.payment_rail import PaymentRail
from purchase.state import PurchaseState

logger = logging.getLogger(__name__)


class NativePaymentRail(PaymentRail):
    """Pays the listed native price by calling `purchaseProductWithETH`."""

    payment_method = PaymentMethod.ETH
    denomination = Denomination.NATIVE

    def purchase(self, product, state, **options):
        signer = self.session.require_signer()
        price = self.listed_price(product)

        self.rpc.ensure_chain(self.chain_id)
        balance = self.rpc.native_balance(signer.address)
        if balance < price:
            raise InsufficientNativeBalance(
                required=price, available=balance, denomination=self.denomination
            )

        state.transition(PurchaseState.PURCHASING)
        transaction_hash = self.rpc.send_transaction(
            self.contract.functions.purchaseProductWithETH(product.blockchain_id),
            signer,
            value=price,
        )
        logger.info(f"Purchase transaction sent: {transaction_hash}")
        receipt = self.rpc.wait_for_receipt(transaction_hash)
        state.transition(PurchaseState.CONFIRMED, transaction_hash=transaction_hash)

        return self._result(transaction_hash, receipt["blockNumber"], price)
