import logging

from django.conf import settings

from ethereum.contracts import get_stable_token_contract
from ethereum.exceptions import InsufficientStableBalance, PaymentRailNotConfigured
from ethereum.lib import Denomination, PaymentMethod, is_configured_address
from purchase.services.payment_rail import PaymentRail
from purchase.state import PurchaseState

logger = logging.getLogger(__name__)


class StableTokenPaymentRail(PaymentRail):
    """
    Pays the listed stable-token price in two sequential transactions:
    an ERC-20 `approve` for the marketplace contract, then
    `purchaseProductWithPYUSD`.

    The approval is skipped when the current allowance already covers the
    price, so a rerun after an approved-but-unpurchased attempt goes
    straight to the purchase.
    """

    payment_method = PaymentMethod.PYUSD
    denomination = Denomination.STABLE

    def __init__(self, session, token_address=None, token_contract=None, **kwargs):
        super().__init__(session, **kwargs)
        self.token_address = (
            settings.PYUSD_TOKEN_ADDRESS if token_address is None else token_address
        )
        self._token_contract = token_contract

    @property
    def token_contract(self):
        if self._token_contract is None:
            self._token_contract = get_stable_token_contract(
                self.w3, self.token_address
            )
        return self._token_contract

    def purchase(self, product, state, **options):
        if not is_configured_address(self.token_address):
            raise PaymentRailNotConfigured(
                "PYUSD is not configured on this network. Please use ETH payment."
            )
        signer = self.session.require_signer()
        price = self.listed_price(product)
        spender = self.contract.address

        self.rpc.ensure_chain(self.chain_id)
        balance = self.rpc.call(self.token_contract.functions.balanceOf(signer.address))
        if balance < price:
            raise InsufficientStableBalance(
                required=price, available=balance, denomination=self.denomination
            )

        allowance = self.rpc.call(
            self.token_contract.functions.allowance(signer.address, spender)
        )
        if allowance < price:
            state.transition(PurchaseState.APPROVING)
            approve_hash = self.rpc.send_transaction(
                self.token_contract.functions.approve(spender, price), signer
            )
            logger.info(f"Approval transaction sent: {approve_hash}")
            self.rpc.wait_for_receipt(approve_hash)
            state.transition(PurchaseState.APPROVED, transaction_hash=approve_hash)

        state.transition(PurchaseState.PURCHASING)
        transaction_hash = self.rpc.send_transaction(
            self.contract.functions.purchaseProductWithPYUSD(product.blockchain_id),
            signer,
        )
        logger.info(f"Purchase transaction sent: {transaction_hash}")
        receipt = self.rpc.wait_for_receipt(transaction_hash)
        state.transition(PurchaseState.CONFIRMED, transaction_hash=transaction_hash)

        return self._result(transaction_hash, receipt["blockNumber"], price)
