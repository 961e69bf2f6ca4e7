import logging

from django.conf import settings
from web3 import Web3

from ethereum.exceptions import BridgeNotEnabled, BridgeSimulationFailed, PurchaseFailed
from ethereum.lib import Denomination, PaymentMethod, format_amount, to_minor_units
from purchase.bridge.client import (
    BridgeClient,
    get_destination_chain_id,
    get_source_chains,
)
from purchase.services.payment_rail import PaymentRail
from purchase.state import PurchaseState

logger = logging.getLogger(__name__)

PURCHASE_FUNCTION = "purchaseProductWithETH"


class CrossChainPaymentRail(PaymentRail):
    """
    Bridges native funds from a source chain and calls
    `purchaseProductWithETH` on the destination chain in one provider
    operation. The operation is simulated first and only executed when the
    simulation succeeds.
    """

    payment_method = PaymentMethod.CROSS_CHAIN_ETH
    denomination = Denomination.NATIVE

    def __init__(self, session, bridge=None, contract_address=None, **kwargs):
        super().__init__(session, **kwargs)
        self._bridge = bridge
        self.contract_address = (
            contract_address
            if contract_address is not None
            else settings.RECRAFT_CONTRACT_ADDRESS
        )

    @property
    def bridge(self):
        if self._bridge is None:
            self._bridge = BridgeClient()
        return self._bridge

    def build_execute_params(self, product, price):
        return {
            "contractAddress": Web3.to_checksum_address(self.contract_address),
            "functionName": PURCHASE_FUNCTION,
            "functionParams": [product.blockchain_id],
            "value": hex(price),
        }

    def build_params(self, product, source_chain, bridge_amount):
        if not settings.BRIDGE_ENABLED:
            raise BridgeNotEnabled("Cross-chain payments are not enabled")

        chains = get_source_chains()
        if source_chain not in chains:
            raise PurchaseFailed(
                f"Unsupported source chain `{source_chain}`. "
                f"Choose one of: {', '.join(chains)}"
            )

        price = self.listed_price(product)
        bridge_minor = to_minor_units(bridge_amount, self.denomination)
        if bridge_minor < price:
            raise PurchaseFailed(
                f"Bridge amount ({bridge_amount} ETH) must be at least "
                f"{format_amount(price, self.denomination)} ETH"
            )

        return price, {
            "token": "ETH",
            "amount": format_amount(bridge_minor, self.denomination),
            "fromChainId": chains[source_chain],
            "toChainId": get_destination_chain_id(),
            "userAddress": self.session.address,
            "execute": self.build_execute_params(product, price),
        }

    def purchase(
        self, product, state, source_chain=None, bridge_amount=None, **options
    ):
        self.session.require_signer()
        if bridge_amount is None:
            raise PurchaseFailed("A bridge amount is required for cross-chain payment")
        price, params = self.build_params(product, source_chain, bridge_amount)

        state.transition(PurchaseState.PURCHASING)
        simulation = self.bridge.simulate(params)
        if not simulation.success:
            raise BridgeSimulationFailed(simulation.error)

        execution = self.bridge.execute(
            {
                **params,
                "waitForReceipt": True,
                "receiptTimeout": settings.BRIDGE_RECEIPT_TIMEOUT_MS,
            }
        )
        if not execution.success:
            raise PurchaseFailed(execution.error)

        logger.info(f"Cross-chain purchase executed: {execution.transaction_hash}")
        state.transition(
            PurchaseState.CONFIRMED, transaction_hash=execution.transaction_hash
        )
        return self._result(
            execution.transaction_hash, execution.details.get("blockNumber"), price
        )
