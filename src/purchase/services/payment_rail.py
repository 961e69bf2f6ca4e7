from dataclasses import dataclass
from typing import Optional

from django.conf import settings

from ethereum.contracts import get_recraft_contract
from ethereum.exceptions import PurchaseFailed
from ethereum.lib import get_denomination_config
from ethereum.rpc import RpcClient
from purchase.state import PurchaseStateMachine
from utils.web3_utils import web3_provider


@dataclass
class PurchaseResult:
    transaction_hash: str
    block_number: Optional[int]
    payment_method: str
    denomination: str
    amount_minor: int


class PaymentRail:
    """
    Base class for one way of paying for a listed product.

    Subclasses set `payment_method` and `denomination` and implement
    `purchase`, returning a PurchaseResult once the purchase is confirmed.
    """

    payment_method = None
    denomination = None

    def __init__(self, session, w3=None, rpc=None, contract=None, chain_id=None):
        self.session = session
        self._w3 = w3
        self._rpc = rpc
        self._contract = contract
        self.chain_id = settings.WEB3_CHAIN_ID if chain_id is None else chain_id

    @property
    def w3(self):
        if self._w3 is None:
            self._w3 = web3_provider.w3
        return self._w3

    @property
    def rpc(self):
        if self._rpc is None:
            self._rpc = RpcClient(self.w3)
        return self._rpc

    @property
    def contract(self):
        if self._contract is None:
            self._contract = get_recraft_contract(self.w3)
        return self._contract

    def listed_price(self, product):
        price = product.price_minor(self.denomination)
        if price is None:
            ticker = get_denomination_config(self.denomination)["ticker"]
            raise PurchaseFailed(f"Product is not listed with a {ticker} price")
        return price

    def purchase(self, product, state: PurchaseStateMachine, **options):
        raise NotImplementedError

    def _result(self, transaction_hash, block_number, amount_minor):
        return PurchaseResult(
            transaction_hash=transaction_hash,
            block_number=block_number,
            payment_method=self.payment_method,
            denomination=self.denomination,
            amount_minor=amount_minor,
        )
