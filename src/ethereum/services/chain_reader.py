from datetime import datetime, timezone

from web3 import Web3

from ethereum.contracts import get_recraft_contract
from ethereum.events import decode_donation_id, decode_product_id
from ethereum.exceptions import EventNotFound
from ethereum.lib import Denomination, ZERO_ADDRESS, format_amount
from ethereum.rpc import RpcClient
from utils.web3_utils import web3_provider

DONATION_STATUSES = ["Available", "Accepted", "Crafted", "Sold"]


def _timestamp(seconds):
    return datetime.fromtimestamp(int(seconds), tz=timezone.utc).isoformat()


def _address(value):
    if not value or value == ZERO_ADDRESS:
        return None
    return value.lower()


class ChainReader:
    """Read-only view of the ReCraft contract state."""

    def __init__(self, w3=None, contract=None, rpc=None):
        self.w3 = w3 or web3_provider.w3
        self.rpc = rpc or RpcClient(self.w3)
        self.contract = contract or get_recraft_contract(self.w3)

    def get_donation(self, blockchain_id):
        (
            donation_id,
            institution,
            material_type,
            quantity,
            status,
            ngo,
            timestamp,
        ) = self.rpc.call(self.contract.functions.getDonation(int(blockchain_id)))
        return {
            "id": int(donation_id),
            "institution": _address(institution),
            "material_type": material_type,
            "quantity": int(quantity),
            "status": DONATION_STATUSES[int(status)],
            "ngo": _address(ngo),
            "timestamp": _timestamp(timestamp),
        }

    def get_product(self, blockchain_id):
        (
            product_id,
            donation_id,
            product_name,
            product_type,
            price_native,
            price_stable,
            ngo,
            artisan,
            institution,
            sold,
            timestamp,
        ) = self.rpc.call(self.contract.functions.getProduct(int(blockchain_id)))
        return {
            "id": int(product_id),
            "donation_id": int(donation_id),
            "product_name": product_name,
            "product_type": product_type,
            "price_eth": format_amount(price_native, Denomination.NATIVE),
            "price_pyusd": format_amount(price_stable, Denomination.STABLE),
            "ngo": _address(ngo),
            "artisan": _address(artisan),
            "institution": _address(institution),
            "sold": bool(sold),
            "timestamp": _timestamp(timestamp),
        }

    def available_donations(self):
        ids = self.rpc.call(self.contract.functions.getAvailableDonations())
        return [self.get_donation(donation_id) for donation_id in ids]

    def available_products(self):
        ids = self.rpc.call(self.contract.functions.getAvailableProducts())
        return [self.get_product(product_id) for product_id in ids]

    def transaction_summary(self, transaction_hash):
        """Returns a receipt summary, or None when the hash is unknown."""
        receipt = self.rpc.get_transaction_receipt(transaction_hash)
        if receipt is None:
            return None
        gas_price = receipt.get("effectiveGasPrice") or 0
        return {
            "hash": Web3.to_hex(receipt["transactionHash"]),
            "block_number": receipt["blockNumber"],
            "from": _address(receipt["from"]),
            "to": _address(receipt.get("to")),
            "status": "success" if receipt["status"] == 1 else "failed",
            "gas_used": str(receipt["gasUsed"]),
            "effective_gas_price": f"{Web3.from_wei(gas_price, 'gwei')} gwei",
        }

    def _receipt(self, transaction_hash):
        receipt = self.rpc.get_transaction_receipt(transaction_hash)
        if receipt is None:
            raise EventNotFound(f"Transaction {transaction_hash} not found")
        return receipt

    def donation_id_from_transaction(self, transaction_hash):
        return decode_donation_id(self.contract, self._receipt(transaction_hash))

    def product_id_from_transaction(self, transaction_hash):
        return decode_product_id(self.contract, self._receipt(transaction_hash))
