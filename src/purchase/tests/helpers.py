from unittest.mock import Mock

from eth_account import Account

from ethereum.lib import Denomination, native_to_stable_minor, to_minor_units
from ethereum.tests.helpers import CONTRACT_ADDRESS, TRANSACTION_HASH
from purchase.marketplace_client import ListedProduct
from purchase.session import WalletSession

APPROVE_HASH = "0x" + "aa" * 32


def listed_product(price="0.01", stable_price=None, sold=False, **kwargs):
    native = to_minor_units(price, Denomination.NATIVE)
    stable = (
        native_to_stable_minor(native)
        if stable_price is None
        else to_minor_units(stable_price, Denomination.STABLE)
    )
    fields = {
        "id": 7,
        "blockchain_id": 3,
        "product_name": "Notebook",
        "product_type": "Stationery",
        "sold": sold,
        "prices": {Denomination.NATIVE: native, Denomination.STABLE: stable},
    }
    fields.update(kwargs)
    return ListedProduct(**fields)


def wallet_session():
    return WalletSession(Account.create())


def mock_rpc(block_number=42):
    rpc = Mock()
    rpc.ensure_chain.return_value = 31337
    rpc.send_transaction.return_value = TRANSACTION_HASH
    rpc.wait_for_receipt.return_value = {"status": 1, "blockNumber": block_number}
    return rpc


def mock_contract(address=CONTRACT_ADDRESS):
    contract = Mock()
    contract.address = address
    return contract
