import json
import os

from django.conf import settings
from web3 import Web3

from ethereum.exceptions import PaymentRailNotConfigured
from ethereum.lib import is_configured_address

ABI_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "abi")

RECRAFT_ABI_FILENAME = "ReCraft.json"
ERC20_ABI_FILENAME = "ERC20.json"


class ContractComposer:
    def __init__(self, w3, address, abi_filename):
        self.w3 = w3
        self.address = Web3.to_checksum_address(address)
        self.abi_filename = abi_filename
        self.set_abi()
        self.set_contract()

    def set_abi(self):
        self.abi = load_abi(self.abi_filename)

    def set_contract(self):
        self.contract = self.w3.eth.contract(address=self.address, abi=self.abi)


def load_abi(abi_filename):
    path = os.path.join(ABI_DIR, abi_filename)
    with open(path, "r") as file:
        data = json.load(file)
    return data["abi"]


def get_recraft_contract(w3, address=None):
    address = address or settings.RECRAFT_CONTRACT_ADDRESS
    if not is_configured_address(address):
        raise PaymentRailNotConfigured("Contract not deployed or ABI not found")
    return ContractComposer(w3, address, RECRAFT_ABI_FILENAME).contract


def get_stable_token_contract(w3, address=None):
    address = address or settings.PYUSD_TOKEN_ADDRESS
    if not is_configured_address(address):
        raise PaymentRailNotConfigured("PYUSD token address is not configured")
    return ContractComposer(w3, address, ERC20_ABI_FILENAME).contract
