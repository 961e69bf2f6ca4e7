from dataclasses import dataclass
from typing import Optional

from web3 import Web3

from ethereum.exceptions import Error


class WalletNotConnected(Error):
    pass


@dataclass(frozen=True)
class SessionSnapshot:
    address: Optional[str]
    token: Optional[str]
    connected: bool


class WalletSession:
    """
    Buyer wallet and backend credentials, passed explicitly to the
    purchase rails instead of living in process-wide state.

    `signer` is any object exposing `address` and
    `sign_transaction(tx) -> SignedTransaction`, such as an
    `eth_account` LocalAccount.
    """

    def __init__(self, signer=None, token=None):
        self._signer = None
        self._address = None
        self._token = token
        if signer is not None:
            self.connect(signer)

    def connect(self, signer):
        if not Web3.is_address(signer.address):
            raise WalletNotConnected(f"Invalid wallet address {signer.address}")
        self._signer = signer
        self._address = Web3.to_checksum_address(signer.address)
        return self.read()

    def read(self) -> SessionSnapshot:
        return SessionSnapshot(
            address=self._address,
            token=self._token,
            connected=self.is_connected,
        )

    def set_token(self, token):
        self._token = token

    def clear(self):
        self._signer = None
        self._address = None
        self._token = None

    @property
    def is_connected(self) -> bool:
        return self._signer is not None

    @property
    def address(self):
        return self._address

    @property
    def token(self):
        return self._token

    def require_signer(self):
        if self._signer is None:
            raise WalletNotConnected("Please connect your wallet first")
        return self._signer
