import logging
import re
import time

import requests
from django.conf import settings
from web3 import Web3
from web3.exceptions import (
    ContractLogicError,
    TimeExhausted,
    TransactionNotFound,
    Web3RPCError,
)

from ethereum.exceptions import (
    Error,
    InsufficientNativeBalance,
    RateLimited,
    TransactionFailed,
    UserRejected,
    WrongNetwork,
)

logger = logging.getLogger(__name__)

USER_REJECTED_CODE = 4001
LIMIT_EXCEEDED_CODE = -32005
INTERNAL_ERROR_CODE = -32603

RATE_LIMIT_PATTERN = re.compile(r"rate.?limit|too many requests|\b429\b")
USER_REJECTED_MARKERS = ("user rejected", "user denied", "action_rejected")
REVERT_MARKERS = ("execution reverted", "reverted with", "vm exception")


def _rpc_error_details(exc):
    """Returns the JSON-RPC (code, message, data) carried by a provider error."""
    payload = None
    if isinstance(exc, Web3RPCError) and isinstance(exc.rpc_response, dict):
        payload = exc.rpc_response.get("error")
    elif exc.args and isinstance(exc.args[0], dict):
        payload = exc.args[0]

    code = getattr(exc, "code", None)
    message = str(exc)
    data = None
    if isinstance(payload, dict):
        code = payload.get("code", code)
        message = payload.get("message") or message
        data = payload.get("data")
    return code, message or "", "" if data is None else str(data)


def classify_rpc_error(exc):
    """Maps a raw provider error onto the purchase error taxonomy.

    This is the only place where provider-specific error shapes are
    inspected. Errors that match no category are returned unchanged.
    """
    if isinstance(
        exc, (Error, TransactionNotFound, TimeExhausted, ContractLogicError)
    ):
        return exc

    if isinstance(exc, requests.HTTPError):
        response = exc.response
        if response is not None and response.status_code == 429:
            return RateLimited("RPC endpoint rate limited the request", trigger=exc)
        return exc

    code, message, data = _rpc_error_details(exc)
    lowered = message.lower()

    if code == USER_REJECTED_CODE or any(m in lowered for m in USER_REJECTED_MARKERS):
        return UserRejected("Transaction was rejected", trigger=exc)
    if any(m in lowered for m in REVERT_MARKERS):
        return exc
    if code == LIMIT_EXCEEDED_CODE or RATE_LIMIT_PATTERN.search(lowered):
        return RateLimited(message, trigger=exc)
    # Wallet providers wrap upstream 429s in internal errors
    if code == INTERNAL_ERROR_CODE and RATE_LIMIT_PATTERN.search(data.lower()):
        return RateLimited(message, trigger=exc)
    if "insufficient funds" in lowered:
        return InsufficientNativeBalance(trigger=exc)
    return exc


def retry_with_backoff(fn, max_retries=3, base_delay=1.0):
    """Calls `fn`, retrying only when it raises RateLimited.

    `max_retries` is the total number of attempts; the wait after the
    i-th failed attempt is `base_delay * 2**i` seconds. The last
    RateLimited error propagates unchanged. Any other error propagates
    immediately.
    """
    attempts = max(int(max_retries), 1)
    for attempt in range(attempts):
        try:
            return fn()
        except RateLimited:
            if attempt == attempts - 1:
                raise
            delay = base_delay * (2**attempt)
            logger.warning(
                f"Rate limited, attempt {attempt + 1}/{attempts}. "
                f"Retrying in {delay:.1f}s..."
            )
            time.sleep(delay)


def _classified(fn, *args, **kwargs):
    try:
        return fn(*args, **kwargs)
    except Exception as e:
        classified = classify_rpc_error(e)
        if classified is e:
            raise
        raise classified from e


class RpcClient:
    """Thin wrapper around a Web3 instance.

    Reads and receipt waits are retried on rate limiting. Submissions are
    sent exactly once.
    """

    def __init__(
        self,
        w3,
        max_retries=None,
        base_delay=None,
        receipt_max_retries=None,
        receipt_base_delay=None,
        receipt_timeout=None,
    ):
        self.w3 = w3
        self.max_retries = (
            settings.RPC_MAX_RETRIES if max_retries is None else max_retries
        )
        self.base_delay = settings.RPC_BASE_DELAY if base_delay is None else base_delay
        self.receipt_max_retries = (
            settings.RECEIPT_MAX_RETRIES
            if receipt_max_retries is None
            else receipt_max_retries
        )
        self.receipt_base_delay = (
            settings.RECEIPT_BASE_DELAY
            if receipt_base_delay is None
            else receipt_base_delay
        )
        self.receipt_timeout = (
            settings.RECEIPT_TIMEOUT_SECONDS
            if receipt_timeout is None
            else receipt_timeout
        )

    def read(self, fn, *args, **kwargs):
        return retry_with_backoff(
            lambda: _classified(fn, *args, **kwargs),
            max_retries=self.max_retries,
            base_delay=self.base_delay,
        )

    def call(self, contract_function):
        return self.read(contract_function.call)

    def chain_id(self):
        return self.read(lambda: self.w3.eth.chain_id)

    def ensure_chain(self, expected_chain_id):
        actual = self.chain_id()
        if int(actual) != int(expected_chain_id):
            raise WrongNetwork(expected_chain_id, actual)
        return actual

    def native_balance(self, address):
        return self.read(self.w3.eth.get_balance, Web3.to_checksum_address(address))

    def get_transaction_receipt(self, transaction_hash):
        try:
            return self.read(self.w3.eth.get_transaction_receipt, transaction_hash)
        except TransactionNotFound:
            return None

    def send_transaction(self, contract_function, signer, value=0):
        """Builds, signs and broadcasts a contract call from `signer`.

        Returns the transaction hash as a 0x-prefixed hex string.
        """
        sender = Web3.to_checksum_address(signer.address)
        params = {"from": sender}
        if value:
            params["value"] = int(value)
        params["nonce"] = self.read(self.w3.eth.get_transaction_count, sender)
        params["chainId"] = self.chain_id()
        tx = self.read(contract_function.build_transaction, params)

        signed = _classified(signer.sign_transaction, tx)
        tx_hash = _classified(self.w3.eth.send_raw_transaction, signed.raw_transaction)
        return Web3.to_hex(tx_hash)

    def wait_for_receipt(self, transaction_hash):
        receipt = retry_with_backoff(
            lambda: _classified(
                self.w3.eth.wait_for_transaction_receipt,
                transaction_hash,
                timeout=self.receipt_timeout,
            ),
            max_retries=self.receipt_max_retries,
            base_delay=self.receipt_base_delay,
        )
        if receipt["status"] != 1:
            raise TransactionFailed(transaction_hash)
        return receipt
