import logging
from dataclasses import dataclass, field
from typing import Optional

from django.conf import settings

from ethereum.exceptions import BridgeNotEnabled
from utils.retryable_requests import retryable_requests_session

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30

TESTNET_CHAINS = {
    "optimism-sepolia": 11155420,
    "arbitrum-sepolia": 421614,
    "base-sepolia": 84532,
}
TESTNET_DESTINATION_CHAIN_ID = 11155111

MAINNET_CHAINS = {
    "optimism": 10,
    "arbitrum": 42161,
    "base": 8453,
}
MAINNET_DESTINATION_CHAIN_ID = 1


def get_source_chains(testnet=None):
    testnet = settings.TESTNET_MODE if testnet is None else testnet
    return TESTNET_CHAINS if testnet else MAINNET_CHAINS


def get_destination_chain_id(testnet=None):
    testnet = settings.TESTNET_MODE if testnet is None else testnet
    return TESTNET_DESTINATION_CHAIN_ID if testnet else MAINNET_DESTINATION_CHAIN_ID


@dataclass
class BridgeSimulation:
    success: bool
    error: Optional[str] = None
    details: dict = field(default_factory=dict)


@dataclass
class BridgeExecution:
    success: bool
    transaction_hash: Optional[str] = None
    error: Optional[str] = None
    details: dict = field(default_factory=dict)


class BridgeClient:
    """
    HTTP client for the bridge-and-execute provider.

    `simulate` dry-runs a bridge of native funds from a source chain followed
    by a contract call on the destination chain; `execute` performs it.
    """

    def __init__(self, api_url=None, project_id=None, session=None):
        self.api_url = (api_url or settings.BRIDGE_API_URL).rstrip("/")
        self.project_id = project_id or settings.BRIDGE_PROJECT_ID
        self.session = session or retryable_requests_session(
            headers={"X-Project-Id": self.project_id} if self.project_id else None
        )

    def _ensure_configured(self):
        if not settings.BRIDGE_ENABLED:
            raise BridgeNotEnabled("Cross-chain payments are not enabled")
        if not self.api_url:
            raise BridgeNotEnabled("Bridge API URL is not configured")

    def _post(self, path, payload, timeout=REQUEST_TIMEOUT):
        self._ensure_configured()
        response = self.session.post(
            f"{self.api_url}/{path}", json=payload, timeout=timeout
        )
        response.raise_for_status()
        return response.json()

    def simulate(self, payload) -> BridgeSimulation:
        data = self._post("simulate", payload)
        error = None
        if not data.get("success"):
            error = data.get("error") or "Simulation failed"
        elif (data.get("executeSimulation") or {}).get("error"):
            error = f"Execute simulation failed: {data['executeSimulation']['error']}"
        if error:
            logger.warning(f"Bridge simulation rejected: {error}")
        return BridgeSimulation(success=error is None, error=error, details=data)

    def execute(self, payload) -> BridgeExecution:
        # The provider holds the request open until the receipt arrives
        timeout = payload.get("receiptTimeout", 0) / 1000 + REQUEST_TIMEOUT
        data = self._post("execute", payload, timeout=timeout)
        success = bool(data.get("success"))
        return BridgeExecution(
            success=success,
            transaction_hash=data.get("executeTransactionHash")
            or data.get("transactionHash"),
            error=None if success else data.get("error") or "Bridge execution failed",
            details=data,
        )
