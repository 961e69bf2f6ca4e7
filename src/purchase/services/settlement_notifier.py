import logging

from django.conf import settings

from utils.http import bearer_header
from utils.retryable_requests import retryable_requests_session
from utils.sentry import log_error

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30


class SettlementNotifier:
    """
    Tells the backend about a confirmed purchase.

    The backend derives the revenue split itself, so only the sale facts
    are sent. The purchase is already final on chain; a failed notification
    is reported and never raised.
    """

    def __init__(self, api_url=None, token=None, session=None):
        self.api_url = (api_url or settings.RECRAFT_API_URL).rstrip("/")
        self.session = session or retryable_requests_session(
            headers=bearer_header(token)
        )

    def notify(self, product_id, buyer_wallet, result):
        payload = {
            "buyer_wallet": buyer_wallet,
            "transaction_hash": result.transaction_hash,
            "payment_method": str(result.payment_method),
        }
        if result.block_number is not None:
            payload["block_number"] = result.block_number

        try:
            response = self.session.patch(
                f"{self.api_url}/api/products/{product_id}/purchase/",
                json=payload,
                timeout=REQUEST_TIMEOUT,
            )
            response.raise_for_status()
        except Exception as e:
            log_error(
                e,
                message="Failed to record purchase with the backend",
                extra={"product_id": product_id, **payload},
            )
            return False

        logger.info(f"Backend updated after purchase of product {product_id}")
        return True
