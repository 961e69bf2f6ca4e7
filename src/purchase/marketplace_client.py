from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional

from django.conf import settings

from ethereum.lib import Denomination, from_minor_units, to_minor_units
from utils.http import bearer_header
from utils.retryable_requests import retryable_requests_session

REQUEST_TIMEOUT = 30


@dataclass
class ListedProduct:
    """A marketplace product as served by the backend."""

    id: int
    blockchain_id: int
    product_name: str
    product_type: str
    description: str = ""
    sold: bool = False
    prices: Dict[str, int] = field(default_factory=dict)
    ngo_name: Optional[str] = None

    @classmethod
    def from_json(cls, data):
        return cls(
            id=data["id"],
            blockchain_id=int(data["blockchain_id"]),
            product_name=data["product_name"],
            product_type=data["product_type"],
            description=data.get("description") or "",
            sold=bool(data.get("sold")),
            prices={
                price["denomination"]: int(price["amount_minor"])
                for price in data.get("prices") or []
            },
            ngo_name=(data.get("ngo") or {}).get("name"),
        )

    def price_minor(self, denomination) -> Optional[int]:
        return self.prices.get(denomination)

    def price(self, denomination) -> Optional[Decimal]:
        amount = self.price_minor(denomination)
        if amount is None:
            return None
        return from_minor_units(amount, denomination)


def filter_products(
    products: List[ListedProduct],
    product_type=None,
    search=None,
    min_price=None,
    max_price=None,
    denomination=Denomination.NATIVE,
) -> List[ListedProduct]:
    """Client-side version of the marketplace filters.

    Price bounds are human-readable amounts in `denomination`. Products not
    listed in that denomination are excluded when a bound is given.
    """
    min_minor = None if min_price is None else to_minor_units(min_price, denomination)
    max_minor = None if max_price is None else to_minor_units(max_price, denomination)
    needle = search.lower() if search else None

    result = []
    for product in products:
        if product.sold:
            continue
        if product_type and product.product_type != product_type:
            continue
        if needle and not (
            needle in product.product_name.lower()
            or needle in product.description.lower()
        ):
            continue
        if min_minor is not None or max_minor is not None:
            price = product.price_minor(denomination)
            if price is None:
                continue
            if min_minor is not None and price < min_minor:
                continue
            if max_minor is not None and price > max_minor:
                continue
        result.append(product)
    return result


class MarketplaceClient:
    """Reads listings from the ReCraft backend."""

    def __init__(self, api_url=None, token=None, session=None):
        self.api_url = (api_url or settings.RECRAFT_API_URL).rstrip("/")
        self.session = session or retryable_requests_session(
            headers=bearer_header(token)
        )

    def fetch_listings(self, **filters) -> List[ListedProduct]:
        params = {key: value for key, value in filters.items() if value is not None}
        response = self.session.get(
            f"{self.api_url}/api/products/marketplace/",
            params=params,
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        return [ListedProduct.from_json(item) for item in response.json()]

    def fetch_product(self, product_id) -> ListedProduct:
        response = self.session.get(
            f"{self.api_url}/api/products/{product_id}/",
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        return ListedProduct.from_json(response.json())
