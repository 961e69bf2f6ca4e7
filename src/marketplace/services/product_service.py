import logging
from decimal import Decimal

from django.db import transaction
from django.db.models import F
from django.utils import timezone

from donation.exceptions import InvalidStatusTransition
from donation.models import Donation
from ethereum.lib import (
    Denomination,
    denomination_for_payment_method,
    native_to_stable_minor,
    to_minor_units,
)
from ethereum.services.chain_reader import ChainReader
from institution.models import Institution
from marketplace.models import Product, ProductPrice
from marketplace.revenue import split_revenue
from ngo.models import NGO

logger = logging.getLogger(__name__)

REVENUE_COUNTERS = {
    Denomination.NATIVE: "total_revenue_native",
    Denomination.STABLE: "total_revenue_stable",
}


class ProductServiceError(Exception):
    status_code = 400


class DonationNotAcceptedByNGO(ProductServiceError):
    status_code = 403


class ProductAlreadySold(ProductServiceError):
    pass


class PriceNotListed(ProductServiceError):
    pass


class ProductService:
    """
    Writes product listings and settlements that mirror calls already
    confirmed on chain.
    """

    def __init__(self, chain_reader=None):
        self._chain_reader = chain_reader

    @property
    def chain_reader(self):
        if self._chain_reader is None:
            self._chain_reader = ChainReader()
        return self._chain_reader

    def resolve_blockchain_id(self, data):
        if data.get("blockchain_id") is not None:
            return data["blockchain_id"]
        return self.chain_reader.product_id_from_transaction(data["transaction_hash"])

    def listing_prices(self, data):
        """Returns {denomination: amount_minor} for a new listing.

        Without an explicit stable price one is derived from the native
        price at NATIVE_TO_STABLE_RATE, once, at listing time.
        """
        native = to_minor_units(data["price"], Denomination.NATIVE)
        if data.get("price_stable") is not None:
            stable = to_minor_units(data["price_stable"], Denomination.STABLE)
        else:
            stable = native_to_stable_minor(native)
        return {Denomination.NATIVE: native, Denomination.STABLE: stable}

    def create_product(self, ngo: NGO, data: dict) -> Product:
        blockchain_id = self.resolve_blockchain_id(data)
        prices = self.listing_prices(data)

        with transaction.atomic():
            donation = Donation.objects.select_for_update().get(pk=data["donation_id"])
            if donation.ngo_id != ngo.id:
                raise DonationNotAcceptedByNGO(
                    "Unauthorized: You did not accept this donation"
                )
            if Product.objects.filter(blockchain_id=blockchain_id).exists():
                raise ProductServiceError("Product already recorded")

            try:
                donation.advance_status(Donation.Status.CRAFTED)
            except InvalidStatusTransition as e:
                raise ProductServiceError(str(e))

            product = Product.objects.create(
                blockchain_id=blockchain_id,
                donation=donation,
                donation_blockchain_id=donation.blockchain_id,
                product_name=data["product_name"],
                product_type=data["product_type"],
                description=data.get("description", ""),
                images=data.get("images", []),
                ngo=ngo,
                ngo_wallet=ngo.wallet_address,
                artisan_wallet=data.get("artisan_wallet", ""),
                artisan_name=data.get("artisan_name", ""),
                institution_id=donation.institution_id,
                institution_wallet=donation.institution_wallet,
                transaction_hash=data.get("transaction_hash", ""),
                block_number=data.get("block_number"),
            )
            ProductPrice.objects.bulk_create(
                [
                    ProductPrice(
                        product=product,
                        denomination=denomination,
                        amount_minor=amount,
                    )
                    for denomination, amount in prices.items()
                ]
            )
            donation.save(update_fields=["status", "updated_date"])
            NGO.objects.filter(pk=ngo.pk).update(
                total_products_crafted=F("total_products_crafted") + 1
            )

        logger.info(f"NGO {ngo.id} listed product {blockchain_id}")
        return product

    def record_purchase(self, product_id, data: dict) -> Product:
        """Marks the product sold and books the revenue split.

        The split is computed here from the stored price in the payment
        method's denomination; client-supplied shares are never trusted.
        """
        denomination = denomination_for_payment_method(data["payment_method"])

        with transaction.atomic():
            product = Product.objects.select_for_update().get(pk=product_id)
            if product.sold:
                raise ProductAlreadySold("Product already sold")

            price = product.get_price(denomination)
            if price is None:
                raise PriceNotListed(f"Product has no {denomination} price")
            revenue = split_revenue(price, denomination)

            donation = Donation.objects.select_for_update().get(pk=product.donation_id)
            try:
                donation.advance_status(Donation.Status.SOLD)
            except InvalidStatusTransition as e:
                raise ProductServiceError(str(e))
            donation.save(update_fields=["status", "updated_date"])

            product.sold = True
            product.sold_date = timezone.now()
            product.buyer_wallet = data["buyer_wallet"]
            product.sale_transaction_hash = data["transaction_hash"]
            product.sale_block_number = data.get("block_number")
            product.payment_method = data["payment_method"]
            product.ngo_share = revenue.ngo_share
            product.institution_share = revenue.institution_share
            product.platform_share = revenue.platform_share
            product.revenue_total = revenue.total
            product.revenue_denomination = revenue.denomination
            product.save()

            counter = REVENUE_COUNTERS[denomination]
            NGO.objects.filter(pk=product.ngo_id).update(
                **{counter: F(counter) + Decimal(revenue.ngo_share)}
            )
            Institution.objects.filter(pk=product.institution_id).update(
                **{counter: F(counter) + Decimal(revenue.institution_share)}
            )

        logger.info(
            f"Product {product.blockchain_id} sold to {product.buyer_wallet} "
            f"for {revenue.total} {denomination}"
        )
        return product
