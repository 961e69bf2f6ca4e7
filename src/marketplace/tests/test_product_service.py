from unittest.mock import Mock

from django.test import TestCase, override_settings

from donation.models import Donation
from donation.tests.helpers import (
    NATIVE_PRICE,
    STABLE_PRICE,
    create_donation,
    create_product,
)
from ethereum.lib import Denomination, PaymentMethod
from ethereum.tests.helpers import TRANSACTION_HASH
from marketplace.services.product_service import (
    DonationNotAcceptedByNGO,
    PriceNotListed,
    ProductAlreadySold,
    ProductService,
    ProductServiceError,
)
from user.tests.helpers import BUYER_WALLET, create_institution, create_ngo


@override_settings(NATIVE_TO_STABLE_RATE="2000")
class CreateProductTests(TestCase):
    def setUp(self):
        self.institution = create_institution()
        self.ngo = create_ngo()
        self.donation = create_donation(self.institution, ngo=self.ngo)
        self.chain_reader = Mock()
        self.service = ProductService(chain_reader=self.chain_reader)

    def product_data(self, **kwargs):
        data = {
            "blockchain_id": 5,
            "donation_id": self.donation.id,
            "product_name": "Paper lamp",
            "product_type": "lamp",
            "price": "0.01",
        }
        data.update(kwargs)
        return data

    def test_create_product(self):
        product = self.service.create_product(self.ngo, self.product_data())

        self.assertEqual(product.blockchain_id, 5)
        self.assertEqual(product.institution, self.institution)
        self.assertEqual(product.get_price(Denomination.NATIVE), 10**16)
        self.donation.refresh_from_db()
        self.assertEqual(self.donation.status, Donation.Status.CRAFTED)
        self.ngo.refresh_from_db()
        self.assertEqual(self.ngo.total_products_crafted, 1)

    def test_stable_price_derived_at_listing(self):
        product = self.service.create_product(self.ngo, self.product_data())

        self.assertEqual(product.get_price(Denomination.STABLE), 20 * 10**6)

    def test_explicit_stable_price(self):
        product = self.service.create_product(
            self.ngo, self.product_data(price_stable="19.5")
        )

        self.assertEqual(product.get_price(Denomination.STABLE), 19_500_000)

    def test_id_decoded_from_transaction(self):
        self.chain_reader.product_id_from_transaction.return_value = 11

        product = self.service.create_product(
            self.ngo,
            self.product_data(blockchain_id=None, transaction_hash=TRANSACTION_HASH),
        )

        self.assertEqual(product.blockchain_id, 11)

    def test_other_ngo_cannot_list_donation(self):
        other = create_ngo(
            email="other@ngo.org",
            wallet_address="0x15d34aaf54267db7d7c367839aaf71a00a2c6a65",
            registration_number="NGO-2",
        )

        with self.assertRaises(DonationNotAcceptedByNGO) as context:
            self.service.create_product(other, self.product_data())

        self.assertEqual(context.exception.status_code, 403)
        self.donation.refresh_from_db()
        self.assertEqual(self.donation.status, Donation.Status.ACCEPTED)

    def test_donation_can_only_be_crafted_once(self):
        self.service.create_product(self.ngo, self.product_data())

        with self.assertRaises(ProductServiceError):
            self.service.create_product(self.ngo, self.product_data(blockchain_id=6))


class RecordPurchaseTests(TestCase):
    def setUp(self):
        self.institution = create_institution()
        self.ngo = create_ngo()
        self.donation = create_donation(self.institution, ngo=self.ngo)
        self.product = create_product(self.donation)
        self.service = ProductService(chain_reader=Mock())

    def purchase_data(self, payment_method=PaymentMethod.ETH):
        return {
            "buyer_wallet": BUYER_WALLET,
            "transaction_hash": TRANSACTION_HASH,
            "block_number": 77,
            "payment_method": payment_method,
        }

    def test_native_purchase_books_split(self):
        product = self.service.record_purchase(self.product.id, self.purchase_data())

        self.assertTrue(product.sold)
        self.assertIsNotNone(product.sold_date)
        self.assertEqual(product.sale_transaction_hash, TRANSACTION_HASH)
        self.assertEqual(product.sale_block_number, 77)
        revenue = product.revenue
        self.assertEqual(revenue.total, NATIVE_PRICE)
        self.assertEqual(revenue.ngo_share, 7 * 10**15)
        self.assertEqual(revenue.denomination, Denomination.NATIVE)

        self.donation.refresh_from_db()
        self.assertEqual(self.donation.status, Donation.Status.SOLD)
        self.ngo.refresh_from_db()
        self.institution.refresh_from_db()
        self.assertEqual(int(self.ngo.total_revenue_native), 7 * 10**15)
        self.assertEqual(int(self.institution.total_revenue_native), 2 * 10**15)
        self.assertEqual(int(self.ngo.total_revenue_stable), 0)

    def test_stable_purchase_uses_stable_price(self):
        product = self.service.record_purchase(
            self.product.id, self.purchase_data(PaymentMethod.PYUSD)
        )

        self.assertEqual(product.revenue.total, STABLE_PRICE)
        self.assertEqual(product.revenue.denomination, Denomination.STABLE)
        self.ngo.refresh_from_db()
        self.assertEqual(int(self.ngo.total_revenue_stable), 14 * 10**6)
        self.assertEqual(int(self.ngo.total_revenue_native), 0)

    def test_cross_chain_purchase_is_native(self):
        product = self.service.record_purchase(
            self.product.id, self.purchase_data(PaymentMethod.CROSS_CHAIN_ETH)
        )

        self.assertEqual(product.revenue.denomination, Denomination.NATIVE)
        self.assertEqual(product.payment_method, PaymentMethod.CROSS_CHAIN_ETH)

    def test_second_purchase_is_rejected(self):
        self.service.record_purchase(self.product.id, self.purchase_data())

        with self.assertRaises(ProductAlreadySold):
            self.service.record_purchase(self.product.id, self.purchase_data())

        self.ngo.refresh_from_db()
        self.assertEqual(int(self.ngo.total_revenue_native), 7 * 10**15)

    def test_unlisted_denomination(self):
        product = create_product(
            create_donation(self.institution, blockchain_id=2, ngo=self.ngo),
            blockchain_id=2,
            stable_price=None,
        )

        with self.assertRaises(PriceNotListed):
            self.service.record_purchase(
                product.id, self.purchase_data(PaymentMethod.PYUSD)
            )

        product.refresh_from_db()
        self.assertFalse(product.sold)
