"""
Buys a marketplace product with the wallet configured in BUYER_PRIVATE_KEY
"""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from eth_account import Account

from ethereum.exceptions import Error
from ethereum.lib import PaymentMethod, get_explorer_url
from purchase.bridge.client import get_source_chains
from purchase.errors import describe_purchase_error
from purchase.marketplace_client import MarketplaceClient
from purchase.services.purchase_service import PurchaseService
from purchase.services.settlement_notifier import SettlementNotifier
from purchase.session import WalletSession


class Command(BaseCommand):
    help = "Purchase a marketplace product on chain and record the sale"

    def add_arguments(self, parser):
        parser.add_argument("product_id", type=int, help="Backend product id")
        parser.add_argument(
            "--rail",
            choices=PaymentMethod.values,
            default=PaymentMethod.ETH,
            help="Payment rail to use",
        )
        parser.add_argument(
            "--source-chain",
            choices=sorted(get_source_chains()),
            help="Chain to bridge from when using CROSS_CHAIN_ETH",
        )
        parser.add_argument(
            "--bridge-amount",
            help="Amount of ETH to bridge when using CROSS_CHAIN_ETH",
        )
        parser.add_argument(
            "--api-url",
            default=settings.RECRAFT_API_URL,
            help="ReCraft backend URL",
        )

    def handle(self, *args, **options):
        if not settings.BUYER_PRIVATE_KEY:
            raise CommandError("BUYER_PRIVATE_KEY is not configured")

        session = WalletSession(Account.from_key(settings.BUYER_PRIVATE_KEY))
        service = PurchaseService(
            session,
            marketplace=MarketplaceClient(api_url=options["api_url"]),
            notifier=SettlementNotifier(api_url=options["api_url"]),
        )

        rail_options = {}
        if options["rail"] == PaymentMethod.CROSS_CHAIN_ETH:
            rail_options = {
                "source_chain": options["source_chain"],
                "bridge_amount": options["bridge_amount"],
            }

        self.stdout.write(
            f"Purchasing product {options['product_id']} with {options['rail']} "
            f"from {session.address}"
        )
        try:
            result = service.purchase_by_id(
                options["product_id"], options["rail"], **rail_options
            )
        except Error as e:
            raise CommandError(describe_purchase_error(e))

        self.stdout.write(
            self.style.SUCCESS(
                f"Purchase confirmed in block {result.block_number}: "
                f"{get_explorer_url(result.transaction_hash)}"
            )
        )
