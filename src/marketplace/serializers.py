from rest_framework import serializers
from web3 import Web3

from donation.models import Donation
from ethereum.lib import PaymentMethod, format_amount
from institution.serializers import InstitutionSummarySerializer
from marketplace.models import Product, ProductPrice
from ngo.serializers import NGOSummarySerializer


class ProductPriceSerializer(serializers.ModelSerializer):
    amount_minor = serializers.SerializerMethodField()
    amount = serializers.SerializerMethodField()

    class Meta:
        model = ProductPrice
        fields = ["denomination", "amount_minor", "amount"]

    def get_amount_minor(self, price):
        return str(int(price.amount_minor))

    def get_amount(self, price):
        return format_amount(price.amount_minor, price.denomination)


class DonationSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Donation
        fields = [
            "id",
            "blockchain_id",
            "material_type",
            "quantity",
            "unit",
            "description",
            "status",
            "created_date",
        ]
        read_only_fields = fields


class ProductSerializer(serializers.ModelSerializer):
    prices = ProductPriceSerializer(many=True, read_only=True)
    ngo = NGOSummarySerializer(read_only=True)
    institution = InstitutionSummarySerializer(read_only=True)
    donation = DonationSummarySerializer(read_only=True)
    revenue = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            "id",
            "blockchain_id",
            "donation",
            "donation_blockchain_id",
            "product_name",
            "product_type",
            "description",
            "images",
            "prices",
            "ngo",
            "ngo_wallet",
            "artisan_wallet",
            "artisan_name",
            "institution",
            "institution_wallet",
            "transaction_hash",
            "block_number",
            "sold",
            "sold_date",
            "buyer_wallet",
            "sale_transaction_hash",
            "sale_block_number",
            "payment_method",
            "views",
            "revenue",
            "created_date",
            "updated_date",
        ]
        read_only_fields = fields

    def get_revenue(self, product):
        revenue = product.revenue
        return revenue.as_dict() if revenue else None


class ProductCreateSerializer(serializers.Serializer):
    """Product record written after the on-chain createProduct call.

    Prices are human-readable amounts; `price` is in the native asset.
    """

    blockchain_id = serializers.IntegerField(min_value=0, required=False)
    transaction_hash = serializers.CharField(
        max_length=66, required=False, allow_blank=True, default=""
    )
    block_number = serializers.IntegerField(min_value=0, required=False)
    donation_id = serializers.IntegerField()
    product_name = serializers.CharField(max_length=255)
    product_type = serializers.ChoiceField(choices=Product.PRODUCT_TYPE_CHOICES)
    description = serializers.CharField(
        max_length=1000, required=False, allow_blank=True, default=""
    )
    images = serializers.ListField(
        child=serializers.CharField(max_length=2048), required=False, default=list
    )
    price = serializers.DecimalField(max_digits=40, decimal_places=18, min_value=0)
    price_stable = serializers.DecimalField(
        max_digits=40, decimal_places=6, min_value=0, required=False
    )
    artisan_wallet = serializers.CharField(
        max_length=42, required=False, allow_blank=True, default=""
    )
    artisan_name = serializers.CharField(
        max_length=255, required=False, allow_blank=True, default=""
    )

    def validate_artisan_wallet(self, value):
        if value and not Web3.is_address(value):
            raise serializers.ValidationError("Invalid wallet address")
        return value.lower()

    def validate(self, data):
        if data.get("blockchain_id") is None and not data.get("transaction_hash"):
            raise serializers.ValidationError(
                "blockchain_id or transaction_hash is required"
            )
        blockchain_id = data.get("blockchain_id")
        if (
            blockchain_id is not None
            and Product.objects.filter(blockchain_id=blockchain_id).exists()
        ):
            raise serializers.ValidationError("Product already recorded")
        return data


class ProductPurchaseSerializer(serializers.Serializer):
    """Settlement write sent by the buyer after on-chain confirmation."""

    buyer_wallet = serializers.CharField(max_length=42)
    transaction_hash = serializers.CharField(max_length=66)
    block_number = serializers.IntegerField(min_value=0, required=False)
    payment_method = serializers.ChoiceField(choices=PaymentMethod.choices)

    def validate_buyer_wallet(self, value):
        if not Web3.is_address(value):
            raise serializers.ValidationError("Invalid wallet address")
        return value.lower()
