from rest_framework import serializers
from web3 import Web3

from ngo.models import NGO, Artisan
from user.serializers import AccountRegistrationSerializer


class NGORegistrationSerializer(AccountRegistrationSerializer):
    name = serializers.CharField(max_length=255)
    registration_number = serializers.CharField(max_length=128)
    description = serializers.CharField(
        max_length=1000, required=False, allow_blank=True, default=""
    )
    address = serializers.DictField(required=False, default=dict)
    contact_person = serializers.DictField(required=False, default=dict)


class ArtisanSerializer(serializers.ModelSerializer):
    class Meta:
        model = Artisan
        fields = ["id", "name", "wallet_address", "specialization", "joined_date"]
        read_only_fields = ["id", "joined_date"]

    def validate_wallet_address(self, value):
        if value and not Web3.is_address(value):
            raise serializers.ValidationError("Invalid wallet address")
        return value.lower()


class NGOSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(source="user.email", read_only=True)
    artisans = ArtisanSerializer(many=True, read_only=True)

    class Meta:
        model = NGO
        fields = [
            "id",
            "name",
            "registration_number",
            "email",
            "wallet_address",
            "address",
            "contact_person",
            "description",
            "artisans",
            "verified",
            "total_products_crafted",
            "total_revenue_native",
            "total_revenue_stable",
            "rating",
            "created_date",
            "updated_date",
        ]
        read_only_fields = fields


class NGOSummarySerializer(serializers.ModelSerializer):
    email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = NGO
        fields = ["id", "name", "email", "wallet_address", "description"]
        read_only_fields = fields


class DonationAcceptSerializer(serializers.Serializer):
    transaction_hash = serializers.CharField(
        max_length=66, required=False, allow_blank=True, default=""
    )
    block_number = serializers.IntegerField(min_value=0, required=False)
