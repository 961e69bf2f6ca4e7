from rest_framework import serializers
from web3 import Web3


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class AccountRegistrationSerializer(serializers.Serializer):
    """Account fields shared by institution and NGO registration."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=6)
    wallet_address = serializers.CharField(max_length=42)

    def validate_email(self, value):
        return value.lower()

    def validate_wallet_address(self, value):
        if not Web3.is_address(value):
            raise serializers.ValidationError("Invalid wallet address")
        return value.lower()


def account_summary(profile):
    """Public identity of an institution or NGO returned by register/login."""
    return {
        "id": profile.id,
        "name": profile.name,
        "email": profile.user.email,
        "wallet_address": profile.wallet_address,
    }
