from rest_framework import serializers

from institution.models import Institution
from user.serializers import AccountRegistrationSerializer


class InstitutionRegistrationSerializer(AccountRegistrationSerializer):
    name = serializers.CharField(max_length=255)
    type = serializers.ChoiceField(choices=Institution.TYPE_CHOICES)
    address = serializers.DictField(required=False, default=dict)
    contact_person = serializers.DictField(required=False, default=dict)


class InstitutionSerializer(serializers.ModelSerializer):
    email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = Institution
        fields = [
            "id",
            "name",
            "type",
            "email",
            "wallet_address",
            "address",
            "contact_person",
            "verified",
            "total_donations",
            "total_revenue_native",
            "total_revenue_stable",
            "created_date",
            "updated_date",
        ]
        read_only_fields = fields


class InstitutionSummarySerializer(serializers.ModelSerializer):
    email = serializers.EmailField(source="user.email", read_only=True)

    class Meta:
        model = Institution
        fields = ["id", "name", "type", "email", "wallet_address", "address"]
        read_only_fields = fields
