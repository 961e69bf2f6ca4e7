from rest_framework import serializers

from donation.models import Donation
from institution.serializers import InstitutionSummarySerializer
from ngo.serializers import NGOSummarySerializer


class DonationSerializer(serializers.ModelSerializer):
    institution = InstitutionSummarySerializer(read_only=True)
    ngo = NGOSummarySerializer(read_only=True)

    class Meta:
        model = Donation
        fields = [
            "id",
            "blockchain_id",
            "institution",
            "institution_wallet",
            "material_type",
            "quantity",
            "unit",
            "description",
            "images",
            "status",
            "ngo",
            "ngo_wallet",
            "accepted_date",
            "transaction_hash",
            "block_number",
            "created_date",
            "updated_date",
        ]
        # Status only moves through the accept/craft/sell flows
        read_only_fields = fields


class DonationCreateSerializer(serializers.Serializer):
    """Donation record written after the on-chain createDonation call.

    Either `blockchain_id` or `transaction_hash` must be given; with only a
    hash the id is decoded from the DonationCreated event.
    """

    blockchain_id = serializers.IntegerField(min_value=0, required=False)
    transaction_hash = serializers.CharField(
        max_length=66, required=False, allow_blank=True, default=""
    )
    block_number = serializers.IntegerField(min_value=0, required=False)
    material_type = serializers.ChoiceField(choices=Donation.MATERIAL_TYPE_CHOICES)
    quantity = serializers.IntegerField(min_value=1)
    unit = serializers.ChoiceField(
        choices=Donation.UNIT_CHOICES, required=False, default="sheets"
    )
    description = serializers.CharField(
        max_length=500, required=False, allow_blank=True, default=""
    )
    images = serializers.ListField(
        child=serializers.CharField(max_length=2048), required=False, default=list
    )

    def validate(self, data):
        if data.get("blockchain_id") is None and not data.get("transaction_hash"):
            raise serializers.ValidationError(
                "blockchain_id or transaction_hash is required"
            )
        blockchain_id = data.get("blockchain_id")
        if (
            blockchain_id is not None
            and Donation.objects.filter(blockchain_id=blockchain_id).exists()
        ):
            raise serializers.ValidationError("Donation already recorded")
        return data
