from rest_framework import viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from donation.models import Donation
from donation.serializers import DonationSerializer
from marketplace.serializers import ProductSerializer


class DonationViewSet(viewsets.GenericViewSet):
    """Public traceability view of a donation and what it became."""

    queryset = Donation.objects.select_related("institution__user", "ngo__user")
    permission_classes = [AllowAny]
    lookup_value_regex = "[0-9]+"

    def retrieve(self, request, pk=None):
        donation = self.get_queryset().filter(pk=pk).first()
        if donation is None:
            return Response({"error": "Donation not found"}, status=404)

        product = getattr(donation, "product", None)
        return Response(
            {
                "donation": DonationSerializer(donation).data,
                "product": ProductSerializer(product).data if product else None,
            }
        )
