import logging

from django.db.models import F
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from donation.models import Donation
from ethereum.exceptions import Error as ChainError
from ethereum.exceptions import EventNotFound
from marketplace.filters import MarketplaceFilter
from marketplace.models import Product
from marketplace.serializers import (
    ProductCreateSerializer,
    ProductPurchaseSerializer,
    ProductSerializer,
)
from marketplace.services.product_service import ProductService, ProductServiceError
from user.permissions import IsNGOAccount
from utils.http import RequestMethods
from utils.sentry import log_error

logger = logging.getLogger(__name__)


class ProductViewSet(viewsets.GenericViewSet):
    queryset = Product.objects.select_related(
        "ngo__user", "institution__user", "donation"
    ).prefetch_related("prices")
    serializer_class = ProductSerializer
    filterset_class = MarketplaceFilter
    permission_classes = [AllowAny]
    lookup_value_regex = "[0-9]+"

    def get_permissions(self):
        if self.action == "create":
            return [IsNGOAccount()]
        return super().get_permissions()

    def get_product_service(self):
        return ProductService()

    def create(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            product = self.get_product_service().create_product(
                request.user.ngo, serializer.validated_data
            )
        except Donation.DoesNotExist:
            return Response({"error": "Donation not found"}, status=404)
        except EventNotFound as e:
            logger.warning(f"Product event not found: {e.message}")
            return Response({"error": e.message}, status=400)
        except ChainError as e:
            log_error(e, message="Could not read product from the chain")
            return Response({"error": e.message}, status=503)
        except ProductServiceError as e:
            return Response({"error": str(e)}, status=e.status_code)

        product = self.get_queryset().get(pk=product.pk)
        return Response(
            {
                "message": "Product created successfully",
                "product": ProductSerializer(product).data,
            },
            status=201,
        )

    @action(detail=False, methods=[RequestMethods.GET])
    def marketplace(self, request):
        products = self.filter_queryset(self.get_queryset().filter(sold=False))
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request, pk=None):
        updated = Product.objects.filter(pk=pk).update(views=F("views") + 1)
        if not updated:
            return Response({"error": "Product not found"}, status=404)
        product = self.get_queryset().get(pk=pk)
        return Response(ProductSerializer(product).data)

    @action(detail=True, methods=[RequestMethods.PATCH])
    def purchase(self, request, pk=None):
        serializer = ProductPurchaseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            product = self.get_product_service().record_purchase(
                pk, serializer.validated_data
            )
        except Product.DoesNotExist:
            return Response({"error": "Product not found"}, status=404)
        except ProductServiceError as e:
            return Response({"error": str(e)}, status=e.status_code)

        product = self.get_queryset().get(pk=product.pk)
        return Response(
            {
                "message": "Product purchase recorded successfully",
                "product": ProductSerializer(product).data,
            },
            status=200,
        )

    @action(
        detail=False,
        methods=[RequestMethods.GET],
        url_path=r"ngo/(?P<ngo_id>[0-9]+)",
    )
    def by_ngo(self, request, ngo_id=None):
        products = self.get_queryset().filter(ngo_id=ngo_id)
        return Response(ProductSerializer(products, many=True).data)

    @action(
        detail=False,
        methods=[RequestMethods.GET],
        url_path=r"institution/(?P<institution_id>[0-9]+)",
    )
    def by_institution(self, request, institution_id=None):
        products = self.get_queryset().filter(institution_id=institution_id)
        return Response(ProductSerializer(products, many=True).data)
