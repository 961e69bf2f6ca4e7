import logging

from django.db import transaction
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from donation.models import Donation
from donation.serializers import DonationSerializer
from donation.services.donation_service import DonationService, DonationServiceError
from ngo.models import NGO
from ngo.serializers import (
    ArtisanSerializer,
    DonationAcceptSerializer,
    NGORegistrationSerializer,
    NGOSerializer,
)
from user.models import User
from user.permissions import IsNGOAccount
from user.serializers import LoginSerializer, account_summary
from user.services.account_service import AccountService
from utils.http import RequestMethods

logger = logging.getLogger(__name__)


class NGOViewSet(viewsets.GenericViewSet):
    queryset = NGO.objects.all()
    permission_classes = [IsNGOAccount]

    def get_donation_service(self):
        return DonationService()

    @action(
        detail=False,
        methods=[RequestMethods.POST],
        permission_classes=[AllowAny],
        authentication_classes=[],
    )
    def register(self, request):
        serializer = NGORegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        if (
            AccountService.email_taken(data["email"])
            or NGO.objects.filter(wallet_address=data["wallet_address"]).exists()
            or NGO.objects.filter(
                registration_number=data["registration_number"]
            ).exists()
        ):
            return Response({"error": "NGO already registered"}, status=400)

        with transaction.atomic():
            user = AccountService.create_account(
                data["email"], data["password"], User.NGO
            )
            ngo = NGO.objects.create(
                user=user,
                name=data["name"],
                registration_number=data["registration_number"],
                wallet_address=data["wallet_address"],
                description=data["description"],
                address=data["address"],
                contact_person=data["contact_person"],
            )

        logger.info(f"Registered NGO {ngo.id}")
        return Response(
            {
                "message": "NGO registered successfully",
                "token": AccountService.issue_token(user),
                "ngo": account_summary(ngo),
            },
            status=201,
        )

    @action(
        detail=False,
        methods=[RequestMethods.POST],
        permission_classes=[AllowAny],
        authentication_classes=[],
    )
    def login(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"error": "Invalid credentials"}, status=400)

        user = AccountService.authenticate(
            serializer.validated_data["email"],
            serializer.validated_data["password"],
            User.NGO,
        )
        if user is None or not user.is_ngo:
            return Response({"error": "Invalid credentials"}, status=400)

        return Response(
            {
                "message": "Login successful",
                "token": AccountService.issue_token(user),
                "ngo": account_summary(user.ngo),
            },
            status=200,
        )

    @action(detail=False, methods=[RequestMethods.GET])
    def profile(self, request):
        ngo = NGO.objects.prefetch_related("artisans").get(pk=request.user.ngo.pk)
        return Response(NGOSerializer(ngo).data)

    @action(
        detail=False,
        methods=[RequestMethods.GET],
        url_path="donations/available",
    )
    def available_donations(self, request):
        donations = Donation.objects.filter(
            status=Donation.Status.AVAILABLE
        ).select_related("institution__user", "ngo__user")
        return Response(DonationSerializer(donations, many=True).data)

    @action(
        detail=False,
        methods=[RequestMethods.PATCH],
        url_path=r"donations/(?P<donation_id>[0-9]+)/accept",
    )
    def accept_donation(self, request, donation_id=None):
        serializer = DonationAcceptSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            donation = self.get_donation_service().accept_donation(
                request.user.ngo, donation_id, serializer.validated_data
            )
        except Donation.DoesNotExist:
            return Response({"error": "Donation not found"}, status=404)
        except DonationServiceError as e:
            return Response({"error": str(e)}, status=e.status_code)

        return Response(
            {
                "message": "Donation accepted successfully",
                "donation": DonationSerializer(donation).data,
            },
            status=200,
        )

    @action(detail=False, methods=[RequestMethods.GET])
    def donations(self, request):
        donations = Donation.objects.filter(ngo=request.user.ngo).select_related(
            "institution__user", "ngo__user"
        )
        return Response(DonationSerializer(donations, many=True).data)

    @action(detail=False, methods=[RequestMethods.GET, RequestMethods.POST])
    def artisans(self, request):
        ngo = request.user.ngo
        if request.method == RequestMethods.GET:
            return Response(ArtisanSerializer(ngo.artisans.all(), many=True).data)

        serializer = ArtisanSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save(ngo=ngo)
        return Response(
            {
                "message": "Artisan added successfully",
                "artisans": ArtisanSerializer(ngo.artisans.all(), many=True).data,
            },
            status=201,
        )
