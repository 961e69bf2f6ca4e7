import logging

from django.db import transaction
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from donation.models import Donation
from donation.serializers import DonationCreateSerializer, DonationSerializer
from donation.services.donation_service import DonationService, DonationServiceError
from ethereum.exceptions import Error as ChainError
from ethereum.exceptions import EventNotFound
from institution.models import Institution
from institution.serializers import (
    InstitutionRegistrationSerializer,
    InstitutionSerializer,
)
from user.models import User
from user.permissions import IsInstitutionAccount
from user.serializers import LoginSerializer, account_summary
from user.services.account_service import AccountService
from utils.http import RequestMethods
from utils.sentry import log_error

logger = logging.getLogger(__name__)


class InstitutionViewSet(viewsets.GenericViewSet):
    queryset = Institution.objects.all()
    permission_classes = [IsInstitutionAccount]

    def get_donation_service(self):
        return DonationService()

    @action(
        detail=False,
        methods=[RequestMethods.POST],
        permission_classes=[AllowAny],
        authentication_classes=[],
    )
    def register(self, request):
        serializer = InstitutionRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        if (
            AccountService.email_taken(data["email"])
            or Institution.objects.filter(wallet_address=data["wallet_address"]).exists()
        ):
            return Response({"error": "Institution already registered"}, status=400)

        with transaction.atomic():
            user = AccountService.create_account(
                data["email"], data["password"], User.INSTITUTION
            )
            institution = Institution.objects.create(
                user=user,
                name=data["name"],
                type=data["type"],
                wallet_address=data["wallet_address"],
                address=data["address"],
                contact_person=data["contact_person"],
            )

        logger.info(f"Registered institution {institution.id}")
        return Response(
            {
                "message": "Institution registered successfully",
                "token": AccountService.issue_token(user),
                "institution": account_summary(institution),
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
            User.INSTITUTION,
        )
        if user is None or not user.is_institution:
            return Response({"error": "Invalid credentials"}, status=400)

        return Response(
            {
                "message": "Login successful",
                "token": AccountService.issue_token(user),
                "institution": account_summary(user.institution),
            },
            status=200,
        )

    @action(detail=False, methods=[RequestMethods.GET])
    def profile(self, request):
        return Response(InstitutionSerializer(request.user.institution).data)

    def _donations(self, institution):
        return Donation.objects.filter(institution=institution).select_related(
            "institution__user", "ngo__user"
        )

    @action(detail=False, methods=[RequestMethods.GET, RequestMethods.POST])
    def donations(self, request):
        institution = request.user.institution
        if request.method == RequestMethods.GET:
            donations = self._donations(institution)
            return Response(DonationSerializer(donations, many=True).data)

        serializer = DonationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            donation = self.get_donation_service().record_donation(
                institution, serializer.validated_data
            )
        except EventNotFound as e:
            return Response({"error": e.message}, status=400)
        except ChainError as e:
            log_error(e, message="Could not read donation from the chain")
            return Response({"error": e.message}, status=503)
        except DonationServiceError as e:
            return Response({"error": str(e)}, status=e.status_code)

        return Response(
            {
                "message": "Donation recorded successfully",
                "donation": DonationSerializer(donation).data,
            },
            status=201,
        )

    @action(
        detail=False,
        methods=[RequestMethods.GET],
        url_path=r"donations/(?P<donation_id>[0-9]+)",
    )
    def donation_detail(self, request, donation_id=None):
        donation = (
            self._donations(request.user.institution).filter(pk=donation_id).first()
        )
        if donation is None:
            return Response({"error": "Donation not found"}, status=404)
        return Response(DonationSerializer(donation).data)
