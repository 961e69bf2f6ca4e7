import logging

from django.db import transaction
from django.db.models import F

from donation.exceptions import InvalidStatusTransition
from donation.models import Donation
from ethereum.services.chain_reader import ChainReader
from institution.models import Institution

logger = logging.getLogger(__name__)


class DonationServiceError(Exception):
    status_code = 400


class DonationNotAvailable(DonationServiceError):
    pass


class DonationService:
    """
    Writes donation records that mirror createDonation / acceptDonation
    calls already confirmed on chain.
    """

    def __init__(self, chain_reader=None):
        self._chain_reader = chain_reader

    @property
    def chain_reader(self):
        if self._chain_reader is None:
            self._chain_reader = ChainReader()
        return self._chain_reader

    def resolve_blockchain_id(self, data):
        if data.get("blockchain_id") is not None:
            return data["blockchain_id"]
        return self.chain_reader.donation_id_from_transaction(data["transaction_hash"])

    def record_donation(self, institution: Institution, data: dict) -> Donation:
        blockchain_id = self.resolve_blockchain_id(data)

        with transaction.atomic():
            if Donation.objects.filter(blockchain_id=blockchain_id).exists():
                raise DonationServiceError("Donation already recorded")

            donation = Donation.objects.create(
                blockchain_id=blockchain_id,
                institution=institution,
                institution_wallet=institution.wallet_address,
                material_type=data["material_type"],
                quantity=data["quantity"],
                unit=data.get("unit") or "sheets",
                description=data.get("description", ""),
                images=data.get("images", []),
                transaction_hash=data.get("transaction_hash", ""),
                block_number=data.get("block_number"),
            )
            Institution.objects.filter(pk=institution.pk).update(
                total_donations=F("total_donations") + 1
            )

        logger.info(f"Recorded donation {blockchain_id} for institution {institution.id}")
        return donation

    def accept_donation(self, ngo, donation_id, data: dict) -> Donation:
        with transaction.atomic():
            donation = Donation.objects.select_for_update().get(pk=donation_id)
            if donation.status != Donation.Status.AVAILABLE:
                raise DonationNotAvailable("Donation is not available")

            try:
                donation.accept(
                    ngo,
                    transaction_hash=data.get("transaction_hash", ""),
                    block_number=data.get("block_number"),
                )
            except InvalidStatusTransition as e:
                raise DonationNotAvailable(str(e))
            donation.save()

        logger.info(f"NGO {ngo.id} accepted donation {donation.blockchain_id}")
        return donation
