import logging

from django.conf import settings
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ethereum.lib import get_explorer_url, is_configured_address
from ethereum.services.chain_reader import ChainReader
from ethereum.utils import recover_message_signer
from utils.http import RequestMethods
from utils.sentry import log_error

logger = logging.getLogger(__name__)


def _chain_error(e, message):
    log_error(e, message=message)
    return Response({"error": message, "details": str(e)}, status=500)


@api_view([RequestMethods.GET])
@permission_classes([AllowAny])
def contract_info(request):
    if not is_configured_address(settings.RECRAFT_CONTRACT_ADDRESS):
        return Response({"error": "Contract not deployed"}, status=404)

    return Response(
        {
            "contract_address": settings.RECRAFT_CONTRACT_ADDRESS,
            "network": settings.WEB3_NETWORK,
            "rpc_url": settings.WEB3_PROVIDER_URL,
            "chain_id": settings.WEB3_CHAIN_ID,
            "pyusd_token_address": settings.PYUSD_TOKEN_ADDRESS or None,
        },
        status=200,
    )


@api_view([RequestMethods.GET])
@permission_classes([AllowAny])
def donation(request, blockchain_id):
    try:
        return Response(ChainReader().get_donation(blockchain_id), status=200)
    except Exception as e:
        return _chain_error(e, "Failed to fetch donation from blockchain")


@api_view([RequestMethods.GET])
@permission_classes([AllowAny])
def product(request, blockchain_id):
    try:
        return Response(ChainReader().get_product(blockchain_id), status=200)
    except Exception as e:
        return _chain_error(e, "Failed to fetch product from blockchain")


@api_view([RequestMethods.GET])
@permission_classes([AllowAny])
def available_donations(request):
    try:
        return Response(ChainReader().available_donations(), status=200)
    except Exception as e:
        return _chain_error(e, "Failed to fetch available donations")


@api_view([RequestMethods.GET])
@permission_classes([AllowAny])
def available_products(request):
    try:
        return Response(ChainReader().available_products(), status=200)
    except Exception as e:
        return _chain_error(e, "Failed to fetch available products")


@api_view([RequestMethods.GET])
@permission_classes([AllowAny])
def transaction(request, transaction_hash):
    try:
        summary = ChainReader().transaction_summary(transaction_hash)
    except Exception as e:
        return _chain_error(e, "Failed to fetch transaction")

    if summary is None:
        return Response({"error": "Transaction not found"}, status=404)
    return Response(summary, status=200)


@api_view([RequestMethods.GET])
@permission_classes([AllowAny])
def explorer_link(request, transaction_hash):
    return Response({"explorer_url": get_explorer_url(transaction_hash)}, status=200)


@api_view([RequestMethods.POST])
@permission_classes([AllowAny])
def verify_signature(request):
    message = request.data.get("message")
    signature = request.data.get("signature")
    wallet_address = request.data.get("wallet_address")
    if not message or not signature or not wallet_address:
        return Response(
            {"error": "message, signature and wallet_address are required"},
            status=400,
        )

    try:
        recovered = recover_message_signer(message, signature)
    except Exception as e:
        logger.warning(f"Could not recover signer: {e}")
        return Response(
            {"error": "Failed to verify signature", "details": str(e)}, status=400
        )

    if recovered.lower() == wallet_address.lower():
        return Response({"verified": True, "address": recovered}, status=200)
    return Response(
        {"verified": False, "error": "Signature verification failed"}, status=400
    )
