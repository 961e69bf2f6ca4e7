from rest_framework.authtoken.models import Token

from institution.models import Institution
from ngo.models import NGO
from user.models import User

INSTITUTION_WALLET = "0x3c44cdddb6a900fa2b585dd299e03d12fa4293bc"
NGO_WALLET = "0x70997970c51812dc3a010c7d01b50e0d17dc79c8"
BUYER_WALLET = "0x90f79bf6eb2c4f870365e785982e1f101e93b906"
PASSWORD = "recycle123"


class TestData:
    institution_name = "Springfield High"
    institution_email = "office@springfield.edu"
    ngo_name = "Green Hands"
    ngo_email = "hello@greenhands.org"
    registration_number = "NGO-2024-001"


def create_user(email, account_type, password=PASSWORD):
    return User.objects.create_user(
        username=email, email=email, password=password, account_type=account_type
    )


def create_institution(
    email=TestData.institution_email,
    wallet_address=INSTITUTION_WALLET,
    name=TestData.institution_name,
):
    user = create_user(email, User.INSTITUTION)
    return Institution.objects.create(
        user=user,
        name=name,
        type=Institution.SCHOOL,
        wallet_address=wallet_address,
        address={"city": "Springfield"},
    )


def create_ngo(
    email=TestData.ngo_email,
    wallet_address=NGO_WALLET,
    name=TestData.ngo_name,
    registration_number=TestData.registration_number,
):
    user = create_user(email, User.NGO)
    return NGO.objects.create(
        user=user,
        name=name,
        registration_number=registration_number,
        wallet_address=wallet_address,
    )


def authenticate(client, user):
    """Sets a bearer token for `user` on an APIClient."""
    token, _ = Token.objects.get_or_create(user=user)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")
    return token
