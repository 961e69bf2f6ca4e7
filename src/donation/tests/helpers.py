from donation.models import Donation
from ethereum.lib import Denomination
from marketplace.models import Product, ProductPrice

NATIVE_PRICE = 10**16
STABLE_PRICE = 20 * 10**6


def create_donation(institution, blockchain_id=1, ngo=None, status=None):
    donation = Donation.objects.create(
        blockchain_id=blockchain_id,
        institution=institution,
        institution_wallet=institution.wallet_address,
        material_type="paper",
        quantity=100,
    )
    if ngo is not None:
        donation.accept(ngo)
    if status is not None:
        donation.status = status
    donation.save()
    return donation


def create_product(
    donation,
    blockchain_id=1,
    product_name="Notebook",
    product_type="notebook",
    description="",
    native_price=NATIVE_PRICE,
    stable_price=STABLE_PRICE,
):
    """Lists a product crafted from an accepted `donation`."""
    product = Product.objects.create(
        blockchain_id=blockchain_id,
        donation=donation,
        donation_blockchain_id=donation.blockchain_id,
        product_name=product_name,
        product_type=product_type,
        description=description,
        ngo=donation.ngo,
        ngo_wallet=donation.ngo.wallet_address,
        institution=donation.institution,
        institution_wallet=donation.institution_wallet,
    )
    prices = {Denomination.NATIVE: native_price, Denomination.STABLE: stable_price}
    for denomination, amount in prices.items():
        if amount is not None:
            ProductPrice.objects.create(
                product=product, denomination=denomination, amount_minor=amount
            )
    donation.status = Donation.Status.CRAFTED
    donation.save()
    return product
