from web3 import Web3
from web3.exceptions import InvalidEventABI, LogTopicError, MismatchedABI

from ethereum.exceptions import EventNotFound

DONATION_CREATED = ("DonationCreated", "donationId")
PRODUCT_CREATED = ("ProductCreated", "productId")


def find_event(contract, receipt, event_name):
    """Returns the first `event_name` log emitted by `contract` in `receipt`.

    Raises EventNotFound when no log decodes as the event.
    """
    event = getattr(contract.events, event_name)()
    contract_address = contract.address.lower()

    for log_entry in receipt["logs"]:
        if log_entry["address"].lower() != contract_address:
            continue
        try:
            return event.process_log(log_entry)
        except (MismatchedABI, LogTopicError, InvalidEventABI):
            continue

    transaction_hash = receipt.get("transactionHash")
    if isinstance(transaction_hash, bytes):
        transaction_hash = Web3.to_hex(transaction_hash)
    raise EventNotFound(
        f"{event_name} event not found in transaction {transaction_hash}"
    )


def decode_event_id(contract, receipt, event_name, arg_name):
    """Returns the integer id `arg_name` carried by the `event_name` log."""
    decoded = find_event(contract, receipt, event_name)
    try:
        return int(decoded["args"][arg_name])
    except (KeyError, TypeError, ValueError) as e:
        raise EventNotFound(
            f"{event_name} event carries no `{arg_name}`", trigger=e
        )


def decode_donation_id(contract, receipt):
    return decode_event_id(contract, receipt, *DONATION_CREATED)


def decode_product_id(contract, receipt):
    return decode_event_id(contract, receipt, *PRODUCT_CREATED)
