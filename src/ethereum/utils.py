from eth_account import Account
from eth_account.messages import encode_defunct


def recover_message_signer(message, signature):
    """Returns the checksummed address that signed `message`.

    Args:
        message (str) -- Text signed with the personal_sign prefix
        signature (str) -- 65 byte hex signature
    """
    signable = encode_defunct(text=message)
    return Account.recover_message(signable, signature=signature)
