from eth_abi import encode
from web3 import Web3

from ethereum.contracts import load_abi

CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
OTHER_ADDRESS = "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512"
NGO_WALLET = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
INSTITUTION_WALLET = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"
TRANSACTION_HASH = "0x" + "11" * 32


def recraft_contract(address=CONTRACT_ADDRESS):
    return Web3().eth.contract(address=address, abi=load_abi("ReCraft.json"))


def _topic(abi_type, value):
    return encode([abi_type], [value])


def _log(address, topics, data, log_index=0):
    return {
        "address": address,
        "topics": topics,
        "data": data,
        "logIndex": log_index,
        "transactionIndex": 0,
        "transactionHash": bytes.fromhex(TRANSACTION_HASH[2:]),
        "blockHash": bytes.fromhex("22" * 32),
        "blockNumber": 12,
    }


def donation_created_log(
    donation_id, institution=INSTITUTION_WALLET, address=CONTRACT_ADDRESS
):
    return _log(
        address,
        [
            Web3.keccak(text="DonationCreated(uint256,address,string,uint256)"),
            _topic("uint256", donation_id),
            _topic("address", institution),
        ],
        encode(["string", "uint256"], ["paper", 100]),
    )


def donation_accepted_log(donation_id, ngo=NGO_WALLET, address=CONTRACT_ADDRESS):
    return _log(
        address,
        [
            Web3.keccak(text="DonationAccepted(uint256,address)"),
            _topic("uint256", donation_id),
            _topic("address", ngo),
        ],
        b"",
    )


def product_created_log(
    product_id, donation_id, ngo=NGO_WALLET, address=CONTRACT_ADDRESS
):
    return _log(
        address,
        [
            Web3.keccak(text="ProductCreated(uint256,uint256,address,string,uint256)"),
            _topic("uint256", product_id),
            _topic("uint256", donation_id),
            _topic("address", ngo),
        ],
        encode(["string", "uint256"], ["Paper Lamp", 10**16]),
        log_index=1,
    )


def receipt(*logs, status=1):
    return {
        "transactionHash": bytes.fromhex(TRANSACTION_HASH[2:]),
        "blockNumber": 12,
        "status": status,
        "logs": list(logs),
    }
