import json
import logging
from typing import Any, Dict, List, Union

from web3 import Web3

from ballot_chain import config
from ballot_chain.blockchain.connection import ContractConfigError, get_web3, load_artifact, load_receipt

logger = logging.getLogger(__name__)

Account = Union[int, str]


class TransactionRevertedError(Exception):
    """A transaction was mined but the contract rejected it (receipt status 0)."""

    def __init__(self, method: str, receipt: Dict[str, Any]):
        self.method = method
        self.receipt = receipt
        super().__init__(f"{method} transaction {receipt.get('transactionHash')} reverted")


def get_factory_object():
    """Factory contract at the address of the deployment receipt for the configured network."""
    abi = load_artifact(config.FACTORY_CONTRACT)
    address = load_receipt(config.WEB3_NETWORK)
    return get_web3().eth.contract(address=Web3.to_checksum_address(address), abi=abi)


def get_contract_object(address: str):
    abi = load_artifact(config.ELECTION_CONTRACT)
    return get_web3().eth.contract(address=Web3.to_checksum_address(address), abi=abi)


def get_accounts() -> List[str]:
    return list(get_web3().eth.accounts)


def resolve_account(account: Account) -> str:
    """
    An int is an index into the node's unlocked accounts, a str is a hex address.
    """
    if isinstance(account, int):
        accounts = get_accounts()
        if not accounts:
            raise ContractConfigError(
                f"The {config.WEB3_NETWORK} node has no unlocked accounts to send from"
            )
        if account < 0 or account >= len(accounts):
            raise IndexError(f"Account index {account} out of range ({len(accounts)} accounts)")
        return accounts[account]
    if isinstance(account, str) and account.strip().isdigit():
        return resolve_account(int(account.strip()))
    return Web3.to_checksum_address(account)


def _to_plain(value):
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


def _method_outputs(abi: List[Dict[str, Any]], method: str) -> List[Dict[str, Any]]:
    for entry in abi:
        if entry.get("type", "function") == "function" and entry.get("name") == method:
            return entry.get("outputs", [])
    return []


def decode_outputs(abi, method: str, value):
    """
    Multi-value returns with named outputs become a dict keyed by output name,
    like the JS client exposes struct getters.
    """
    outputs = _method_outputs(abi, method)
    names = [o.get("name") for o in outputs]
    if len(outputs) > 1 and all(names) and isinstance(value, (list, tuple)):
        return {name: _to_plain(v) for name, v in zip(names, value)}
    return _to_plain(value)


def call_method(contract, method: str, *args, sender: str):
    result = getattr(contract.functions, method)(*args).call({"from": sender})
    return decode_outputs(contract.abi, method, result)


def receipt_to_dict(receipt) -> Dict[str, Any]:
    # HexBytes and AttributeDict are not JSON serializable as-is
    return json.loads(Web3.to_json(receipt))


def send_method(contract, method: str, *args, sender: str, gas: int = config.DEFAULT_GAS) -> Dict[str, Any]:
    logger.info(f"Sending {method} transaction from account {sender}")
    tx_hash = getattr(contract.functions, method)(*args).transact({"from": sender, "gas": gas})
    receipt = receipt_to_dict(get_web3().eth.wait_for_transaction_receipt(tx_hash))
    if receipt.get("status") == 0:
        raise TransactionRevertedError(method, receipt)
    return receipt
