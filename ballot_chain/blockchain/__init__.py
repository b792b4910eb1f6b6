from .connection import ContractConfigError, Web3Connector, get_web3
from .contracts import get_contract_object, get_factory_object, resolve_account

__all__ = [
    "ContractConfigError",
    "Web3Connector",
    "get_web3",
    "get_contract_object",
    "get_factory_object",
    "resolve_account",
]
