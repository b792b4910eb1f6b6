import json
import logging
import threading
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from web3 import Web3

from ballot_chain import config

logger = logging.getLogger(__name__)


class ContractConfigError(Exception):
    """Raised when the compiled contracts or the deployment receipt can't be used."""


class Web3Connector:
    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is not None:
            return cls._instance
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls._connect()
        return cls._instance

    @classmethod
    def _connect(cls):
        network = config.WEB3_NETWORK
        provider_url = config.PROVIDER_URLS.get(network)
        if not provider_url:
            raise ContractConfigError(f"No provider URL configured for network '{network}'")

        instance = super(Web3Connector, cls).__new__(cls)
        instance.network = network
        instance.web3 = Web3(Web3.HTTPProvider(provider_url))
        if instance.web3.is_connected():
            logger.info(f"Connected to {network} node at {provider_url}")
        else:
            logger.warning(f"Node at {provider_url} is not reachable yet")
        return instance

    @classmethod
    def reset(cls):
        cls._instance = None


def get_web3() -> Web3:
    return Web3Connector().web3


def _build_dir() -> Path:
    return Path(config.CONTRACT_BUILD_DIR)


def _read_json(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r") as f:
            return json.load(f)
    except FileNotFoundError:
        raise ContractConfigError(f"{path} not found. Compile and deploy the contracts first.")
    except json.JSONDecodeError as e:
        raise ContractConfigError(f"{path} is not valid JSON: {e}")


def load_artifact(name: str) -> List[Dict[str, Any]]:
    """
    Returns the ABI of a compiled contract, read once per build dir.
    Accepts both the solc layout ("interface" holding the ABI as a JSON string)
    and the truffle/hardhat layout ("abi" holding a list).
    """
    return _load_abi(str(_build_dir()), name)


@lru_cache(maxsize=None)
def _load_abi(build_dir: str, name: str) -> List[Dict[str, Any]]:
    artifact = _read_json(Path(build_dir) / f"{name}.json")

    if "abi" in artifact:
        abi = artifact["abi"]
    elif "interface" in artifact:
        abi = artifact["interface"]
        if isinstance(abi, str):
            try:
                abi = json.loads(abi)
            except json.JSONDecodeError as e:
                raise ContractConfigError(f"Invalid interface in {name}.json: {e}")
    else:
        raise ContractConfigError(f"{name}.json has neither 'abi' nor 'interface'")

    if not isinstance(abi, list):
        raise ContractConfigError(f"ABI in {name}.json must be a list")
    return abi


def clear_artifact_cache():
    _load_abi.cache_clear()


def load_receipt(network: str) -> str:
    """Returns the factory address recorded when it was deployed on `network`."""
    if network not in config.PROVIDER_URLS:
        raise ContractConfigError(f"Unknown network '{network}'")

    receipt = _read_json(_build_dir().parent / f"receipt-{network}.json")
    address = receipt.get("address") or receipt.get("contractAddress")
    if not address:
        raise ContractConfigError(f"receipt-{network}.json has no contract address")
    return address
