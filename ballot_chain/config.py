# ballot_chain/config.py
# Central place for node, contract and server settings
import os
from dotenv import load_dotenv

load_dotenv()

APPNAME = "Ballot Chain API"
VERSION = "v1"

# Network the factory contract was deployed on: "ganache" or "rinkeby".
# Transactions are signed by the node, so RINKEBY_URL must point at a node
# with unlocked accounts (e.g. a local geth), not a plain hosted endpoint.
WEB3_NETWORK = os.getenv("WEB3_NETWORK", "ganache")

PROVIDER_URLS = {
    "ganache": os.getenv("GANACHE_URL", "http://127.0.0.1:8545"),
    "rinkeby": os.getenv("RINKEBY_URL", ""),
}

# Compiled contracts live in <build dir>/<Name>.json, deployment receipts
# one level up as receipt-<network>.json
CONTRACT_BUILD_DIR = os.getenv("CONTRACT_BUILD_DIR", "ethereum/build")
FACTORY_CONTRACT = "ElectionFactory"
ELECTION_CONTRACT = "Election"

# Gas limits per transaction type
CREATE_ELECTION_GAS = 4000000
ADD_VOTER_GAS = 3000000
DEFAULT_GAS = 1000000

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
    ).split(",")
    if origin.strip()
]

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "4000"))
