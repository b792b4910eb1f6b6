"""Shared fixtures: a fake node and fake Election/ElectionFactory contracts."""

from unittest.mock import MagicMock, patch

import pytest

# all-digit hex addresses are already in checksum form
ADMIN = "0x" + "1" * 40
VOTER = "0x" + "2" * 40
CANDIDATE_A = "0x" + "3" * 40
CANDIDATE_B = "0x" + "4" * 40
ELECTION_ADDRESS = "0x" + "5" * 40
FACTORY_ADDRESS = "0x" + "6" * 40
ACCOUNTS = [ADMIN, VOTER, CANDIDATE_A, CANDIDATE_B]


def _fn(name, inputs=(), outputs=()):
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": n, "type": t} for n, t in inputs],
        "outputs": [{"name": n, "type": t} for n, t in outputs],
    }


ELECTION_ABI = [
    _fn("admin", outputs=[("", "address")]),
    _fn("electionName", outputs=[("", "string")]),
    _fn("consituencyData", [("", "uint256")], [("consituencyId", "uint256"), ("name", "string")]),
    _fn(
        "candidateData",
        [("", "address")],
        [
            ("candidateId", "address"),
            ("name", "string"),
            ("email", "string"),
            ("phoneNo", "string"),
            ("consituency", "uint256"),
            ("party", "string"),
        ],
    ),
    _fn(
        "voterData",
        [("", "address")],
        [
            ("voterId", "address"),
            ("name", "string"),
            ("email", "string"),
            ("phoneNo", "string"),
            ("consituency", "uint256"),
            ("age", "uint256"),
            ("hasVoted", "bool"),
        ],
    ),
    _fn("getConsituencyIdList", outputs=[("", "uint256[]")]),
    _fn("getCandidatesIdList", outputs=[("", "address[]")]),
    _fn("getVotersIdList", outputs=[("", "address[]")]),
    _fn("getConsituencyCandidates", [("consituencyId", "uint256")], [("", "address[]")]),
    _fn("getVotes", [("consituencyId", "uint256"), ("candidateId", "address")], [("", "uint256")]),
]

FACTORY_ABI = [_fn("getElections", outputs=[("", "address[]")])]

RECEIPT = {"transactionHash": "0x" + "ab" * 32, "status": 1, "gasUsed": 21000}


def returns(value):
    """A contract function mock whose bound call returns `value`."""
    bound = MagicMock()
    bound.call.return_value = value
    bound.transact.return_value = b"\x01" * 32
    return MagicMock(return_value=bound)


def keyed(mapping):
    """A contract function mock whose call result depends on its arguments."""

    def bind(*args):
        bound = MagicMock()
        key = args[0] if len(args) == 1 else args
        bound.call.return_value = mapping[key]
        return bound

    return MagicMock(side_effect=bind)


@pytest.fixture
def web3_mock():
    """Fake node handing out ACCOUNTS and RECEIPT."""
    w3 = MagicMock()
    w3.eth.accounts = list(ACCOUNTS)
    w3.eth.wait_for_transaction_receipt.return_value = RECEIPT
    with patch("ballot_chain.blockchain.contracts.get_web3", return_value=w3):
        yield w3


@pytest.fixture
def election_contract(web3_mock):
    contract = MagicMock()
    contract.abi = ELECTION_ABI
    with patch("ballot_chain.election_logic.get_contract_object", return_value=contract) as factory:
        contract.get_contract_object = factory
        yield contract


@pytest.fixture
def factory_contract(web3_mock):
    contract = MagicMock()
    contract.abi = FACTORY_ABI
    with patch("ballot_chain.election_logic.get_factory_object", return_value=contract):
        yield contract
