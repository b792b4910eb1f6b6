"""
Wrappers around the ElectionFactory and Election contract methods.

Each function forwards its arguments to one contract method and returns the
result as the node hands it back. Failures are logged and re-raised unchanged.
"""
import logging
from typing import Any, Dict, List

from ballot_chain import config, tally
from ballot_chain.blockchain.contracts import (
    Account,
    call_method,
    get_accounts as node_accounts,
    get_contract_object,
    get_factory_object,
    resolve_account,
    send_method,
)

logger = logging.getLogger(__name__)


def _default_sender() -> str:
    return resolve_account(0)


def get_accounts() -> List[str]:
    try:
        return node_accounts()
    except Exception as e:
        logger.error(f"Error fetching accounts: {e}")
        raise


# ------------------------------
# Elections
# ------------------------------
def create_election(account: Account, duration_in_mins: int, election_name: str) -> Dict[str, Any]:
    try:
        contract = get_factory_object()
        receipt = send_method(
            contract, "createElection", duration_in_mins, election_name,
            sender=resolve_account(account), gas=config.CREATE_ELECTION_GAS,
        )
        logger.info(f"New election '{election_name}' created: {receipt.get('transactionHash')}")
        return receipt
    except Exception as e:
        logger.error(f"Error creating election: {e}")
        raise


def get_conducted_elections() -> List[Dict[str, str]]:
    try:
        sender = _default_sender()
        elections = call_method(get_factory_object(), "getElections", sender=sender)

        result = []
        for election_address in elections:
            election = get_contract_object(election_address)
            result.append({
                "electionAddress": election_address,
                "electionName": call_method(election, "electionName", sender=sender),
            })
        logger.debug(f"Conducted elections: {result}")
        return result
    except Exception as e:
        logger.error(f"Error fetching conducted elections: {e}")
        raise


def get_election_address(index: int) -> Dict[str, str]:
    elections = get_conducted_elections()
    if index < 0 or index >= len(elections):
        raise IndexError(f"No election at index {index}")
    return elections[index]


def get_election_admin(address: str) -> str:
    try:
        return call_method(get_contract_object(address), "admin", sender=_default_sender())
    except Exception as e:
        logger.error(f"Error fetching admin of {address}: {e}")
        raise


def get_election_name(address: str) -> str:
    try:
        return call_method(get_contract_object(address), "electionName", sender=_default_sender())
    except Exception as e:
        logger.error(f"Error fetching name of {address}: {e}")
        raise


def close_election(address: str, account: Account) -> Dict[str, Any]:
    try:
        contract = get_contract_object(address)
        receipt = send_method(contract, "closeElection", sender=resolve_account(account))
        logger.info(f"Election {address} closed: {receipt.get('transactionHash')}")
        return receipt
    except Exception as e:
        logger.error(f"Error closing election {address}: {e}")
        raise


# ------------------------------
# Consituencies
# ------------------------------
def add_consituency(account: Account, address: str, consituency_id, name: str) -> Dict[str, Any]:
    try:
        contract = get_contract_object(address)
        receipt = send_method(
            contract, "addConsituency", int(consituency_id), name,
            sender=resolve_account(account),
        )
        logger.info(f"Consituency {consituency_id} ({name}) added to {address}")
        return receipt
    except Exception as e:
        logger.error(f"Error adding consituency to {address}: {e}")
        raise


def get_consituency(address: str, consituency_id):
    try:
        return call_method(
            get_contract_object(address), "consituencyData", consituency_id,
            sender=_default_sender(),
        )
    except Exception as e:
        logger.error(f"Error fetching consituency {consituency_id}: {e}")
        raise


def get_consituency_list(address: str) -> List[Any]:
    try:
        id_list = call_method(
            get_contract_object(address), "getConsituencyIdList", sender=_default_sender()
        )
        return [get_consituency(address, consituency_id) for consituency_id in id_list]
    except Exception as e:
        logger.error(f"Error fetching consituency list of {address}: {e}")
        raise


# ------------------------------
# Voters
# ------------------------------
def add_voter(address: str, account: Account, voter_id, name, email, phone_no, consituency, age) -> Dict[str, Any]:
    try:
        contract = get_contract_object(address)
        receipt = send_method(
            contract, "addVoter", resolve_account(voter_id), name, email, phone_no, consituency, age,
            sender=resolve_account(account), gas=config.ADD_VOTER_GAS,
        )
        logger.info(f"Voter {voter_id} added in consituency {consituency}")
        return receipt
    except Exception as e:
        logger.error(f"Error adding voter {voter_id}: {e}")
        raise


def get_voter(address: str, voter_id):
    try:
        return call_method(
            get_contract_object(address), "voterData", resolve_account(voter_id), sender=_default_sender()
        )
    except Exception as e:
        logger.error(f"Error fetching voter {voter_id}: {e}")
        raise


def get_voter_list(address: str) -> List[Any]:
    try:
        id_list = call_method(
            get_contract_object(address), "getVotersIdList", sender=_default_sender()
        )
        logger.debug(f"Voter ids of {address}: {id_list}")
        return [get_voter(address, voter_id) for voter_id in id_list]
    except Exception as e:
        logger.error(f"Error fetching voter list of {address}: {e}")
        raise


# ------------------------------
# Candidates
# ------------------------------
def add_candidate(address: str, account: Account, candidate_id, name, email, phone_no, consituency, party) -> Dict[str, Any]:
    try:
        contract = get_contract_object(address)
        receipt = send_method(
            contract, "addCandidate", resolve_account(candidate_id), name, email, phone_no, consituency, party,
            sender=resolve_account(account),
        )
        logger.info(f"Candidate {candidate_id} added in consituency {consituency}")
        return receipt
    except Exception as e:
        logger.error(f"Error adding candidate {candidate_id}: {e}")
        raise


def get_candidate(address: str, candidate_id):
    try:
        return call_method(
            get_contract_object(address), "candidateData", resolve_account(candidate_id), sender=_default_sender()
        )
    except Exception as e:
        logger.error(f"Error fetching candidate {candidate_id}: {e}")
        raise


def get_candidate_list(address: str) -> List[Any]:
    try:
        id_list = call_method(
            get_contract_object(address), "getCandidatesIdList", sender=_default_sender()
        )
        return [get_candidate(address, candidate_id) for candidate_id in id_list]
    except Exception as e:
        logger.error(f"Error fetching candidate list of {address}: {e}")
        raise


def get_consituency_candidates(address: str, account: Account, consituency_id) -> List[Any]:
    try:
        return call_method(
            get_contract_object(address), "getConsituencyCandidates", consituency_id,
            sender=resolve_account(account),
        )
    except Exception as e:
        logger.error(f"Error fetching candidates of consituency {consituency_id}: {e}")
        raise


def get_voter_consituency_candidates(address: str, voter_id: Account, consituency_id) -> Dict[str, Any]:
    return {
        "consituencyId": consituency_id,
        "candidateList": get_consituency_candidates(address, voter_id, consituency_id),
    }


# ------------------------------
# Votes & results
# ------------------------------
def cast_vote(address: str, voter_id: Account, consituency_id, candidate_id) -> Dict[str, Any]:
    try:
        logger.info(f"Casting vote in {address}: voter={voter_id} consituency={consituency_id} candidate={candidate_id}")
        contract = get_contract_object(address)
        receipt = send_method(
            contract, "castVote", consituency_id, resolve_account(candidate_id),
            sender=resolve_account(voter_id),
        )
        logger.info(f"Vote of {voter_id} cast: {receipt.get('transactionHash')}")
        return receipt
    except Exception as e:
        logger.error(f"Error casting vote of {voter_id}: {e}")
        raise


def get_candidate_votes(address: str, consituency_id, candidate_id):
    try:
        return call_method(
            get_contract_object(address), "getVotes", consituency_id, resolve_account(candidate_id),
            sender=_default_sender(),
        )
    except Exception as e:
        logger.error(f"Error fetching votes of candidate {candidate_id}: {e}")
        raise


def election_data(address: str) -> List[Dict[str, Any]]:
    """
    One record per candidate per consituency, flattened in consituency order:
    {consituencyId, consituencyName, candidateId, candidateName, candidateParty, votes}
    """
    try:
        sender = _default_sender()
        records = []
        for consituency in get_consituency_list(address):
            consituency_id = int(consituency["consituencyId"])
            candidate_list = get_consituency_candidates(address, sender, consituency_id)
            if not candidate_list:
                continue

            consituency_name = consituency["name"]
            for candidate_id in candidate_list:
                candidate = get_candidate(address, candidate_id)
                records.append({
                    "consituencyId": consituency_id,
                    "consituencyName": consituency_name,
                    "candidateId": candidate_id,
                    "candidateName": candidate["name"],
                    "candidateParty": candidate["party"],
                    "votes": get_candidate_votes(address, consituency_id, candidate_id),
                })
        return records
    except Exception as e:
        logger.error(f"Error collecting election data of {address}: {e}")
        raise


def election_result(address: str) -> Dict[str, Any]:
    return tally.election_result(election_data(address))
