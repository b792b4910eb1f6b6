from fastapi import APIRouter

from ballot_chain import election_logic
from ballot_chain.models.election_model import Candidate, Voter
from ballot_chain.routes.errors import to_http_exception

router = APIRouter(prefix="/api/v1", tags=["Registration"])


# ------------------------------
# Voters
# ------------------------------
@router.post("/addVoter/{address}")
def add_voter(address: str, voter: Voter):
    try:
        return election_logic.add_voter(
            address, voter.account, voter.voterId, voter.name, voter.email,
            voter.phoneNo, voter.consituency, voter.age,
        )
    except Exception as e:
        raise to_http_exception(e)


@router.get("/getVoterList/{address}")
def get_voter_list(address: str):
    try:
        return election_logic.get_voter_list(address)
    except Exception as e:
        raise to_http_exception(e)


@router.get("/getVoter/{address}/{voter_id}")
def get_voter(address: str, voter_id: str):
    try:
        return election_logic.get_voter(address, voter_id)
    except Exception as e:
        raise to_http_exception(e)


# ------------------------------
# Candidates
# ------------------------------
@router.post("/addCandidate/{address}")
def add_candidate(address: str, candidate: Candidate):
    try:
        return election_logic.add_candidate(
            address, candidate.account, candidate.candidateId, candidate.name,
            candidate.email, candidate.phoneNo, candidate.consituency, candidate.party,
        )
    except Exception as e:
        raise to_http_exception(e)


@router.get("/getCandidateList/{address}")
def get_candidate_list(address: str):
    try:
        return election_logic.get_candidate_list(address)
    except Exception as e:
        raise to_http_exception(e)


@router.get("/getCandidate/{address}/{candidate_id}")
def get_candidate(address: str, candidate_id: str):
    try:
        return election_logic.get_candidate(address, candidate_id)
    except Exception as e:
        raise to_http_exception(e)
