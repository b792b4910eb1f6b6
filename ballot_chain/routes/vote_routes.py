from fastapi import APIRouter, Query
from typing import List

from ballot_chain import election_logic
from ballot_chain.models.vote_model import Vote
from ballot_chain.routes.errors import to_http_exception
from ballot_chain.schemas import ElectionDataRecord, ElectionResult, VoterConsituencyCandidates

vote_router = APIRouter(prefix="/api/v1", tags=["Vote"])


@vote_router.get("/getConsituencyCandidates/{address}/{consituency_id}")
def get_consituency_candidates(address: str, consituency_id: int, account: str = Query("0")):
    """
    Candidates enrolled in a consituency, read as `account` (index or address).
    """
    try:
        return election_logic.get_consituency_candidates(address, account, consituency_id)
    except Exception as e:
        raise to_http_exception(e)


@vote_router.get(
    "/getVoterConsituencyCandidates/{address}/{voter_id}/{consituency_id}",
    response_model=VoterConsituencyCandidates,
)
def get_voter_consituency_candidates(address: str, voter_id: str, consituency_id: int):
    try:
        return election_logic.get_voter_consituency_candidates(address, voter_id, consituency_id)
    except Exception as e:
        raise to_http_exception(e)


@vote_router.post("/castVote/{address}")
def cast_vote(address: str, vote: Vote):
    """
    Casts a vote from the voter's own account. Double voting and closed
    elections are rejected by the contract and come back as 400.
    """
    try:
        return election_logic.cast_vote(address, vote.voterId, vote.consituencyId, vote.candidateId)
    except Exception as e:
        raise to_http_exception(e)


@vote_router.get("/getCandidateVotes/{address}/{consituency_id}/{candidate_id}")
def get_candidate_votes(address: str, consituency_id: int, candidate_id: str):
    try:
        return election_logic.get_candidate_votes(address, consituency_id, candidate_id)
    except Exception as e:
        raise to_http_exception(e)


@vote_router.get("/electionData/{address}", response_model=List[ElectionDataRecord])
def election_data(address: str):
    try:
        return election_logic.election_data(address)
    except Exception as e:
        raise to_http_exception(e)


@vote_router.get("/electionResult/{address}", response_model=ElectionResult)
def election_result(address: str):
    try:
        return election_logic.election_result(address)
    except Exception as e:
        raise to_http_exception(e)
