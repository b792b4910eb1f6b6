from fastapi import APIRouter
from typing import List

from ballot_chain import election_logic
from ballot_chain.models.election_model import CloseElection, Consituency, CreateElection
from ballot_chain.routes.errors import to_http_exception
from ballot_chain.schemas import ElectionSummary

router = APIRouter(prefix="/api/v1", tags=["Election"])


@router.get("/accounts")
def get_accounts():
    try:
        return election_logic.get_accounts()
    except Exception as e:
        raise to_http_exception(e)


@router.post("/createElection")
def create_election(election: CreateElection):
    """
    Deploys a new Election through the factory. Returns the transaction receipt.
    """
    try:
        return election_logic.create_election(
            election.account, election.durationInMins, election.electionName
        )
    except Exception as e:
        raise to_http_exception(e)


@router.get("/getConductedElections", response_model=List[ElectionSummary])
def get_conducted_elections():
    try:
        return election_logic.get_conducted_elections()
    except Exception as e:
        raise to_http_exception(e)


@router.get("/getElectionAddress/{index}", response_model=ElectionSummary)
def get_election_address(index: int):
    try:
        return election_logic.get_election_address(index)
    except Exception as e:
        raise to_http_exception(e)


@router.get("/getElectionAdmin/{address}")
def get_election_admin(address: str):
    try:
        return election_logic.get_election_admin(address)
    except Exception as e:
        raise to_http_exception(e)


@router.get("/getElectionName/{address}")
def get_election_name(address: str):
    try:
        return election_logic.get_election_name(address)
    except Exception as e:
        raise to_http_exception(e)


@router.post("/closeElection/{address}")
def close_election(address: str, body: CloseElection):
    try:
        return election_logic.close_election(address, body.account)
    except Exception as e:
        raise to_http_exception(e)


# --- Consituencies ---

@router.post("/addConsituency/{address}")
def add_consituency(address: str, consituency: Consituency):
    try:
        return election_logic.add_consituency(
            consituency.account, address, consituency.consituencyId, consituency.consituency
        )
    except Exception as e:
        raise to_http_exception(e)


@router.get("/getConsituencyList/{address}")
def get_consituency_list(address: str):
    try:
        return election_logic.get_consituency_list(address)
    except Exception as e:
        raise to_http_exception(e)


@router.get("/getConsituency/{address}/{consituency_id}")
def get_consituency(address: str, consituency_id: int):
    try:
        return election_logic.get_consituency(address, consituency_id)
    except Exception as e:
        raise to_http_exception(e)
