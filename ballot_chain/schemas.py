from pydantic import BaseModel
from typing import List, Optional, Union


class ElectionSummary(BaseModel):
    electionAddress: str
    electionName: str


class ElectionDataRecord(BaseModel):
    consituencyId: int
    consituencyName: str
    candidateId: Union[int, str]
    candidateName: str
    candidateParty: str
    votes: int


class PartyCount(BaseModel):
    party: str
    count: int
    index: int


class ElectionResult(BaseModel):
    partyCount: List[PartyCount]
    winningParty: Optional[str] = None
    winningSeats: int


class VoterConsituencyCandidates(BaseModel):
    consituencyId: int
    candidateList: List[Union[int, str]]
