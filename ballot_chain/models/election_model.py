from pydantic import BaseModel, Field
from typing import Union

# Account index into the node's unlocked accounts, or a hex address
AccountRef = Union[int, str]


class CreateElection(BaseModel):
    account: AccountRef = 0
    durationInMins: int = Field(..., gt=0, example=60)
    electionName: str = Field(..., min_length=1, example="General Election")


class CloseElection(BaseModel):
    account: AccountRef = 0


class Consituency(BaseModel):
    account: AccountRef = 0
    consituencyId: int = Field(..., ge=0, example=1)
    consituency: str = Field(..., min_length=1, example="Hiriyur")


class Voter(BaseModel):
    account: AccountRef = 0
    voterId: AccountRef
    name: str
    email: str
    phoneNo: str
    consituency: int
    age: int = Field(..., ge=0)


class Candidate(BaseModel):
    account: AccountRef = 0
    candidateId: AccountRef
    name: str
    email: str
    phoneNo: str
    consituency: int
    party: str
