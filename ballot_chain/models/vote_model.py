from pydantic import BaseModel

from ballot_chain.models.election_model import AccountRef


class Vote(BaseModel):
    voterId: AccountRef
    consituencyId: int
    candidateId: AccountRef
