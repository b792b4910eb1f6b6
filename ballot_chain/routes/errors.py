import logging
from fastapi import HTTPException
from web3.exceptions import ContractLogicError, Web3RPCError

from ballot_chain.blockchain.connection import ContractConfigError
from ballot_chain.blockchain.contracts import TransactionRevertedError

logger = logging.getLogger(__name__)


def _is_revert(error: Web3RPCError) -> bool:
    # eth_sendTransaction reverts come back as RPC errors, not ContractLogicError
    rpc_error = (getattr(error, "rpc_response", None) or {}).get("error") or {}
    message = f"{error} {rpc_error.get('message', '')}".lower()
    return "revert" in message


def to_http_exception(error: Exception) -> HTTPException:
    """Maps a failed contract call onto the HTTP error the client should see."""
    if isinstance(error, HTTPException):
        return error
    if isinstance(error, (ContractLogicError, TransactionRevertedError)):
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, Web3RPCError) and _is_revert(error):
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, ContractConfigError):
        return HTTPException(status_code=503, detail=str(error))
    if isinstance(error, IndexError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, ValueError):
        return HTTPException(status_code=400, detail=str(error))

    logger.exception("Unexpected blockchain failure")
    return HTTPException(status_code=500, detail=f"Blockchain error: {str(error)}")
