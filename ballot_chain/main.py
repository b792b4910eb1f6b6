# main.py
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from ballot_chain import config
from ballot_chain.blockchain.connection import Web3Connector
from ballot_chain.routes.election_routes import router as election_router
from ballot_chain.routes.registration_routes import router as registration_router
from ballot_chain.routes.vote_routes import vote_router

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title=config.APPNAME, version=config.VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(election_router)
app.include_router(registration_router)
app.include_router(vote_router)


@app.get("/", tags=["Root"])
def read_root():
    return {"message": f"Welcome to the {config.APPNAME}"}


@app.get("/health", tags=["Root"])
def health_check():
    try:
        connector = Web3Connector()
        connected = connector.web3.is_connected()
    except Exception as e:
        logger.warning(f"Health check failed: {e}")
        connected = False
    return {
        "status": "healthy" if connected else "degraded",
        "network": config.WEB3_NETWORK,
        "nodeConnected": connected,
    }


@app.get("/favicon.ico", include_in_schema=False)
async def favicon():
    return Response(status_code=204)


if __name__ == "__main__":
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
