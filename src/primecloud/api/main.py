import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.routing import APIRouter

from primecloud import __version__
from primecloud.api.config import API_SERVER_HOST, API_SERVER_PORT, INSTANCE_ID
from primecloud.api.routers.primenumbers import router as primenumbers_router
from primecloud.service import PrimeNumbersService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "healthy"}


@router.get("/ready")
async def ready():
    return {"status": "ready"}


@router.get("/")
async def root(request: Request):
    return {
        "name": "numbers-service",
        "version": __version__,
        "instanceId": request.app.state.prime_numbers_service.instance_id,
    }


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


def create_app(instance_id: Optional[str] = None) -> FastAPI:
    instance_id = instance_id or INSTANCE_ID

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Numbers service starting up")
        logger.info(
            f"Configuration: host={API_SERVER_HOST}, port={API_SERVER_PORT}, "
            f"instance_id={instance_id}"
        )
        yield
        logger.info("Numbers service shutting down")

    app = FastAPI(
        title="numbers-service",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.prime_numbers_service = PrimeNumbersService(instance_id)
    app.include_router(router)
    app.include_router(primenumbers_router)
    app.add_exception_handler(Exception, general_exception_handler)
    return app


app = create_app()


def run() -> None:
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host=API_SERVER_HOST, port=API_SERVER_PORT)
