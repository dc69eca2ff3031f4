import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict, Field

from primecloud import __version__
from primecloud.api.config import API_SERVER_HOST, FRONTEND_PORT
from primecloud.api_client import ApiError, NumbersServiceClient
from primecloud.client import DEFAULT_FROM, DEFAULT_TO, submit

logger = logging.getLogger(__name__)

router = APIRouter()


class NumbersForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: int = Field(default=DEFAULT_FROM, alias="from")
    to: int = Field(default=DEFAULT_TO)


class NumbersResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: int = Field(..., alias="from")
    to: int
    primes: list[int] = Field(..., serialization_alias="primeNumbers")
    instance_id: str = Field(..., alias="instanceId")
    duration: float = Field(..., description="Round trip to the numbers service, in seconds")


def get_client(request: Request) -> NumbersServiceClient:
    return request.app.state.numbers_service_client


@router.get("/health")
async def health():
    return {"status": "healthy"}


@router.get("/", response_model=NumbersForm)
async def render() -> NumbersForm:
    return NumbersForm()


@router.post("/", response_model=NumbersResult)
def submit_form(
    form: Optional[NumbersForm] = Body(default=None),
    client: NumbersServiceClient = Depends(get_client),
) -> NumbersResult:
    form = form or NumbersForm()
    try:
        result = submit(form.from_, form.to, client=client)
    except ApiError as exc:
        logger.error(f"Numbers service call failed: {exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)
        ) from exc

    return NumbersResult(
        from_=form.from_,
        to=form.to,
        primes=list(result.primes),
        instance_id=result.instance_id,
        duration=result.elapsed.total_seconds(),
    )


def create_app(client: Optional[NumbersServiceClient] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Frontend starting up")
        logger.info(
            f"Configuration: host={API_SERVER_HOST}, port={FRONTEND_PORT}, "
            f"numbers_service={app.state.numbers_service_client.BASE_URL}"
        )
        yield
        logger.info("Frontend shutting down")

    app = FastAPI(title="frontend", version=__version__, lifespan=lifespan)
    app.state.numbers_service_client = client or NumbersServiceClient()
    app.include_router(router)
    return app


def run() -> None:
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(create_app(), host=API_SERVER_HOST, port=FRONTEND_PORT)
