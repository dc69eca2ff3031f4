from dataclasses import dataclass
import os
import socket
from typing import Optional


@dataclass(frozen=True)
class CoreSettings:
    numbers_service_url: str
    app_name: str
    instance_id: str
    request_timeout: float
    openapi_spec_url: str
    range_from: int
    range_to: int


@dataclass(frozen=True)
class ApiSettings:
    api_server_host: str
    api_server_port: int
    frontend_port: int


NUMBERS_SERVICE = "numbers-service"


def default_instance_id(app_name: str, port: int, hostname: Optional[str] = None) -> str:
    host = hostname or socket.gethostname()
    return f"{host}:{app_name}:{port}"


def load_core_settings() -> CoreSettings:
    numbers_service_url = os.getenv("NUMBERS_SERVICE_URL", "http://localhost:8081")
    app_name = os.getenv("APP_NAME", NUMBERS_SERVICE)
    port = int(os.getenv("API_SERVER_PORT", "8081"))
    return CoreSettings(
        numbers_service_url=numbers_service_url,
        app_name=app_name,
        instance_id=os.getenv("INSTANCE_ID") or default_instance_id(app_name, port),
        request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30.0")),
        openapi_spec_url=os.getenv(
            "OPENAPI_SPEC_URL", f"{numbers_service_url.rstrip('/')}/openapi.json"
        ),
        range_from=int(os.getenv("RANGE_FROM", "0")),
        range_to=int(os.getenv("RANGE_TO", "100")),
    )


def load_api_settings() -> ApiSettings:
    return ApiSettings(
        api_server_host=os.getenv("API_SERVER_HOST", "0.0.0.0"),
        api_server_port=int(os.getenv("API_SERVER_PORT", "8081")),
        frontend_port=int(os.getenv("FRONTEND_PORT", "8080")),
    )
