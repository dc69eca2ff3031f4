import logging
from typing import Any, Optional

import requests
from opentelemetry import trace
from pydantic import ValidationError
from requests import Response

from primecloud.api.models import PrimeNumbersRequest, PrimeNumbersResponse
from primecloud.config import from_env
from primecloud.discovery import ServiceRegistry, from_settings
from primecloud.settings import NUMBERS_SERVICE


tracer = trace.get_tracer("primecloud-client")

logger = logging.getLogger(__name__)

PRIME_NUMBERS_PATH = "primenumbers"


class ApiError(Exception):
    """
    Error raised when a call to the numbers service fails.

    Covers transport failures, non-success HTTP statuses and response
    bodies that cannot be decoded.

    Attributes:
        status_code: Optional HTTP status code (if applicable)
    """

    status_code: Optional[int]

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NumbersServiceClient:
    """Sync HTTP client for the numbers service with telemetry."""

    def __init__(
        self,
        registry: Optional[ServiceRegistry] = None,
        timeout: Optional[float] = None,
    ) -> None:
        registry = registry or from_settings()
        self.BASE_URL = registry.resolve(NUMBERS_SERVICE)
        self.timeout = timeout if timeout is not None else from_env()["REQUEST_TIMEOUT"]

    def _build_url(self, path: str) -> str:
        """
        Join BASE_URL and ``path`` without doubling the slash.

        Examples:
            >>> client._build_url("/primenumbers")
            'http://numbers-service:8081/primenumbers'
        """
        return f"{self.BASE_URL.rstrip('/')}/{path.lstrip('/')}"

    def make_api_call(
        self,
        path: str,
        method: str = "POST",
        data: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, Any]] = None,
    ) -> Response:
        with tracer.start_as_current_span("call_api") as call_span:
            url = self._build_url(path)
            call_span.set_attribute("http.url", url)
            call_span.set_attribute("http.method", method)

            if method != "POST":
                call_span.set_attribute("call.completed", False)
                raise ValueError(f"Unsupported HTTP method: {method}")

            try:
                response = requests.post(
                    url, json=data, headers=headers, timeout=self.timeout
                )
                call_span.set_attribute("http.status_code", response.status_code)

                if not response.ok:
                    call_span.set_attribute("call.completed", False)
                    raise ApiError(
                        f"HTTP {response.status_code}: {response.text[:200]} at path '{path}' with method '{method}'",
                        response.status_code,
                    )

                call_span.set_attribute("call.completed", True)
                return response

            except requests.RequestException as e:
                call_span.set_attribute("call.completed", False)
                call_span.set_attribute("error.type", type(e).__name__)
                error_msg = (
                    f"Request failed for path '{path}' with method '{method}': "
                    f"{type(e).__name__}: {e}"
                )
                logger.error(error_msg)
                raise ApiError(error_msg) from e

    def calculate_prime_numbers(self, from_: int, to: int) -> PrimeNumbersResponse:
        request = PrimeNumbersRequest(from_=from_, to=to)
        response = self.make_api_call(
            PRIME_NUMBERS_PATH,
            data=request.model_dump(by_alias=True),
        )
        try:
            return PrimeNumbersResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            error_msg = f"Malformed response from {self.BASE_URL}: {e}"
            logger.error(error_msg)
            raise ApiError(error_msg, response.status_code) from e
