import json
import logging
import os
import sys
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

import requests
from openapi_spec_validator import validate
from openapi_spec_validator.exceptions import OpenAPISpecValidatorError

from primecloud.api_client import PRIME_NUMBERS_PATH, ApiError, NumbersServiceClient
from primecloud.config import from_env, validate as validate_config


logger = logging.getLogger(__name__)

DEFAULT_FROM = 0
DEFAULT_TO = 100


@dataclass(frozen=True)
class Submission:
    primes: tuple[int, ...]
    instance_id: str
    elapsed: timedelta


def submit(
    from_: int = DEFAULT_FROM,
    to: int = DEFAULT_TO,
    client: Optional[NumbersServiceClient] = None,
) -> Submission:
    """
    Ask the numbers service for the primes in ``[from_, to]``.

    Makes a single blocking call and measures the round trip. Failures
    propagate as ``ApiError``.
    """
    client = client or NumbersServiceClient()

    start = time.perf_counter()
    response = client.calculate_prime_numbers(from_, to)
    end = time.perf_counter()

    elapsed = timedelta(seconds=end - start)
    logger.info(
        f"{len(response.primes)} primes in [{from_}, {to}] from instance "
        f"'{response.instance_id}' in {elapsed.total_seconds():.3f}s"
    )
    return Submission(
        primes=tuple(response.primes),
        instance_id=response.instance_id,
        elapsed=elapsed,
    )


def load_openapi_spec(spec_url: str) -> dict:
    logger.info(f"Loading OpenAPI spec from URL '{spec_url}'")
    if spec_url.startswith("http"):
        try:
            response = requests.get(spec_url, timeout=10)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f"Failed to fetch OpenAPI spec: {e}")
            raise
    else:
        try:
            with open(spec_url, "r") as file:
                return json.load(file)
        except (IOError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load OpenAPI spec from file: {e}")
            raise


def validate_spec(spec: dict, base_url: str) -> bool:
    try:
        validate(spec, base_url)
    except OpenAPISpecValidatorError as e:
        logger.error(f"Validation failed: {e}")
        return False
    return True


def _spec_has_path(spec: dict, path: str) -> bool:
    paths = spec.get("paths", {})
    if not isinstance(paths, dict):
        return False

    normalized = path if path.startswith("/") else f"/{path}"
    wanted = normalized.rstrip("/") or "/"

    for raw_spec_path in paths.keys():
        if not isinstance(raw_spec_path, str):
            continue

        spec_path = raw_spec_path if raw_spec_path.startswith("/") else f"/{raw_spec_path}"
        if (spec_path.rstrip("/") or "/") == wanted:
            return True

    return False


def _preflight(spec_url: str, base_url: str) -> bool:
    try:
        openapi_spec = load_openapi_spec(spec_url)
    except Exception:
        logger.error("OpenAPI spec could not be loaded; skipping submission.")
        return False

    if not validate_spec(openapi_spec, base_url):
        return False

    if not _spec_has_path(openapi_spec, PRIME_NUMBERS_PATH):
        logger.warning(
            "OpenAPI spec does not contain path '/%s'; skipping submission.",
            PRIME_NUMBERS_PATH,
        )
        return False
    return True


def main() -> int:
    logging.basicConfig(level=logging.INFO)

    if not validate_config():
        return 2

    config = from_env()
    range_from = config["RANGE"]["range_from"]
    range_to = config["RANGE"]["range_to"]

    if not os.getenv("SKIP_OPENAPI_CHECK"):
        if not _preflight(config["OPENAPI_SPEC_URL"], config["NUMBERS_SERVICE_URL"]):
            return 1

    try:
        result = submit(range_from, range_to)
    except ApiError as e:
        logger.error(
            f"API error for range [{range_from}, {range_to}]: "
            f"{e} (Status: {e.status_code if e.status_code else 'N/A'})"
        )
        return 1

    logger.info(f"Prime numbers: {list(result.primes)}")
    logger.info(f"Instance: {result.instance_id}")
    logger.info(f"Duration: {result.elapsed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
