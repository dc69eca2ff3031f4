__version__ = "0.1.0"

from primecloud.api_client import ApiError
from primecloud.client import Submission, submit
from primecloud.config import Config, from_env, validate
from primecloud.discovery import ServiceNotFoundError, ServiceRegistry
from primecloud.service import PrimeNumbersService, PrimeResult, compute_primes, is_prime

__all__ = [
    "ApiError",
    "Submission",
    "submit",
    "Config",
    "from_env",
    "validate",
    "ServiceNotFoundError",
    "ServiceRegistry",
    "PrimeNumbersService",
    "PrimeResult",
    "compute_primes",
    "is_prime",
]
