import logging
from dataclasses import dataclass

from opentelemetry import trace


tracer = trace.get_tracer("primecloud-numbers-service")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrimeResult:
    primes: tuple[int, ...]
    instance_id: str


def divisor_count(n: int) -> int:
    """
    Count the divisors of ``n`` in ``[1, n]``.

    The scan runs downward from ``n`` to 1, so it never executes for
    ``n <= 0`` and those candidates report zero divisors.
    """
    count = 0
    d = n
    while d >= 1:
        if n % d == 0:
            count += 1
        d -= 1
    return count


def is_prime(n: int) -> bool:
    return divisor_count(n) == 2


def compute_primes(from_: int, to: int) -> list[int]:
    """
    Return every prime in the inclusive range ``[from_, to]``, ascending.

    Uses a full divisor count per candidate. An inverted range gives an
    empty list.
    """
    return [n for n in range(from_, to + 1) if is_prime(n)]


class PrimeNumbersService:
    """Computes primes on behalf of one running instance."""

    def __init__(self, instance_id: str) -> None:
        self.instance_id = instance_id

    def calculate(self, from_: int, to: int) -> PrimeResult:
        with tracer.start_as_current_span("calculate_prime_numbers") as span:
            span.set_attribute("range.from", from_)
            span.set_attribute("range.to", to)
            span.set_attribute("instance.id", self.instance_id)

            primes = compute_primes(from_, to)

            span.set_attribute("primes.count", len(primes))
            logger.debug(
                f"Found {len(primes)} primes in [{from_}, {to}] on {self.instance_id}"
            )
            return PrimeResult(primes=tuple(primes), instance_id=self.instance_id)
