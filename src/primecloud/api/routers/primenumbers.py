from fastapi import APIRouter, Depends, Request

from primecloud.api.models import PrimeNumbersRequest, PrimeNumbersResponse
from primecloud.service import PrimeNumbersService

router = APIRouter()


def get_service(request: Request) -> PrimeNumbersService:
    return request.app.state.prime_numbers_service


@router.post("/primenumbers", response_model=PrimeNumbersResponse)
def calculate_prime_numbers(
    request: PrimeNumbersRequest,
    service: PrimeNumbersService = Depends(get_service),
) -> PrimeNumbersResponse:
    result = service.calculate(request.from_, request.to)
    return PrimeNumbersResponse(primes=list(result.primes), instance_id=result.instance_id)
