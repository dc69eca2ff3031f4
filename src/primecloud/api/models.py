from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class PrimeNumbersRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: int = Field(..., alias="from", description="Inclusive lower bound")
    to: int = Field(..., description="Inclusive upper bound")


class PrimeNumbersResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    primes: list[int] = Field(
        ...,
        validation_alias=AliasChoices("primeNumbers", "primes"),
        serialization_alias="primeNumbers",
        description="Primes found in the range, ascending",
    )
    instance_id: str = Field(
        ...,
        alias="instanceId",
        description="Identifier of the instance that computed the result",
    )
