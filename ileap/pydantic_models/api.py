"""
Pydantic models for the demo HTTP API request and response bodies.
"""
from pydantic import BaseModel, Field

from ileap.pydantic_models.logistics import ILeapType, Tad
from ileap.pydantic_models.pact import ProductFootprint


class ErrorResponse(BaseModel):
    """PACT error response body."""

    message: str = Field(..., description="Human readable error description")
    code: str = Field(..., description="PACT error code", examples=["BadRequest"])


class BadRequest(ErrorResponse):
    message: str = "Bad Request"
    code: str = "BadRequest"


class NoSuchFootprint(ErrorResponse):
    message: str = "The specified footprint does not exist"
    code: str = "NoSuchFootprint"


class NotImplementedResponse(ErrorResponse):
    message: str = "Not Implemented"
    code: str = "NotImplemented"


class ProductFootprintResponse(BaseModel):
    """Response of the GetFootprint action."""

    data: ProductFootprint[ILeapType]


class PfListingResponse(BaseModel):
    """Response of the ListFootprints action."""

    data: list[ProductFootprint[ILeapType]]


class TadListingResponse(BaseModel):
    """Response of the iLEAP transport activity data endpoint."""

    data: list[Tad]
