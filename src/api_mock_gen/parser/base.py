"""Data models for a parsed API specification.

The specification is a plain list of endpoint descriptors, each carrying
sample payloads rather than schemas. Loaders convert their input into
these models for the generators.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

BODY_METHODS = ("POST", "PUT", "PATCH")


class Endpoint(BaseModel):
    """A single API endpoint with sample request/response payloads."""

    model_config = ConfigDict(populate_by_name=True)

    method: str  # GET / POST / PUT / DELETE / PATCH, anything else is kept
    path: str  # /api/users/{id}
    request_body: Any = Field(default=None, alias="requestBody")
    response: Any
    status_code: int = Field(default=200, alias="statusCode")

    @field_validator("method")
    @classmethod
    def _upper_method(cls, value: str) -> str:
        return value.upper()

    @property
    def has_request_body(self) -> bool:
        return self.request_body is not None

    @property
    def accepts_body(self) -> bool:
        """True for methods whose request body gets a named type."""
        return self.method in BODY_METHODS


class ApiSpec(BaseModel):
    """The whole specification document: ``{"apis": [...]}``."""

    apis: list[Endpoint]
