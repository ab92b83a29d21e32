"""
Pydantic models for the identity number HTTP API.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class IdNumberRequest(BaseModel):
    """Request body carrying a single identity number."""

    id_number: str = Field(..., description="15- or 18-digit identity number")


class ValidateResponse(BaseModel):
    """Validation verdict."""

    valid: bool = Field(..., description="Whether the number is valid")
    error_kind: Optional[str] = Field(None, description="Failure kind when invalid")


class AreaResponse(BaseModel):
    """Resolved administrative area."""

    province: str = Field(..., description="Province-level name")
    city: str = Field("", description="City-level name, empty if not applicable")
    district: str = Field("", description="District-level name, empty if not applicable")


class PersonInfo(BaseModel):
    """Facts derived from the number."""

    age: int = Field(..., ge=0, description="Age in completed years")
    birthday: str = Field(..., description="Birth date, YYYY-MM-DD")
    gender: Literal[0, 1] = Field(..., description="1 male, 0 female")


class InfoResponse(BaseModel):
    """Full identity information."""

    card_no: str = Field(..., description="Canonical 18-digit number")
    area: AreaResponse
    info: PersonInfo


class UpgradeResponse(BaseModel):
    """Canonical 18-digit number."""

    card_no: str


class GenerateRequest(BaseModel):
    """Constraints for synthetic number generation."""

    eighteen: bool = Field(True, description="Generate the 18-digit form")
    address: Optional[str] = Field(
        None, description="Official full name of a province, city or district"
    )
    birthday: Optional[str] = Field(
        None, description="Birth date constraint: YYYY, YYYYMM or YYYYMMDD"
    )
    sex: Optional[Literal[0, 1]] = Field(None, description="1 male, 0 female, null random")


class GenerateResponse(BaseModel):
    """A generated identity number."""

    id_number: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Service version")


class ErrorDetail(BaseModel):
    """Error detail."""

    kind: str
    message: str


class ErrorResponse(BaseModel):
    """Error response."""

    error: ErrorDetail
