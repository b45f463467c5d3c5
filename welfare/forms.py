"""Caller-side validation of the application and grievance forms.

The submission pipeline trusts its fields; presentation code validates user
input with these models and passes ``to_fields()`` on as the request fields.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ApplicationForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    age: int = Field(gt=0)
    gender: str = Field(min_length=1)
    address: str = Field(min_length=1)
    district: str = Field(min_length=1)
    state: str = Field(min_length=1)
    pincode: str = Field(pattern=r"^\d{6}$")
    phone: str = Field(pattern=r"^\d{10}$")
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    income: float = Field(ge=0)
    aadhaar: str = Field(pattern=r"^\d{12}$")
    declaration: bool

    @field_validator("declaration")
    @classmethod
    def _declaration_accepted(cls, value: bool) -> bool:
        if not value:
            raise ValueError("You must accept the declaration")
        return value

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class GrievanceForm(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    issue_type: str = Field(min_length=1)
    description: str = Field(min_length=10)
    scheme_id: str | None = None
    application_id: str | None = None

    @field_validator("scheme_id", "application_id")
    @classmethod
    def _blank_as_none(cls, value: str | None) -> str | None:
        return value or None

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
