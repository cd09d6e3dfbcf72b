"""Data models for a schema.org JobPosting.

`JobPostingAttributes` is the storage shape of a record. Its field order is the
order keys are emitted in, and its camelCase aliases are the schema.org
property names. `RequiredAttributes` holds the rules a record must pass before
it can be rendered.

This file uses Pydantic v2.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .dates import parse_instant


SCHEMA_CONTEXT = "https://schema.org"
SCHEMA_TYPE = "JobPosting"

# NaN and infinity have no JSON form.
Salary = Union[str, int, Annotated[float, Field(allow_inf_nan=False)], Dict[str, Any]]


class JobPostingAttributes(BaseModel):
    """Every attribute a job posting can carry, unset until assigned.

    Strict mode with assignment validation: assigning a value of the wrong type
    fails instead of being coerced.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        strict=True,
    )

    base_salary: Optional[Salary] = None
    job_benefits: Optional[str] = None
    date_posted: Optional[str] = None
    description: Optional[str] = None
    education_requirements: Optional[str] = None
    employment_type: Optional[str] = None
    experience_requirements: Optional[str] = None
    incentive_compensation: Optional[str] = None
    industry: Optional[str] = None
    job_location: Optional[Dict[str, Any]] = None
    applicant_location_requirements: Optional[str] = None
    application_contact: Optional[Dict[str, Any]] = None
    direct_apply: Optional[bool] = None
    eligibility_to_work_requirement: Optional[str] = None
    employer_overview: Optional[str] = None
    job_immediate_start: Optional[bool] = None
    job_location_type: Optional[str] = None
    job_start_date: Optional[str] = None
    physical_requirement: Optional[str] = None
    relevant_occupation: Optional[str] = None
    security_clearance_requirement: Optional[str] = None
    sensory_requirement: Optional[str] = None
    title: Optional[str] = None
    total_job_openings: Optional[int] = None
    valid_through: Optional[str] = None
    skills: Optional[str] = None
    special_commitments: Optional[str] = None
    occupational_category: Optional[str] = None
    qualifications: Optional[str] = None
    responsibilities: Optional[str] = None
    salary_currency: Optional[str] = None
    work_hours: Optional[str] = None


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _to_instant(value: Any) -> datetime:
    if not isinstance(value, str):
        raise ValueError("must be a date-time string")
    return parse_instant(value)


NonBlankStr = Annotated[str, Field(min_length=1), AfterValidator(_not_blank)]
Instant = Annotated[datetime, BeforeValidator(_to_instant)]


class RequiredAttributes(BaseModel):
    """The mandatory subset, checked in declaration order.

    Pydantic reports errors in field order, so the first error is the first
    failing field below. Instants come out parsed and are reused for output.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, strict=True)

    title: NonBlankStr
    description: NonBlankStr
    employment_type: NonBlankStr
    job_location: Dict[str, Any] = Field(..., min_length=1)
    date_posted: Instant
    valid_through: Instant


class ContactPoint(BaseModel):
    """schema.org ContactPoint; values are stored as given."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type_: Literal["ContactPoint"] = Field(default="ContactPoint", alias="@type")
    contact_type: Any
    telephone: Any
    email: Any


class PostalAddress(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type_: Literal["PostalAddress"] = Field(default="PostalAddress", alias="@type")
    street_address: Optional[str] = None
    address_locality: Optional[str] = None
    address_region: Optional[str] = None
    postal_code: Optional[str] = None
    address_country: str


class Place(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type_: Literal["Place"] = Field(default="Place", alias="@type")
    address: PostalAddress
