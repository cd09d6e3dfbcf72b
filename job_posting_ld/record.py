"""The fluent job posting builder.

A `JobPostingRecord` accumulates attributes through chained `set_*` calls,
validates its mandatory subset, and renders schema.org JSON-LD text:

    record = (
        JobPostingRecord()
        .set_title("Firmware Engineer")
        .set_description("Bring up new boards.")
        .set_employment_type("FULL_TIME")
        .set_job_location_address(address_locality="Austin", address_region="TX")
        .set_date_posted("2024-01-15T09:00:00+00:00")
        .set_valid_through("2024-03-01T00:00:00+00:00")
    )
    print(record.to_json_ld())

Setters check types only. Everything else is checked by `validate()`, which
`to_json_ld()` always runs first.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .config import Settings
from .dates import format_instant
from .errors import MissingKeyError, ValidationError
from .models import (
    SCHEMA_CONTEXT,
    SCHEMA_TYPE,
    ContactPoint,
    JobPostingAttributes,
    Place,
    PostalAddress,
    RequiredAttributes,
)

logger = logging.getLogger(__name__)

CONTACT_KEYS = ("contactType", "telephone", "email")

# camelCase property name -> attribute name, e.g. "datePosted" -> "date_posted".
_FIELD_BY_ALIAS = {to_camel(name): name for name in JobPostingAttributes.model_fields}


def _first_error(exc: PydanticValidationError) -> ValidationError:
    err = exc.errors()[0]
    field = ".".join(str(part) for part in err["loc"]) or "record"
    cause = (err.get("ctx") or {}).get("error")
    if err["type"] == "missing":
        reason = "is required"
    elif isinstance(cause, Exception):
        reason = str(cause)
    else:
        reason = err["msg"]
    return ValidationError(field, reason)


class JobPostingRecord:
    """A single job posting's structured-data attributes."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or Settings()
        self.default_country = self._settings.default_country
        self.default_language = self._settings.default_language
        self._attrs = JobPostingAttributes()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], settings: Optional[Settings] = None) -> "JobPostingRecord":
        return cls(settings).update(data)

    def _set(self, name: str, value: Any) -> "JobPostingRecord":
        try:
            setattr(self._attrs, name, value)
        except PydanticValidationError as exc:
            expected = exc.errors()[0]["msg"]
            alias = to_camel(name)
            raise TypeError(f"{alias}: {expected}, got {type(value).__name__}") from exc
        return self

    def get(self, name: str) -> Any:
        """Return a stored attribute by camelCase or snake_case name (None if unset)."""
        return getattr(self._attrs, _FIELD_BY_ALIAS.get(name, name))

    def update(self, data: Mapping[str, Any]) -> "JobPostingRecord":
        """Apply a mapping of camelCase attributes through the setters."""
        for key, value in data.items():
            if key == "applicationContact":
                self.set_application_contact(value)
            elif key in _FIELD_BY_ALIAS:
                self._set(_FIELD_BY_ALIAS[key], value)
            else:
                raise KeyError(f"unknown JobPosting attribute: {key!r}")
        return self

    # Required attributes

    def set_title(self, title: str) -> "JobPostingRecord":
        return self._set("title", title)

    def set_description(self, description: str) -> "JobPostingRecord":
        return self._set("description", description)

    def set_employment_type(self, employment_type: str) -> "JobPostingRecord":
        return self._set("employment_type", employment_type)

    def set_job_location(self, job_location: Dict[str, Any]) -> "JobPostingRecord":
        return self._set("job_location", job_location)

    def set_job_location_address(
        self,
        street_address: Optional[str] = None,
        address_locality: Optional[str] = None,
        address_region: Optional[str] = None,
        postal_code: Optional[str] = None,
        address_country: Optional[str] = None,
    ) -> "JobPostingRecord":
        """Set jobLocation to a Place/PostalAddress; country falls back to the default."""
        place = Place(
            address=PostalAddress(
                street_address=street_address,
                address_locality=address_locality,
                address_region=address_region,
                postal_code=postal_code,
                address_country=address_country or self.default_country,
            )
        )
        return self._set("job_location", place.model_dump(by_alias=True, exclude_none=True))

    def set_date_posted(self, date_posted: str) -> "JobPostingRecord":
        return self._set("date_posted", date_posted)

    def set_valid_through(self, valid_through: str) -> "JobPostingRecord":
        return self._set("valid_through", valid_through)

    # Optional attributes

    def set_base_salary(self, base_salary: Union[str, int, float, Dict[str, Any]]) -> "JobPostingRecord":
        return self._set("base_salary", base_salary)

    def set_job_benefits(self, job_benefits: str) -> "JobPostingRecord":
        return self._set("job_benefits", job_benefits)

    def set_education_requirements(self, requirements: str) -> "JobPostingRecord":
        return self._set("education_requirements", requirements)

    def set_experience_requirements(self, requirements: str) -> "JobPostingRecord":
        return self._set("experience_requirements", requirements)

    def set_incentive_compensation(self, compensation: str) -> "JobPostingRecord":
        return self._set("incentive_compensation", compensation)

    def set_industry(self, industry: str) -> "JobPostingRecord":
        return self._set("industry", industry)

    def set_applicant_location_requirements(self, location_requirements: str) -> "JobPostingRecord":
        return self._set("applicant_location_requirements", location_requirements)

    def set_application_contact(self, contact: Mapping[str, Any]) -> "JobPostingRecord":
        """Store a ContactPoint built from contactType, telephone and email.

        Raises MissingKeyError for the first of those keys that is absent.
        """
        if not isinstance(contact, Mapping):
            raise TypeError(f"applicationContact: Input should be a mapping, got {type(contact).__name__}")
        for key in CONTACT_KEYS:
            if key not in contact:
                raise MissingKeyError(key)
        point = ContactPoint(
            contact_type=contact["contactType"],
            telephone=contact["telephone"],
            email=contact["email"],
        )
        return self._set("application_contact", point.model_dump(by_alias=True))

    def set_direct_apply(self, direct_apply: bool) -> "JobPostingRecord":
        return self._set("direct_apply", direct_apply)

    def set_eligibility_to_work_requirement(self, eligibility: str) -> "JobPostingRecord":
        return self._set("eligibility_to_work_requirement", eligibility)

    def set_employer_overview(self, overview: str) -> "JobPostingRecord":
        return self._set("employer_overview", overview)

    def set_job_immediate_start(self, job_immediate_start: bool) -> "JobPostingRecord":
        return self._set("job_immediate_start", job_immediate_start)

    def set_job_location_type(self, location_type: str) -> "JobPostingRecord":
        return self._set("job_location_type", location_type)

    def set_job_start_date(self, job_start_date: str) -> "JobPostingRecord":
        return self._set("job_start_date", job_start_date)

    def set_physical_requirement(self, requirement: str) -> "JobPostingRecord":
        return self._set("physical_requirement", requirement)

    def set_relevant_occupation(self, occupation: str) -> "JobPostingRecord":
        return self._set("relevant_occupation", occupation)

    def set_security_clearance_requirement(self, requirement: str) -> "JobPostingRecord":
        return self._set("security_clearance_requirement", requirement)

    def set_sensory_requirement(self, requirement: str) -> "JobPostingRecord":
        return self._set("sensory_requirement", requirement)

    def set_total_job_openings(self, total_job_openings: int) -> "JobPostingRecord":
        return self._set("total_job_openings", total_job_openings)

    def set_skills(self, skills: str) -> "JobPostingRecord":
        return self._set("skills", skills)

    def set_special_commitments(self, commitments: str) -> "JobPostingRecord":
        return self._set("special_commitments", commitments)

    def set_occupational_category(self, category: str) -> "JobPostingRecord":
        return self._set("occupational_category", category)

    def set_qualifications(self, qualifications: str) -> "JobPostingRecord":
        return self._set("qualifications", qualifications)

    def set_responsibilities(self, responsibilities: str) -> "JobPostingRecord":
        return self._set("responsibilities", responsibilities)

    def set_salary_currency(self, currency: str) -> "JobPostingRecord":
        return self._set("salary_currency", currency)

    def set_work_hours(self, work_hours: str) -> "JobPostingRecord":
        return self._set("work_hours", work_hours)

    # Validation & rendering

    def _checked(self) -> RequiredAttributes:
        payload = {
            to_camel(name): getattr(self._attrs, name)
            for name in RequiredAttributes.model_fields
            if getattr(self._attrs, name) is not None
        }
        try:
            return RequiredAttributes.model_validate(payload)
        except PydanticValidationError as exc:
            raise _first_error(exc) from exc

    def validate(self) -> None:
        """Check the mandatory fields, raising ValidationError for the first failure.

        Fields are checked in this order: title, description, employmentType,
        jobLocation, datePosted, validThrough.
        """
        self._checked()

    def to_dict(self, include_unset: Optional[bool] = None) -> Dict[str, Any]:
        """Return the JSON-LD mapping in output key order (validates first)."""
        checked = self._checked()
        if include_unset is None:
            include_unset = self._settings.include_unset

        data: Dict[str, Any] = {"@context": SCHEMA_CONTEXT, "@type": SCHEMA_TYPE}
        data.update(self._attrs.model_dump(by_alias=True))
        data["datePosted"] = format_instant(checked.date_posted)
        data["validThrough"] = format_instant(checked.valid_through)

        if not include_unset:
            data = {key: value for key, value in data.items() if value is not None}
        return data

    def to_json_ld(self, include_unset: Optional[bool] = None) -> str:
        """Render the posting as pretty-printed schema.org JSON-LD text."""
        data = self.to_dict(include_unset=include_unset)
        logger.debug("Rendering JobPosting %r with %d keys", data.get("title"), len(data))
        return json.dumps(data, indent=4, ensure_ascii=False, allow_nan=False)
