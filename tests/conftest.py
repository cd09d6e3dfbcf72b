import pytest

from job_posting_ld import JobPostingRecord


ENV_VARS = (
    "JOB_POSTING_DEFAULT_COUNTRY",
    "JOB_POSTING_DEFAULT_LANGUAGE",
    "JOB_POSTING_INCLUDE_UNSET",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def valid_record():
    return (
        JobPostingRecord()
        .set_title("Embedded Firmware Engineer")
        .set_description("Bring up new boards and write drivers.")
        .set_employment_type("FULL_TIME")
        .set_job_location({"@type": "Place", "address": {"addressLocality": "Austin", "addressRegion": "TX"}})
        .set_date_posted("2024-01-15T09:00:00+00:00")
        .set_valid_through("2024-03-01T17:30:00-05:00")
    )
