"""
Tests for the run_render CLI.
"""
import json

import pytest

import run_render


@pytest.fixture
def posting_file(tmp_path):
    path = tmp_path / "posting.json"
    path.write_text(
        json.dumps(
            {
                "title": "Hardware Test Engineer",
                "description": "Validate boards in the lab.",
                "employmentType": "CONTRACTOR",
                "jobLocation": {"@type": "Place", "address": {"addressLocality": "Munich"}},
                "datePosted": "2024-05-01T08:00:00+02:00",
                "validThrough": "2024-06-01T08:00:00+02:00",
                "totalJobOpenings": 2,
                "applicationContact": {"contactType": "HR", "telephone": "555-1234", "email": "a@b.com"},
            }
        ),
        encoding="utf-8",
    )
    return path


class TestRunRender:
    """Tests for the CLI entry point."""

    def test_prints_to_stdout(self, posting_file, capsys):
        """Without --out the document goes to stdout."""
        assert run_render.main(["--input", str(posting_file)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["@type"] == "JobPosting"
        assert data["totalJobOpenings"] == 2
        assert data["applicationContact"]["@type"] == "ContactPoint"
        assert data["skills"] is None

    def test_writes_file(self, posting_file, tmp_path):
        """--out writes the document, creating parent directories."""
        out = tmp_path / "build" / "posting.jsonld"
        assert run_render.main(["--input", str(posting_file), "--out", str(out), "--omit-unset"]) == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["datePosted"] == "2024-05-01T08:00:00+02:00"
        assert "skills" not in data

    def test_validation_error_exit_code(self, tmp_path, capsys):
        """An invalid posting exits 1 with the validation message."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"title": "Engineer"}), encoding="utf-8")
        assert run_render.main(["--input", str(path)]) == 1
        assert "Validation failed: description" in capsys.readouterr().err

    def test_non_object_input(self, tmp_path, capsys):
        """A JSON array is refused."""
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        assert run_render.main(["--input", str(path)]) == 1
        assert "JSON object" in capsys.readouterr().err

    def test_malformed_json(self, tmp_path, capsys):
        """Unparseable input exits 1 with an error line."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert run_render.main(["--input", str(path)]) == 1
        assert "error: cannot read" in capsys.readouterr().err

    def test_missing_input_file(self, tmp_path, capsys):
        """A missing input path exits 1 with an error line."""
        assert run_render.main(["--input", str(tmp_path / "nope.json")]) == 1
        assert "error: cannot read" in capsys.readouterr().err
