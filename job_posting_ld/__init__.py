"""Job posting JSON-LD package.

The package is structured around one builder:
- `record.py` holds `JobPostingRecord`, the fluent builder and renderer.
- `models.py` defines the schema.org shapes and the validation rules.
- `dates.py` contains the one date-time parse/format step.
- `config.py` contains the injectable `Settings`.
"""

from .config import Settings
from .errors import MissingKeyError, ValidationError
from .record import JobPostingRecord

__all__ = ["JobPostingRecord", "MissingKeyError", "Settings", "ValidationError"]
