from __future__ import annotations

from typing import Optional


class ConfigurationError(ValueError):
    """Structural gap in a static mapping table or an invalid config value.

    Raised at startup; callers must let it abort initialization.
    """


class ValidationError(ValueError):
    """Malformed static record, raised when the record is constructed.

    Attributes
    ----------
    record:
        Record type name (e.g. "Project").
    field:
        Offending field name.
    reason:
        Short failure summary.
    """

    def __init__(self, record: str, field: str, reason: str, *, context: Optional[str] = None) -> None:
        self.record = record
        self.field = field
        self.reason = reason
        self.context = context
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.context:
            return f"{self.record}.{self.field}: {self.reason} ({self.context})"
        return f"{self.record}.{self.field}: {self.reason}"
