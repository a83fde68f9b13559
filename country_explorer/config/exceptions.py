"""Exceptions raised while loading configuration."""

from typing import Iterable, List, Optional

from pydantic import ValidationError

_TYPE_ERRORS = frozenset({"string_type", "int_type", "int_parsing", "bool_type"})


class ConfigurationError(Exception):
    """Startup configuration is unusable.

    ``errors`` lists every problem found in one pass (a YAML section and the
    environment are each checked completely before raising); ``suggestions``
    are hints for the operator. ``str(exc)`` renders both as a numbered report.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[Iterable[str]] = None,
        suggestions: Optional[Iterable[str]] = None,
    ):
        self.message = message
        self.errors: List[str] = list(errors or [])
        self.suggestions: List[str] = list(suggestions or [])
        super().__init__(self.report())

    @classmethod
    def from_validation_error(
        cls, exc: ValidationError, suggestions: Optional[Iterable[str]] = None
    ) -> "ConfigurationError":
        """Translate pydantic's error list into one line per offending field."""
        return cls(
            "Configuration validation failed",
            errors=[_describe(error) for error in exc.errors()],
            suggestions=suggestions,
        )

    def report(self) -> str:
        lines = [self.message]
        if self.errors:
            lines.append("\nValidation Errors:")
            lines.extend(f"  {number}. {error}" for number, error in enumerate(self.errors, 1))
        if self.suggestions:
            lines.append("\nSuggestions:")
            lines.extend(f"  - {hint}" for hint in self.suggestions)
        return "\n".join(lines)


def _describe(error) -> str:
    field_path = " -> ".join(str(part) for part in error["loc"])
    if error["type"] in _TYPE_ERRORS:
        return f"Invalid type for '{field_path}': {error['msg']}, got {error.get('input')!r}"
    if "enum" in error["type"]:
        return f"Invalid value for '{field_path}': {error['msg']}"
    return f"{field_path}: {error['msg']}"
