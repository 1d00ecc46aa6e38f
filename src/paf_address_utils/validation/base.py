"""Address validation base classes.

Re-exports the generic BaseValidator and provides ValidationBase, a
Pydantic base model with built-in process logging for cleaning and errors.
"""

from __future__ import annotations

from typing import Any

from abstract_validation_base import BaseValidator, ProcessEntry, ProcessLog
from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import PydanticCustomError

__all__ = ["BaseValidator", "ValidationBase", "PafValidationBase"]


class ValidationBase(BaseModel):
    """Base model with built-in process logging for cleaning and errors.

    All models inheriting from this class automatically get:
    - process_log: ProcessLog field (excluded from serialization)
    - add_error(): Log an error and optionally raise
    - audit_log(): Export combined entries for DataFrame analysis
    """

    model_config = ConfigDict(extra="ignore")

    process_log: ProcessLog = Field(default_factory=ProcessLog, exclude=True)

    def _create_error(
        self,
        error_type: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> Exception:
        """Create an error to raise. Override in subclasses for custom error types."""
        return PydanticCustomError(error_type, message, context or {})

    def add_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: dict[str, Any] | None = None,
        raise_exception: bool = False,
        error_type: str = "validation_error",
    ) -> None:
        """Log an error and optionally raise an exception.

        Args:
            field: Name of the field with the error.
            message: Error message describing the issue.
            value: The problematic value (optional).
            context: Additional context dict (optional).
            raise_exception: If True, raise an exception after logging.
            error_type: Error type used for the raised exception.

        Raises:
            Exception: If raise_exception is True. The exception type is
                determined by _create_error() which can be overridden.
        """
        entry = ProcessEntry(
            entry_type="error",
            field=field,
            message=message,
            original_value=str(value) if value is not None else None,
            context=context or {},
        )
        self.process_log.errors.append(entry)

        if raise_exception:
            raise self._create_error(
                error_type=error_type,
                message=f"{field}: {message}",
                context={"field": field, "value": value, **(context or {})},
            )

    def audit_log(self, source: str | None = None) -> list[dict[str, Any]]:
        """Export combined cleaning and error entries for DataFrame analysis.

        Args:
            source: Optional source identifier to add to each entry.

        Returns:
            List of dicts suitable for pd.DataFrame(), sorted by timestamp.
        """
        entries: list[dict[str, Any]] = []
        for entry in [*self.process_log.cleaning, *self.process_log.errors]:
            d = entry.model_dump()
            if source:
                d["source"] = source
            entries.append(d)
        return sorted(entries, key=lambda x: x.get("timestamp", ""))


class PafValidationBase(ValidationBase):
    """ValidationBase raising PafAddressError instead of PydanticCustomError.

    Use this as the base class for models in the paf_address_utils package.
    """

    def _create_error(
        self,
        error_type: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> Exception:
        # Late import to avoid circular dependency with models
        from paf_address_utils.models.errors import PACKAGE_NAME, PafAddressError

        return PafAddressError(
            error_type,
            message,
            {"package": PACKAGE_NAME, **(context or {})},
        )
