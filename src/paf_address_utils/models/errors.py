"""Address-specific error classes.

These classes provide package-specific error handling for PAF address
construction, validation and assembly.
"""

from __future__ import annotations

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "paf_address_utils"

# Error types
MISSING_REQUIRED_FIELD = "missing_required_field"
ADDRESS_VALIDATION = "address_validation"
ADDRESS_BUILDER = "address_builder"
VALIDATION_ERROR = "validation_error"


class PafAddressError(PydanticCustomError):
    """Custom exception for paf_address_utils that wraps Pydantic errors.

    Inherits from PydanticCustomError to maintain full compatibility with Pydantic's
    error handling while providing package identification. Like every
    PydanticCustomError it is also a ValueError.

    Can wrap:
    - PydanticCustomError: Preserves original error details
    - pydantic.ValidationError: Extracts a package error if present, otherwise converts
    """

    @classmethod
    def missing_field(cls, field: str) -> PafAddressError:
        """Build the error raised when a required field is blank or absent.

        Args:
            field: Name of the missing field.

        Returns:
            PafAddressError of type ``missing_required_field``.
        """
        return cls(
            MISSING_REQUIRED_FIELD,
            "Missing required field: {field}",
            {"package": PACKAGE_NAME, "field": field},
        )

    @classmethod
    def from_validation_error(cls, error: Exception, context: dict | None = None) -> PafAddressError:
        """Wrap a pydantic.ValidationError or extract a contained package error.

        Args:
            error: The ValidationError to wrap.
            context: Additional context to include in the error.

        Returns:
            PafAddressError instance with extracted or converted error details.
        """
        from pydantic import ValidationError

        ctx = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(error, ValidationError):
            for err_dict in error.errors():
                if err_dict.get("type") in (MISSING_REQUIRED_FIELD, ADDRESS_VALIDATION):
                    return cls(
                        err_dict["type"],
                        err_dict.get("msg", str(error)),
                        {**ctx, **(err_dict.get("ctx") or {})},
                    )

            error_messages = "; ".join(e.get("msg", str(e)) for e in error.errors())
            return cls(VALIDATION_ERROR, error_messages, ctx)

        return cls(VALIDATION_ERROR, str(error), ctx)


class PafValidationError(Exception):
    """Custom exception that wraps pydantic.ValidationError with package identification.

    Inherits from Exception and wraps ValidationError to provide package context
    while maintaining access to the original error details.
    """

    def __init__(self, validation_error: Exception, context: dict | None = None):
        """Initialize PafValidationError.

        Args:
            validation_error: The pydantic.ValidationError to wrap.
            context: Optional additional context to include.
        """
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = validation_error
        self.context = {"package": PACKAGE_NAME, **(context or {})}

        if isinstance(validation_error, PydanticValidationError):
            self.errors_list = validation_error.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.errors_list = []
            error_messages = str(validation_error)

        super().__init__(error_messages)

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> PafValidationError:
        """Wrap a pydantic.ValidationError with package context."""
        return cls(error, context)

    def errors(self) -> list:
        """Get the list of validation errors.

        Returns:
            List of error dictionaries from the original ValidationError.
        """
        return self.errors_list

    @property
    def error_types(self) -> list[str]:
        """Error type of each wrapped error, in order."""
        return [e.get("type", VALIDATION_ERROR) for e in self.errors_list]

    def __repr__(self) -> str:
        return f"PafValidationError({self.original_error!r}, context={self.context})"
