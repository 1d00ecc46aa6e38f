"""UK postcode normalization and validation utilities.

Consolidates postcode spacing, case normalization and format validation
into a single, reusable module.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Outward code (A9, A99, AA9, AA99, A9A, AA9A or the GIR special case),
# followed by the inward code (9AA).
_OUTWARD_PATTERN = re.compile(r"(?:[A-Z]{1,2}[0-9][A-Z0-9]?|GIR)")
_INWARD_PATTERN = re.compile(r"[0-9][A-Z]{2}")

_WHITESPACE = re.compile(r"\s+")

INWARD_CODE_LENGTH = 3


@dataclass
class PostcodeResult:
    """Result of postcode parsing and validation.

    Attributes:
        outward: The outward code, e.g. "AB12" (None if invalid).
        inward: The inward code, e.g. "3CD" (None if invalid).
        full: The full formatted postcode, e.g. "AB12 3CD".
        is_valid: True if the postcode is valid.
        error: Error message if invalid, None otherwise.
    """

    outward: str | None
    inward: str | None
    full: str | None
    is_valid: bool
    error: str | None


class PostcodeNormalizer:
    """Consolidates UK postcode parsing, validation, and normalization.

    Example:
        >>> normalizer = PostcodeNormalizer()
        >>> result = normalizer.parse("ab123cd")
        >>> print(result.outward)  # "AB12"
        >>> print(result.inward)  # "3CD"
        >>> print(result.full)  # "AB12 3CD"
    """

    @staticmethod
    def normalize(postcode: str) -> str:
        """Upper-case a postcode and put exactly one space before the inward code.

        Strings too short to hold an inward code are only upper-cased and
        compacted.

        Args:
            postcode: Raw postcode string.

        Returns:
            Normalized postcode string.
        """
        compact = _WHITESPACE.sub("", postcode).upper()
        if len(compact) <= INWARD_CODE_LENGTH:
            return compact
        return f"{compact[:-INWARD_CODE_LENGTH]} {compact[-INWARD_CODE_LENGTH:]}"

    @staticmethod
    def validate_outward(outward: str | None) -> tuple[str | None, str | None]:
        """Validate an outward code.

        Returns:
            Tuple of (cleaned_value, error_message).
        """
        if not outward:
            return None, "Missing outward code"
        cleaned = outward.strip().upper()
        if _OUTWARD_PATTERN.fullmatch(cleaned):
            return cleaned, None
        return None, f"Invalid outward code: {outward}"

    @staticmethod
    def validate_inward(inward: str | None) -> tuple[str | None, str | None]:
        """Validate an inward code.

        Returns:
            Tuple of (cleaned_value, error_message).
        """
        if not inward:
            return None, "Missing inward code"
        cleaned = inward.strip().upper()
        if _INWARD_PATTERN.fullmatch(cleaned):
            return cleaned, None
        return None, f"Invalid inward code: {inward}"

    def parse(self, postcode: str | None) -> PostcodeResult:
        """Parse any postcode spacing/case into normalized components.

        Handles "AB12 3CD", "ab12 3cd", "AB123CD" and "AB12   3CD".

        Args:
            postcode: The postcode string to parse.

        Returns:
            PostcodeResult with parsed components and validation status.
        """
        if not postcode or not isinstance(postcode, str):
            return PostcodeResult(
                outward=None,
                inward=None,
                full=None,
                is_valid=False,
                error="Missing or invalid postcode",
            )

        normalized = self.normalize(postcode)
        if " " not in normalized:
            return PostcodeResult(
                outward=None,
                inward=None,
                full=None,
                is_valid=False,
                error=f"Invalid postcode format: {postcode}",
            )

        outward, inward = normalized.split(" ", 1)

        validated_outward, outward_error = self.validate_outward(outward)
        if outward_error:
            return PostcodeResult(
                outward=None,
                inward=None,
                full=None,
                is_valid=False,
                error=outward_error,
            )

        validated_inward, inward_error = self.validate_inward(inward)
        if inward_error:
            return PostcodeResult(
                outward=validated_outward,
                inward=None,
                full=None,
                is_valid=False,
                error=inward_error,
            )

        return PostcodeResult(
            outward=validated_outward,
            inward=validated_inward,
            full=normalized,
            is_valid=True,
            error=None,
        )

    def validate(self, postcode: str | None) -> tuple[str | None, str | None]:
        """Validate a full postcode.

        Returns:
            Tuple of (cleaned_value, error_message).
            cleaned_value is None if invalid.
            error_message is None if valid.
        """
        result = self.parse(postcode)
        return result.full, result.error


# Module-level singleton for convenience
_default_normalizer: PostcodeNormalizer | None = None


def get_postcode_normalizer() -> PostcodeNormalizer:
    """Get the default PostcodeNormalizer singleton.

    Returns:
        Shared PostcodeNormalizer instance.
    """
    global _default_normalizer
    if _default_normalizer is None:
        _default_normalizer = PostcodeNormalizer()
    return _default_normalizer
