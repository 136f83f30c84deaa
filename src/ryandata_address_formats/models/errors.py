"""Address format error classes."""

from __future__ import annotations

# Package identifier for error context
PACKAGE_NAME = "ryandata_address_formats"


class DataIntegrityError(Exception):
    """Raised when a definition record is malformed or incomplete.

    Wraps the underlying ``pydantic.ValidationError`` (or decoding error)
    with package identification and the country code being resolved, while
    keeping access to the original error details.
    """

    def __init__(
        self,
        error: Exception | str,
        country_code: str | None = None,
        context: dict | None = None,
    ):
        """Initialize DataIntegrityError.

        Args:
            error: The ValidationError or other exception to wrap, or a message.
            country_code: Country code of the offending definition, if known.
            context: Optional additional context to include.
        """
        from pydantic import ValidationError as PydanticValidationError

        self.original_error = error if isinstance(error, Exception) else None
        self.country_code = country_code
        self.context = {
            "package": PACKAGE_NAME,
            "country_code": country_code,
            **(context or {}),
        }

        if isinstance(error, PydanticValidationError):
            self.errors_list = error.errors()
            details = "; ".join(
                f"{'.'.join(str(part) for part in e.get('loc', ()))}: {e.get('msg', '')}"
                for e in self.errors_list
            )
        else:
            self.errors_list = []
            details = str(error)

        prefix = f"Invalid address format definition for {country_code!r}"
        super().__init__(f"{prefix}: {details}" if country_code else details)

    @classmethod
    def from_validation_error(
        cls, error: Exception, country_code: str | None = None, context: dict | None = None
    ) -> DataIntegrityError:
        """Wrap a pydantic.ValidationError with package context.

        Args:
            error: The ValidationError to wrap.
            country_code: Country code of the offending definition.
            context: Optional additional context to include.

        Returns:
            DataIntegrityError instance wrapping the original error.
        """
        return cls(error, country_code, context)

    def errors(self) -> list:
        """Get the list of validation errors.

        Returns:
            List of error dictionaries from the original ValidationError.
        """
        return self.errors_list

    def __repr__(self) -> str:
        return f"DataIntegrityError({self.original_error!r}, context={self.context})"
