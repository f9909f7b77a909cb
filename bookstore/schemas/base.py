from typing import Any

from pydantic import BaseModel, ValidationError, field_validator


class PartialUpdateInput(BaseModel):  # type: ignore[misc]
    """
    Base for update request shapes.

    A field counts as supplied when its key was present in the request
    body. Supplied fields are validated like on create and may not be
    ``null``; omitted fields keep their stored value.
    """

    @field_validator("*")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may not be null")
        return value

    def changes(self) -> dict[str, Any]:
        """Return only the supplied fields, without the identifier."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


def format_validation_errors(ex: ValidationError) -> str:
    """
    Summarize pydantic errors as ``field: message`` pairs.

    Example:
        "author: Field required; city: String should have at least 3 characters"
    """
    parts = []
    for error in ex.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "body"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)
