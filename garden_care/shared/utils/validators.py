# 📄 File: garden_care/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation):
# Checks that the information handed to the garden care core is usable before anything is
# looked up, generated or saved, for example that a plant name is not blank and a month is real.
# 🧪 Purpose (Technical Summary):
# Reusable validation helpers that raise the core's ValidationError (never raw pydantic errors),
# so every rejection happens before any side effect.
# 🔗 Dependencies:
# pydantic, garden_care.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# Domain services (orchestrator, identification), content generator, cache key derivation

from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from garden_care.shared.core.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

MIN_MONTH = 1
MAX_MONTH = 12


def validate_model(model_cls: Type[ModelT], payload: Any) -> ModelT:
    """
    Validate a payload into a pydantic model.

    Args:
        model_cls: Pydantic model class
        payload: Dict (or model instance) to validate

    Returns:
        Validated model instance

    Raises:
        ValidationError: With the first failing field and the full error list in details
    """
    try:
        return model_cls.model_validate(payload)
    except PydanticValidationError as e:
        errors = e.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ValidationError(
            message=f"Invalid {model_cls.__name__}: {first.get('msg', 'validation failed')}",
            field=field,
            details={
                "errors": [
                    {
                        "field": ".".join(str(part) for part in err.get("loc", ())),
                        "message": err.get("msg"),
                        "type": err.get("type"),
                    }
                    for err in errors
                ]
            },
        ) from e


def require_text(value: Any, field: str, min_length: int = 1) -> str:
    """
    Require a non-blank string and return it trimmed.

    Raises:
        ValidationError: If value is missing, not a string, or shorter than min_length once trimmed
    """
    if value is None or not isinstance(value, str):
        raise ValidationError(f"{field} is required", field=field, constraint="required")

    trimmed = value.strip()
    if len(trimmed) < min_length:
        raise ValidationError(
            f"{field} must be at least {min_length} characters",
            field=field,
            value=value,
            constraint=f"min_length={min_length}",
        )
    return trimmed


def validate_month(month: Optional[int], field: str = "month") -> Optional[int]:
    """
    Validate an optional calendar month (1..12). None passes through.

    Raises:
        ValidationError: If month is not an int in 1..12
    """
    if month is None:
        return None
    if isinstance(month, bool) or not isinstance(month, int) or not MIN_MONTH <= month <= MAX_MONTH:
        raise ValidationError(
            f"{field} must be between {MIN_MONTH} and {MAX_MONTH}",
            field=field,
            value=month,
            constraint="1..12",
        )
    return month
