from typing import Any, Dict, Iterable, List
from pydantic import BaseModel

class RecordValidationError(Exception):
    """Raised when an inbound record lacks one or more required fields."""

    def __init__(self, message: str, missing: List[str]):
        super().__init__(message)
        self.message = message
        self.missing = missing


def _is_missing(value: Any) -> bool:
    # 0 and 0.0 are valid numbers; only absent values and empty text count
    if value is None:
        return True
    if isinstance(value, str) and value == "":
        return True
    return False


class RequestValidator:
    def __init__(self, required_fields: Iterable[str], message: str):
        self.required_fields = tuple(required_fields)
        self.message = message

    def missing_fields(self, payload: BaseModel) -> List[str]:
        data = payload.model_dump()
        return [f for f in self.required_fields if _is_missing(data.get(f))]

    def validate(self, payload: BaseModel) -> Dict[str, Any]:
        """
        Returns the normalized record data (numeric fields already coerced by
        the request model) or raises RecordValidationError naming the
        missing fields.
        """
        missing = self.missing_fields(payload)
        if missing:
            raise RecordValidationError(self.message, missing)
        return payload.model_dump()
