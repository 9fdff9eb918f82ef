"""
JSON Record Models
Shapes of the records read from and written to JSON
"""
from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Any, Dict, List, Type, TypeVar

from ..errors import MalformedInputError

RecordT = TypeVar("RecordT", bound=BaseModel)


class ChecklistItemRecord(BaseModel):
    """Checklist item record"""
    model_config = ConfigDict(strict=True)

    uid: int
    name: str
    done: bool = False


class ChecklistRecord(BaseModel):
    """Checklist record, flags and other base fields are kept as extras"""
    model_config = ConfigDict(extra="allow", strict=True)

    name: str
    items: List[Dict[str, Any]]


def parse_record(model: Type[RecordT], data: Any) -> RecordT:
    """Validate a decoded JSON object, raising MalformedInputError on failure"""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise MalformedInputError(f"Invalid {model.__name__}: {e}") from e
