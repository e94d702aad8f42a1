from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from avanza.errors import ParseError

M = TypeVar("M", bound=BaseModel)


def parse_model(model: type[M], data: Any) -> M:
    """Validate decoded JSON into ``model``, raising ParseError on mismatch."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"Unexpected {model.__name__} payload: {e.error_count()} error(s)", {"errors": e.errors()}) from e
