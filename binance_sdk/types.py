"""Type definitions for the Binance SDK."""

import json
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError


# ============================================================================
# Request Parameters
# ============================================================================

# A single query parameter value. None means "omit this parameter".
ParamValue = Union[str, int, float, bool, Sequence[str], None]

# Parameter set passed to the signed request pipeline.
Params = Mapping[str, ParamValue]


class HTTPMethod(str, Enum):
    """HTTP verbs accepted by the exchange."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


# ============================================================================
# API Response Models
# ============================================================================


class ErrorBody(BaseModel):
    """Structured error returned by the exchange with non-200 responses."""

    code: int
    msg: str

    @classmethod
    def from_bytes(cls, body: bytes) -> Optional["ErrorBody"]:
        """Decode an error body, returning None when it has another shape."""
        try:
            return cls.model_validate_json(body)
        except PydanticValidationError:
            return None


def parse_response(data: bytes, type_: Optional[Any] = None) -> Any:
    """
    Decode a raw response body.

    Args:
        data: Response bytes returned by an endpoint call
        type_: Optional pydantic model (or any type pydantic can validate,
            e.g. ``list[MyModel]``) to validate the decoded JSON into

    Returns:
        Plain JSON value, or the validated instance when `type_` is given
    """
    if type_ is None:
        return json.loads(data)
    return TypeAdapter(type_).validate_json(data)
