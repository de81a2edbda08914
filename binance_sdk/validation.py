"""Required-parameter checks run by endpoint wrappers before any request."""

from typing import Any, Mapping

from .exceptions import ValidationError


def check_required_parameter(value: Any, name: str) -> None:
    """
    Fail fast when a required parameter is missing.

    Strings must be non-empty; every other kind only has to be present.
    Numbers are accepted even when zero, since zero can be a legitimate
    value for several endpoints.

    Raises:
        ValidationError: value is None or an empty string
    """
    if value is None:
        raise ValidationError(f"required parameter {name} is nil", parameter=name)
    if isinstance(value, str) and value == "":
        raise ValidationError(f"required parameter {name} is empty", parameter=name)


def check_required_parameters(params: Mapping[str, Any]) -> None:
    """Check several required parameters, raising on the first missing one."""
    for name, value in params.items():
        check_required_parameter(value, name)
