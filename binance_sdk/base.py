"""Shared plumbing for endpoint groups."""

from typing import Optional

from .client import SignedClient
from .types import HTTPMethod, ParamValue, Params
from .validation import check_required_parameters


class EndpointGroup:
    """Base class for a set of endpoint wrappers sharing one signed client."""

    def __init__(self, client: SignedClient):
        """
        Args:
            client: Signed client that sends every request of this group
        """
        self._client = client

    def _send(
        self,
        method: HTTPMethod,
        path: str,
        optional: Params,
        required: Optional[dict[str, ParamValue]] = None,
    ) -> bytes:
        """Validate required parameters, merge them over optional ones and send."""
        required = required or {}
        check_required_parameters(required)
        return self._client.execute(method, path, {**optional, **required})
