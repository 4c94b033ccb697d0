"""Normalized response envelope shared by every operation."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from workflow_client.errors import FormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Response:
    """Status, headers and parsed JSON body of a completed call.

    Attributes:
        status_code: HTTP status of the (last) backend response.
        response_headers: Headers of that response.
        response_body: Decoded JSON value. For multi-file uploads this is a
            list with one entry per successfully uploaded file.
    """

    status_code: int
    response_headers: httpx.Headers = field(default_factory=httpx.Headers)
    response_body: Any = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


def get_json_response(response: httpx.Response) -> Response:
    """Wrap an ``httpx.Response`` into a :class:`Response`.

    Raises FormatError if the body is not valid JSON. An empty body is
    treated the same way.
    """
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        msg = f"Response body is not valid JSON (status {response.status_code}): {exc}"
        raise FormatError(msg) from exc

    logger.debug("Received %d response", response.status_code)
    return Response(
        status_code=response.status_code,
        response_headers=response.headers,
        response_body=body,
    )
