"""Notification operations: contacts, messages and templates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from workflow_client.errors import ApiError
from workflow_client.response import Response, get_json_response

if TYPE_CHECKING:
    from workflow_client.client import Workflow, WorkflowExtract
    from workflow_client.notifications.models import ReqBodyMessage, ReqBodyTemplate

logger = logging.getLogger(__name__)

CONTACT_PATH = "/contact"
SEND_MESSAGE_PATH = "/send-message"
TEMPLATE_PATH = "/template"


class Notifications:
    """Notification operations bound to a :class:`Workflow` context.

    Every operation is a single request/response round trip. Identity
    headers are read from a snapshot of the context taken when the call
    starts; a missing identity raises InvalidHeaderError before anything
    is sent. Non-2xx responses are returned, not raised.
    """

    def __init__(self, workflow: Workflow) -> None:
        self._workflow = workflow

    async def _send(
        self,
        extract: WorkflowExtract,
        method: str,
        path: str,
        headers: dict[str, str],
        json: dict[str, Any] | None = None,
    ) -> Response:
        url = extract.url(path)
        logger.debug("%s %s", method, url)
        try:
            response = await extract.client.request(method, url, headers=headers, json=json)
        except httpx.HTTPError as exc:
            msg = f"{method} {url} failed: {exc}"
            raise ApiError(msg) from exc
        return get_json_response(response)

    async def fetch_contact(self) -> Response:
        """Fetch the contact record of the configured user."""
        extract = self._workflow.extract_client_data()
        headers = extract.require("company", "user")
        return await self._send(extract, "GET", CONTACT_PATH, headers)

    async def send_message(self, msg: ReqBodyMessage) -> Response:
        """Send *msg* through the configured notification config."""
        extract = self._workflow.extract_client_data()
        headers = extract.require("company", "notification", "user")
        return await self._send(extract, "POST", SEND_MESSAGE_PATH, headers, msg.to_json())

    async def send_broadcast_message(self, msg: ReqBodyMessage) -> Response:
        """Send *msg* exactly as :meth:`send_message` does.

        The backend has no separate broadcast endpoint for this client yet,
        so the request is identical to a single send.
        """
        extract = self._workflow.extract_client_data()
        headers = extract.require("company", "notification", "user")
        return await self._send(extract, "POST", SEND_MESSAGE_PATH, headers, msg.to_json())

    async def create_template(self, template_data: ReqBodyTemplate) -> Response:
        extract = self._workflow.extract_client_data()
        headers = extract.require("company", "user")
        return await self._send(extract, "POST", TEMPLATE_PATH, headers, template_data.to_json())

    async def fetch_contact_list(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Notifications.fetch_contact_list is not supported yet")

    async def create_contact(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Notifications.create_contact is not supported yet")

    async def update_contact(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Notifications.update_contact is not supported yet")

    async def delete_contact(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Notifications.delete_contact is not supported yet")

    async def fetch_template(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Notifications.fetch_template is not supported yet")

    async def update_template(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Notifications.update_template is not supported yet")

    async def delete_template(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Notifications.delete_template is not supported yet")
