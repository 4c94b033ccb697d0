"""Workflow client context: connection settings and identity headers."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

import httpx

from workflow_client.config import settings as default_settings
from workflow_client.errors import InvalidHeaderError

if TYPE_CHECKING:
    from workflow_client.buckets.client import Buckets
    from workflow_client.config import Settings
    from workflow_client.notifications.client import Notifications

logger = logging.getLogger(__name__)

COMPANY_HEADER = "x-company-id"
USER_HEADER = "x-user-id"
NOTIFICATION_HEADER = "x-notification-id"

_IDENTITY_LABELS = {
    "company": "company id",
    "user": "user id",
    "notification": "notification config id",
}

# Visible ASCII plus space and tab, no leading/trailing whitespace.
_HEADER_VALUE_RE = re.compile(r"[\x21-\x7e](?:[\x20-\x7e\t]*[\x21-\x7e])?")


def _header(name: str, value: object | None) -> tuple[str, str] | None:
    """Render an identifier as a header pair, or None when unset."""
    if value is None:
        return None
    rendered = str(value)
    if not _HEADER_VALUE_RE.fullmatch(rendered):
        msg = f"Invalid value for header {name}: {rendered!r}"
        raise InvalidHeaderError(msg)
    return (name, rendered)


@dataclass(frozen=True)
class WorkflowExtract:
    """Snapshot of a :class:`Workflow` taken at the start of a call.

    Attributes:
        client: Shared transport used to send the request.
        base_url: Backend root URL without a trailing slash.
        company: ``(header, value)`` for the tenant, if configured.
        user: ``(header, value)`` for the acting user, if configured.
        notification: ``(header, value)`` for the notification config, if configured.
    """

    client: httpx.AsyncClient
    base_url: str
    company: tuple[str, str] | None = None
    user: tuple[str, str] | None = None
    notification: tuple[str, str] | None = None

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def require(self, *names: str) -> dict[str, str]:
        """Return headers for the named identities.

        Raises InvalidHeaderError naming the first identity that is unset.
        """
        headers: dict[str, str] = {}
        for name in names:
            pair = getattr(self, name)
            if pair is None:
                msg = f"Missing {_IDENTITY_LABELS[name]}: configure it on the Workflow client first"
                raise InvalidHeaderError(msg)
            headers[pair[0]] = pair[1]
        return headers


class Workflow:
    """Mutable client context for the workflow backend.

    Holds the base URL, the shared HTTP transport and the identifiers that
    become per-request identity headers. Setters return ``self`` so calls
    can be chained::

        wf = Workflow("https://api.example.com").set_company(cid).set_user(uid)
        resp = await wf.notifications().fetch_contact()

    One context should serve one logical session. Mutating it from several
    tasks at once needs external locking.
    """

    def __init__(self, base_url: str, *, http_client: httpx.AsyncClient | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=default_settings.request_timeout
        )
        self._company_id: UUID | None = None
        self._user_id: UUID | None = None
        self._notification_id: UUID | None = None
        self._storage_id: UUID | None = None
        self._webhook_key: str | None = None
        self._api_token: str | None = None

    @classmethod
    def from_settings(
        cls,
        config: Settings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> Workflow:
        """Build a context from :class:`Settings` (module defaults if omitted)."""
        if config is None:
            config = default_settings
        owns_client = http_client is None
        wf = cls(
            config.base_url,
            http_client=http_client or httpx.AsyncClient(timeout=config.request_timeout),
        )
        wf._owns_client = owns_client

        if config.company_id is not None:
            wf.set_company(config.company_id)
        if config.user_id is not None:
            wf.set_user(config.user_id)
        return (
            wf.set_notification_config(config.notification_id)
            .set_storage_config(config.storage_id)
            .set_web_hook_config(config.webhook_key)
            .set_api_token(config.api_token)
        )

    # -- Setters ---------------------------------------------------------------

    def set_company(self, company_id: UUID) -> Workflow:
        self._company_id = company_id
        return self

    set_tenant = set_company

    def set_user(self, user_id: UUID) -> Workflow:
        self._user_id = user_id
        return self

    def set_api_token(self, api_token: str | None) -> Workflow:
        self._api_token = api_token
        return self

    def set_notification_config(self, config_id: UUID | None) -> Workflow:
        self._notification_id = config_id
        return self

    def set_storage_config(self, config_id: UUID | None) -> Workflow:
        self._storage_id = config_id
        return self

    def set_web_hook_config(self, webhook_key: str | None) -> Workflow:
        self._webhook_key = webhook_key
        return self

    set_webhook_config = set_web_hook_config

    # -- Read-only accessors ---------------------------------------------------

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    @property
    def company_id(self) -> UUID | None:
        return self._company_id

    @property
    def user_id(self) -> UUID | None:
        return self._user_id

    @property
    def notification_id(self) -> UUID | None:
        return self._notification_id

    @property
    def storage_id(self) -> UUID | None:
        return self._storage_id

    @property
    def webhook_key(self) -> str | None:
        return self._webhook_key

    @property
    def api_token(self) -> str | None:
        return self._api_token

    # -- Operation handles -----------------------------------------------------

    def notifications(self) -> Notifications:
        from workflow_client.notifications.client import Notifications

        return Notifications(self)

    def buckets(self) -> Buckets:
        from workflow_client.buckets.client import Buckets

        return Buckets(self)

    # -- Header extraction -----------------------------------------------------

    def extract_client_data(self) -> WorkflowExtract:
        """Take a snapshot of the transport, base URL and identity headers.

        Raises InvalidHeaderError if a configured identifier cannot be used
        as a header value.
        """
        return WorkflowExtract(
            client=self._http_client,
            base_url=self._base_url,
            company=_header(COMPANY_HEADER, self._company_id),
            user=_header(USER_HEADER, self._user_id),
            notification=_header(NOTIFICATION_HEADER, self._notification_id),
        )

    # -- Lifecycle -------------------------------------------------------------

    async def aclose(self) -> None:
        """Close the transport if this context created it."""
        if self._owns_client:
            await self._http_client.aclose()
            logger.debug("Closed workflow HTTP client for %s", self._base_url)

    async def __aenter__(self) -> Workflow:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"Workflow(base_url={self._base_url!r}, company_id={self._company_id}, "
            f"user_id={self._user_id}, notification_id={self._notification_id})"
        )
