"""Storage request data models."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from uuid import UUID

from workflow_client.errors import FormatError

# RFC 7230 token characters.
_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_QUOTED = r'"(?:[^"\\\x00-\x08\x0a-\x1f\x7f]|\\[\x09\x20-\x7e])*"'
_MEDIA_TYPE_RE = re.compile(
    rf"{_TOKEN}/{_TOKEN}(?:[ \t]*;[ \t]*{_TOKEN}=(?:{_TOKEN}|{_QUOTED}))*[ \t]*"
)


def validate_media_type(value: str) -> str:
    """Return *value* if it parses as ``type/subtype[; param=value]``.

    Raises FormatError otherwise.
    """
    if not _MEDIA_TYPE_RE.fullmatch(value):
        msg = f"Invalid media type: {value!r}"
        raise FormatError(msg)
    return value


@dataclass(frozen=True)
class File:
    """A named binary payload with a declared MIME type.

    Attributes:
        file_type: Declared media type, e.g. ``"image/png"``.
        name: File name sent with the multipart part.
        data: Raw file content, held fully in memory.
    """

    file_type: str
    name: str
    data: bytes = field(repr=False)

    def __len__(self) -> int:
        return len(self.data)

    @property
    def is_empty(self) -> bool:
        return len(self.data) == 0


@dataclass
class ReqBodyFile:
    """An upload of one or more files into the tenant's storage.

    Attributes:
        organization_id: Tenant that owns the assets.
        is_public: Whether uploaded assets are publicly visible.
        owner: ``(owner id, owner display name)``.
        description: Free-text description of the upload.
        folder_id: Target folder, if any.
        files: Files to upload; each becomes its own request.
    """

    organization_id: UUID
    is_public: bool
    owner: tuple[UUID, str]
    description: str = ""
    folder_id: UUID | None = None
    files: list[File] = field(default_factory=list)

    def form_fields(self) -> dict[str, str | list[str]]:
        """Multipart text fields shared by every file in this upload."""
        owner_id, owner_name = self.owner
        return {
            "organization_id": str(self.organization_id),
            "is_public": "true" if self.is_public else "false",
            "owner": [str(owner_id), owner_name],
        }
