"""Tests for storage data models."""

from dataclasses import FrozenInstanceError
from uuid import uuid4

import pytest

from workflow_client.buckets.models import File, ReqBodyFile, validate_media_type
from workflow_client.errors import FormatError


class TestValidateMediaType:
    @pytest.mark.parametrize(
        "value",
        [
            "image/png",
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            "text/plain; charset=utf-8",
            'multipart/mixed; boundary="a b c"',
            "application/octet-stream",
        ],
    )
    def test_accepts_valid(self, value) -> None:
        assert validate_media_type(value) == value

    @pytest.mark.parametrize(
        "value",
        ["", "png", "image/", "/png", "image/png;", "image/png; charset", "imäge/png", "a/b\r\n"],
    )
    def test_rejects_invalid(self, value) -> None:
        with pytest.raises(FormatError, match="Invalid media type"):
            validate_media_type(value)


class TestFile:
    def test_length_and_emptiness(self) -> None:
        f = File(file_type="text/plain", name="a.txt", data=b"hello")
        assert len(f) == 5
        assert not f.is_empty
        assert File(file_type="text/plain", name="e.txt", data=b"").is_empty

    def test_is_immutable(self) -> None:
        f = File(file_type="text/plain", name="a.txt", data=b"hello")
        with pytest.raises(FrozenInstanceError):
            f.name = "b.txt"

    def test_repr_omits_data(self) -> None:
        f = File(file_type="text/plain", name="a.txt", data=b"secret")
        assert "secret" not in repr(f)


class TestReqBodyFile:
    def test_form_fields(self) -> None:
        org, owner = uuid4(), uuid4()
        req = ReqBodyFile(organization_id=org, is_public=True, owner=(owner, "Grace"))

        assert req.form_fields() == {
            "organization_id": str(org),
            "is_public": "true",
            "owner": [str(owner), "Grace"],
        }

    def test_defaults(self) -> None:
        req = ReqBodyFile(organization_id=uuid4(), is_public=False, owner=(uuid4(), "x"))
        assert req.description == ""
        assert req.folder_id is None
        assert req.files == []
        assert req.form_fields()["is_public"] == "false"
