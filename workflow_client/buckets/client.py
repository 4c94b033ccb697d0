"""Storage operations: upload assets to the bucket API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from workflow_client.buckets.models import ReqBodyFile, validate_media_type
from workflow_client.errors import ApiError
from workflow_client.response import Response, get_json_response

if TYPE_CHECKING:
    from workflow_client.client import Workflow

logger = logging.getLogger(__name__)

ASSETS_PATH = "/assets"


class Buckets:
    """Bucket operations bound to a :class:`Workflow` context."""

    def __init__(self, workflow: Workflow) -> None:
        self._workflow = workflow

    async def upload_file(self, asset: ReqBodyFile) -> Response:
        """Upload every file in *asset*, one request per file, in order.

        Stops at the first non-2xx response without sending the remaining
        files. The returned body lists the parsed bodies of the successful
        uploads; status and headers come from the last response received.

        Raises:
            InvalidHeaderError: company or user is not configured.
            FormatError: a file's media type or a response body is malformed.
            ApiError: the transport failed.
        """
        collected: list[Any] = []
        status_code = 202
        headers = httpx.Headers()

        for index, file in enumerate(asset.files):
            extract = self._workflow.extract_client_data()
            request_headers = extract.require("company", "user")
            content_type = validate_media_type(file.file_type)

            url = extract.url(ASSETS_PATH)
            logger.debug("POST %s (%s, %d bytes)", url, file.name, len(file))
            try:
                response = await extract.client.post(
                    url,
                    headers=request_headers,
                    data=asset.form_fields(),
                    files={"upload": (file.name, file.data, content_type)},
                )
            except httpx.HTTPError as exc:
                msg = f"Upload of {file.name!r} failed: {exc}"
                raise ApiError(msg) from exc

            result = get_json_response(response)
            status_code = result.status_code
            headers = result.response_headers
            if not result.is_success:
                logger.info(
                    "Upload stopped at file %d/%d (%s): status %d",
                    index + 1,
                    len(asset.files),
                    file.name,
                    status_code,
                )
                break
            collected.append(result.response_body)

        logger.info("Uploaded %d/%d files", len(collected), len(asset.files))
        return Response(
            status_code=status_code,
            response_headers=headers,
            response_body=collected,
        )

    async def delete_file(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Buckets.delete_file is not supported yet")

    async def get_file(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Buckets.get_file is not supported yet")

    async def create_folder(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Buckets.create_folder is not supported yet")

    async def delete_folder(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Buckets.delete_folder is not supported yet")

    async def list_folders(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Buckets.list_folders is not supported yet")

    async def update_folder(self, *args: Any, **kwargs: Any) -> Response:
        raise NotImplementedError("Buckets.update_folder is not supported yet")
