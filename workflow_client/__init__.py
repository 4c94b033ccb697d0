"""Async client for the workflow storage and notification APIs."""

from workflow_client.buckets import Buckets, File, ReqBodyFile
from workflow_client.client import Workflow, WorkflowExtract
from workflow_client.config import Settings
from workflow_client.errors import ApiError, FormatError, InvalidHeaderError, WorkflowError
from workflow_client.notifications import (
    MessagePlatform,
    MessageProvider,
    Notifications,
    ReqBodyBroadcastMessage,
    ReqBodyContact,
    ReqBodyMessage,
    ReqBodyTemplate,
)
from workflow_client.response import Response, get_json_response

__all__ = [
    "ApiError",
    "Buckets",
    "File",
    "FormatError",
    "InvalidHeaderError",
    "MessagePlatform",
    "MessageProvider",
    "Notifications",
    "ReqBodyBroadcastMessage",
    "ReqBodyContact",
    "ReqBodyFile",
    "ReqBodyMessage",
    "ReqBodyTemplate",
    "Response",
    "Settings",
    "Workflow",
    "WorkflowError",
    "WorkflowExtract",
]
