"""Bucket storage API: file uploads."""

from workflow_client.buckets.client import Buckets
from workflow_client.buckets.models import File, ReqBodyFile, validate_media_type

__all__ = [
    "Buckets",
    "File",
    "ReqBodyFile",
    "validate_media_type",
]
