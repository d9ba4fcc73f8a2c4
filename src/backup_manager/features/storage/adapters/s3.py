"""src/backup_manager/features/storage/adapters/s3.py
What: Storage client listing "directories" of an S3 bucket.
Why: Let backup sources live in object storage next to local disks.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Any, final

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from backup_manager.features.storage.domain.errors import ListingFailed
from backup_manager.features.storage.domain.models import DirectoryEntry, EntryType
from backup_manager.features.storage.domain.settings import StorageSettings, require_setting


@dataclass(slots=True, frozen=True)
class S3Location:
    bucket: str
    prefix: str


def join_prefix(root: str, path: str) -> str:
    """Combine the configured root and a listing path into a key prefix."""

    parts = [part for part in f"{root}/{path}".split("/") if part]
    return "/".join(parts) + "/" if parts else ""


@final
class S3StorageClient:
    """List one level of an S3 bucket using ``/`` as the directory delimiter."""

    def __init__(self, client: Any, location: S3Location, *, source: str = "s3") -> None:
        self._client = client
        self._location = location
        self._source = source

    def list_contents(self, path: str) -> list[DirectoryEntry]:
        """Return the objects and common prefixes directly under ``path``.

        Raises:
            ListingFailed: When S3 rejects the request.
        """
        prefix = join_prefix(self._location.prefix, path)
        paginator = self._client.get_paginator("list_objects_v2")
        entries: list[DirectoryEntry] = []
        try:
            for page in paginator.paginate(
                Bucket=self._location.bucket, Prefix=prefix, Delimiter="/"
            ):
                for common in page.get("CommonPrefixes", []):
                    key = common["Prefix"]
                    entries.append(
                        DirectoryEntry(
                            type=EntryType.DIR,
                            basename=PurePosixPath(key).name,
                            extension="",
                            size=0,
                            timestamp=0,
                            path=key,
                        )
                    )
                for obj in page.get("Contents", []):
                    key = obj["Key"]
                    if key == prefix:
                        # zero-byte "folder" marker
                        continue
                    name = PurePosixPath(key).name
                    entries.append(
                        DirectoryEntry(
                            type=EntryType.FILE,
                            basename=name,
                            extension=PurePosixPath(name).suffix.removeprefix("."),
                            size=int(obj.get("Size", 0)),
                            timestamp=obj["LastModified"].timestamp(),
                            path=key,
                        )
                    )
        except (ClientError, BotoCoreError) as e:
            raise ListingFailed(self._source, path, str(e)) from e
        return entries


def create_s3_client(source: str, settings: StorageSettings) -> S3StorageClient:
    """Build an ``S3StorageClient`` from a ``type = "s3"`` table.

    ``key``/``secret`` are optional but go together; without them boto3 falls
    back to its regular credential chain (environment, shared credentials, roles).

    Raises:
        ConfigurationFieldMissing: When ``bucket`` or ``region`` is missing, or
            only one of ``key``/``secret`` is set.
    """
    bucket = str(require_setting(source, settings, "bucket"))
    region = str(require_setting(source, settings, "region"))

    client_kwargs: dict[str, Any] = {"region_name": region}
    if settings.get("key") or settings.get("secret"):
        client_kwargs["aws_access_key_id"] = str(require_setting(source, settings, "key"))
        client_kwargs["aws_secret_access_key"] = str(require_setting(source, settings, "secret"))
    if settings.get("endpoint"):
        client_kwargs["endpoint_url"] = settings["endpoint"]

    client = boto3.client("s3", **client_kwargs)
    location = S3Location(bucket=bucket, prefix=str(settings.get("root") or ""))
    return S3StorageClient(client, location, source=source)


__all__ = ["S3Location", "S3StorageClient", "create_s3_client", "join_prefix"]
