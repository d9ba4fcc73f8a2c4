"""Tests for the S3 storage client."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError
from pytest_mock import MockerFixture

from backup_manager.features.storage import ConfigurationFieldMissing, EntryType, ListingFailed
from backup_manager.features.storage.adapters.s3 import (
    S3Location,
    S3StorageClient,
    create_s3_client,
    join_prefix,
)

MODIFIED = datetime(2024, 6, 3, 14, 5, 9, tzinfo=timezone.utc)


@pytest.fixture
def boto_client(mocker: MockerFixture) -> MagicMock:
    client = mocker.Mock()
    client.get_paginator.return_value.paginate.return_value = [
        {
            "CommonPrefixes": [{"Prefix": "db/2024/"}],
            "Contents": [
                {"Key": "db/", "Size": 0, "LastModified": MODIFIED},
                {"Key": "db/dump.sql.gz", "Size": 2048, "LastModified": MODIFIED},
            ],
        },
        {"Contents": [{"Key": "db/README", "Size": 12, "LastModified": MODIFIED}]},
    ]
    return client


@pytest.mark.parametrize(
    "root, path, expected",
    [
        ("", "/", ""),
        ("", "", ""),
        ("", "/db", "db/"),
        ("backups", "/", "backups/"),
        ("backups/", "/db/", "backups/db/"),
        ("/a//b", "c", "a/b/c/"),
    ],
)
def test_join_prefix(root: str, path: str, expected: str) -> None:
    assert join_prefix(root, path) == expected


def test_list_contents_maps_prefixes_and_objects(boto_client: MagicMock) -> None:
    client = S3StorageClient(boto_client, S3Location(bucket="bucket", prefix=""))

    entries = client.list_contents("/db")

    boto_client.get_paginator.assert_called_once_with("list_objects_v2")
    boto_client.get_paginator.return_value.paginate.assert_called_once_with(
        Bucket="bucket", Prefix="db/", Delimiter="/"
    )
    assert [(entry.type, entry.basename) for entry in entries] == [
        (EntryType.DIR, "2024"),
        (EntryType.FILE, "dump.sql.gz"),
        (EntryType.FILE, "README"),
    ]
    dump = entries[1]
    assert dump.extension == "gz"
    assert dump.size == 2048
    assert dump.timestamp == MODIFIED.timestamp()
    assert entries[2].extension == ""


def test_client_error_becomes_listing_failed(boto_client: MagicMock) -> None:
    boto_client.get_paginator.return_value.paginate.side_effect = ClientError(
        {"Error": {"Code": "NoSuchBucket", "Message": "missing"}}, "ListObjectsV2"
    )
    client = S3StorageClient(boto_client, S3Location(bucket="gone", prefix=""), source="remote")

    with pytest.raises(ListingFailed) as excinfo:
        _ = client.list_contents("/")

    assert excinfo.value.source == "remote"
    assert "NoSuchBucket" in excinfo.value.reason


def test_create_s3_client_passes_credentials_and_endpoint(mocker: MockerFixture) -> None:
    mock_boto3 = mocker.patch("backup_manager.features.storage.adapters.s3.boto3")

    client = create_s3_client(
        "remote",
        {
            "type": "s3",
            "bucket": "backups",
            "region": "eu-west-1",
            "root": "db",
            "key": "AKIA",
            "secret": "s3cr3t",
            "endpoint": "http://localhost:9000",
        },
    )

    mock_boto3.client.assert_called_once_with(
        "s3",
        region_name="eu-west-1",
        aws_access_key_id="AKIA",
        aws_secret_access_key="s3cr3t",
        endpoint_url="http://localhost:9000",
    )
    assert isinstance(client, S3StorageClient)


def test_create_s3_client_uses_default_credential_chain(mocker: MockerFixture) -> None:
    mock_boto3 = mocker.patch("backup_manager.features.storage.adapters.s3.boto3")

    _ = create_s3_client("remote", {"type": "s3", "bucket": "backups", "region": "us-east-1"})

    mock_boto3.client.assert_called_once_with("s3", region_name="us-east-1")


def test_create_s3_client_requires_bucket(mocker: MockerFixture) -> None:
    mock_boto3 = mocker.patch("backup_manager.features.storage.adapters.s3.boto3")

    with pytest.raises(ConfigurationFieldMissing, match="'bucket'"):
        _ = create_s3_client("remote", {"type": "s3", "region": "us-east-1"})

    mock_boto3.client.assert_not_called()


@pytest.mark.parametrize(
    "credentials, missing",
    [({"key": "AKIA"}, "secret"), ({"secret": "s3cr3t"}, "key")],
)
def test_create_s3_client_requires_both_credentials(
    mocker: MockerFixture,
    credentials: dict[str, str],
    missing: str,
) -> None:
    mock_boto3 = mocker.patch("backup_manager.features.storage.adapters.s3.boto3")

    with pytest.raises(ConfigurationFieldMissing) as excinfo:
        _ = create_s3_client(
            "remote", {"type": "s3", "bucket": "b", "region": "us-east-1", **credentials}
        )

    assert excinfo.value.field == missing
    mock_boto3.client.assert_not_called()
