"""Tests for the Supabase Storage adapter."""

from dataclasses import dataclass, field

import pytest

from artvault.adapters.supabase_image_storage import SupabaseImageStorage


@dataclass
class FakeBucket:
    uploads: list[dict[str, object]] = field(default_factory=list)
    url: str = "https://example.supabase.co/storage/v1/object/public/images/a.png"

    def upload(self, path, file, file_options=None):  # type: ignore[no-untyped-def]
        self.uploads.append({"path": path, "file": file, "options": file_options})
        return {"Key": path}

    def get_public_url(self, path):  # type: ignore[no-untyped-def]
        return self.url


@dataclass
class FakeStorage:
    buckets: dict[str, FakeBucket] = field(default_factory=dict)

    def from_(self, bucket: str) -> FakeBucket:
        return self.buckets.setdefault(bucket, FakeBucket())


@dataclass
class FakeSupabaseClient:
    storage: FakeStorage = field(default_factory=FakeStorage)


def test_upload_sends_bytes_with_content_type() -> None:
    client = FakeSupabaseClient()
    storage = SupabaseImageStorage(client=client, bucket="images")

    storage.upload("artwork/u1/a.png", b"png-bytes", "image/png")

    (upload,) = client.storage.buckets["images"].uploads
    assert upload == {
        "path": "artwork/u1/a.png",
        "file": b"png-bytes",
        "options": {"content-type": "image/png"},
    }


def test_public_url_comes_from_bucket() -> None:
    client = FakeSupabaseClient()
    storage = SupabaseImageStorage(client=client, bucket="images")

    assert storage.public_url("a.png").endswith("/public/images/a.png")


def test_public_url_rejects_empty_response() -> None:
    client = FakeSupabaseClient()
    client.storage.from_("images").url = ""
    storage = SupabaseImageStorage(client=client, bucket="images")

    with pytest.raises(RuntimeError):
        storage.public_url("a.png")
