"""Supabase Storage adapter for uploaded images."""

from dataclasses import dataclass

from supabase import Client

from artvault.services.images import ImageStorage


@dataclass
class SupabaseImageStorage(ImageStorage):
    """Stores images in a public Supabase Storage bucket."""

    client: Client
    bucket: str

    def upload(self, path: str, content: bytes, content_type: str) -> None:
        """Upload the bytes to the bucket."""
        self.client.storage.from_(self.bucket).upload(
            path=path,
            file=content,
            file_options={"content-type": content_type},
        )

    def public_url(self, path: str) -> str:
        """Return the public URL of a stored object."""
        url = self.client.storage.from_(self.bucket).get_public_url(path)
        if not url:
            raise RuntimeError("Supabase returned an empty public URL")
        return url
