"""
Concrete implementation of BlogPort using the Supabase Python client.

Expected table layout (defaults to `blogs`):
    _id text primary key, __v integer, title text,
    author text, url text, likes integer
"""

import logging
from typing import Any

from supabase import Client, create_client

from bloglist.ports.blog_port import BlogPort

logger = logging.getLogger(__name__)


class SupabaseBlogAdapter(BlogPort):
    """All blog I/O goes through the Supabase REST client."""

    def __init__(
        self,
        url: str | None = None,
        key: str | None = None,
        table: str = "blogs",
        client: Client | None = None,
    ) -> None:
        self._url = url
        self._key = key
        self._table_name = table
        self._client = client

    # ── Lifecycle ─────────────────────────────────────────────

    async def connect(self) -> None:
        if self._client is not None:
            return
        if not self._url or not self._key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY are required "
                "for the supabase storage backend"
            )
        # Use service role key — bypasses RLS for server-side operations
        self._client = create_client(self._url, self._key)
        logger.info(f"Connected to Supabase table '{self._table_name}'")

    async def close(self) -> None:
        # supabase-py keeps no pooled connection worth tearing down
        self._client = None
        logger.info("Supabase client released")

    def _table(self):
        if self._client is None:
            raise RuntimeError("SupabaseBlogAdapter used before connect()")
        return self._client.table(self._table_name)

    # ── Blogs ─────────────────────────────────────────────────

    async def insert_blog(self, document: dict[str, Any]) -> dict[str, Any]:
        result = self._table().insert(document).execute()
        return result.data[0]

    async def insert_many(self, documents: list[dict[str, Any]]) -> list[dict[str, Any]]:
        if not documents:
            return []
        result = self._table().insert(documents).execute()
        return result.data or []

    async def list_blogs(self) -> list[dict[str, Any]]:
        # ObjectId-shaped keys sort by creation time
        result = self._table().select("*").order("_id").execute()
        return result.data or []

    async def get_blog(self, blog_id: str) -> dict[str, Any] | None:
        result = (
            self._table()
            .select("*")
            .eq("_id", blog_id)
            .maybe_single()
            .execute()
        )
        return result.data if result else None

    async def delete_blog(self, blog_id: str) -> bool:
        result = self._table().delete().eq("_id", blog_id).execute()
        return bool(result.data)

    async def replace_blog(
        self, blog_id: str, fields: dict[str, Any]
    ) -> dict[str, Any] | None:
        result = self._table().update(fields).eq("_id", blog_id).execute()
        return result.data[0] if result.data else None

    async def delete_all(self) -> int:
        # PostgREST refuses an unfiltered delete
        result = self._table().delete().neq("_id", "").execute()
        return len(result.data or [])
