"""
In-process implementation of BlogPort.
Used for local development and the test suite.
"""

import copy
import logging
from typing import Any

from bloglist.ports.blog_port import BlogPort

logger = logging.getLogger(__name__)


class InMemoryBlogAdapter(BlogPort):
    """Insertion-ordered dict keyed by `_id`. Hands out copies only."""

    def __init__(self, documents: list[dict[str, Any]] | None = None) -> None:
        self._documents: dict[str, dict[str, Any]] = {}
        for document in documents or []:
            self._put(document)

    def _put(self, document: dict[str, Any]) -> dict[str, Any]:
        blog_id = document["_id"]
        if blog_id in self._documents:
            raise ValueError(f"Duplicate key: {blog_id}")
        self._documents[blog_id] = copy.deepcopy(document)
        return copy.deepcopy(document)

    async def connect(self) -> None:
        logger.info(f"In-memory blog store ready ({len(self._documents)} documents)")

    async def close(self) -> None:
        logger.info("In-memory blog store closed")

    async def insert_blog(self, document: dict[str, Any]) -> dict[str, Any]:
        return self._put(document)

    async def insert_many(self, documents: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return [self._put(document) for document in documents]

    async def list_blogs(self) -> list[dict[str, Any]]:
        return [copy.deepcopy(doc) for doc in self._documents.values()]

    async def get_blog(self, blog_id: str) -> dict[str, Any] | None:
        document = self._documents.get(blog_id)
        return copy.deepcopy(document) if document else None

    async def delete_blog(self, blog_id: str) -> bool:
        return self._documents.pop(blog_id, None) is not None

    async def replace_blog(
        self, blog_id: str, fields: dict[str, Any]
    ) -> dict[str, Any] | None:
        document = self._documents.get(blog_id)
        if document is None:
            return None
        document.update(copy.deepcopy(fields))
        return copy.deepcopy(document)

    async def delete_all(self) -> int:
        removed = len(self._documents)
        self._documents.clear()
        return removed
