"""
Blog service — CRUD for blog posts.
Single Responsibility: validates identifiers, delegates to the store,
and hands back public representations only.
"""

import logging
from typing import Any

from bloglist.domain.errors import BlogNotFoundError, MalformedIdError
from bloglist.domain.identifiers import is_valid_object_id
from bloglist.domain.serialization import to_document, to_public
from bloglist.ports.blog_port import BlogPort

logger = logging.getLogger(__name__)


def _check_id(blog_id: str) -> str:
    """Reject malformed ids; stored ids are lowercase hex."""
    if not is_valid_object_id(blog_id):
        raise MalformedIdError()
    return blog_id.lower()


class BlogService:
    """Handles blog CRUD operations."""

    def __init__(self, store: BlogPort) -> None:
        self._store = store

    async def list_blogs(self) -> list[dict[str, Any]]:
        """Every blog in natural storage order."""
        documents = await self._store.list_blogs()
        return [to_public(doc) for doc in documents]

    async def get_blog(self, blog_id: str) -> dict[str, Any]:
        blog_id = _check_id(blog_id)
        document = await self._store.get_blog(blog_id)
        if document is None:
            raise BlogNotFoundError()
        return to_public(document)

    async def create_blog(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Persist a new blog; the store-side id is assigned here."""
        document = await self._store.insert_blog(to_document(fields))
        logger.info(f"Created blog {document['_id']}: {fields.get('title')!r}")
        return to_public(document)

    async def delete_blog(self, blog_id: str) -> None:
        """Idempotent: deleting an absent blog is not an error."""
        blog_id = _check_id(blog_id)
        deleted = await self._store.delete_blog(blog_id)
        if deleted:
            logger.info(f"Deleted blog {blog_id}")
        else:
            logger.info(f"Delete of absent blog {blog_id} ignored")

    async def update_blog(self, blog_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        """Replace every blog field of an existing blog."""
        blog_id = _check_id(blog_id)
        document = await self._store.replace_blog(blog_id, fields)
        if document is None:
            raise BlogNotFoundError()
        logger.info(f"Updated blog {blog_id}")
        return to_public(document)
