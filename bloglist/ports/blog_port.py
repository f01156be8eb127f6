from abc import ABC, abstractmethod
from typing import Any


class BlogPort(ABC):
    """
    Storage contract for blog documents.

    Documents are plain dicts in storage shape: `_id`, `__v` and the
    blog fields. Translation to the public shape happens in the service.
    """

    @abstractmethod
    async def connect(self) -> None:
        """Open the underlying connection. Called once at startup."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection. Called once at shutdown."""
        ...

    @abstractmethod
    async def insert_blog(self, document: dict[str, Any]) -> dict[str, Any]:
        """Insert a document and return the stored row."""
        ...

    @abstractmethod
    async def insert_many(self, documents: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Bulk insert, used for seeding."""
        ...

    @abstractmethod
    async def list_blogs(self) -> list[dict[str, Any]]:
        """Every stored document, in natural storage order."""
        ...

    @abstractmethod
    async def get_blog(self, blog_id: str) -> dict[str, Any] | None:
        """Fetch a single document by `_id`."""
        ...

    @abstractmethod
    async def delete_blog(self, blog_id: str) -> bool:
        """Delete by `_id`. Returns False (no error) when nothing matched."""
        ...

    @abstractmethod
    async def replace_blog(
        self, blog_id: str, fields: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Replace the blog fields of `_id`. Returns None when nothing matched."""
        ...

    @abstractmethod
    async def delete_all(self) -> int:
        """Remove every document. Returns the number removed."""
        ...
