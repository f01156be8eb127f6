"""
Mapping between stored blog documents and their public representation.
Pure functions — no I/O, no mutation of the input.
"""

from typing import Any

from bloglist.domain.identifiers import new_object_id

ID_FIELD = "_id"
VERSION_FIELD = "__v"


def to_public(document: dict[str, Any]) -> dict[str, Any]:
    """Expose `_id` as `id` and drop the revision marker."""
    public = {
        key: value
        for key, value in document.items()
        if key not in (ID_FIELD, VERSION_FIELD)
    }
    public["id"] = str(document[ID_FIELD])
    return public


def to_document(fields: dict[str, Any], doc_id: str | None = None) -> dict[str, Any]:
    """Build a storable document from validated blog fields."""
    return {
        ID_FIELD: doc_id or new_object_id(),
        **fields,
        VERSION_FIELD: 0,
    }
