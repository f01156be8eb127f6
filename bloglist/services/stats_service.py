"""
Aggregate statistics over a list of public blog dicts.
Pure functions — no I/O.
"""

from collections import Counter, defaultdict
from typing import Any


def total_likes(blogs: list[dict[str, Any]]) -> int:
    return sum(blog.get("likes", 0) for blog in blogs)


def favorite_blog(blogs: list[dict[str, Any]]) -> dict[str, Any] | None:
    """The most-liked blog; the earliest one wins a tie."""
    if not blogs:
        return None
    # max() keeps the first maximal element
    top = max(blogs, key=lambda blog: blog.get("likes", 0))
    return {"title": top["title"], "author": top["author"], "likes": top.get("likes", 0)}


def most_blogs(blogs: list[dict[str, Any]]) -> dict[str, Any] | None:
    """Author with the largest number of blogs."""
    if not blogs:
        return None
    author, count = Counter(blog["author"] for blog in blogs).most_common(1)[0]
    return {"author": author, "blogs": count}


def most_likes(blogs: list[dict[str, Any]]) -> dict[str, Any] | None:
    """Author whose blogs have the largest like total."""
    if not blogs:
        return None
    likes_by_author: dict[str, int] = defaultdict(int)
    for blog in blogs:
        likes_by_author[blog["author"]] += blog.get("likes", 0)
    author = max(likes_by_author, key=likes_by_author.__getitem__)
    return {"author": author, "likes": likes_by_author[author]}


def summarize(blogs: list[dict[str, Any]]) -> dict[str, Any]:
    """Everything GET /api/blogs/stats reports."""
    return {
        "count": len(blogs),
        "total_likes": total_likes(blogs),
        "favorite_blog": favorite_blog(blogs),
        "most_blogs": most_blogs(blogs),
        "most_likes": most_likes(blogs),
    }
