"""
Pydantic models for requests and responses.
Pure data — no I/O, no side effects.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ── Blog ──────────────────────────────────────────────────────


class BlogCreate(BaseModel):
    """Request body for POST /api/blogs."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    likes: int = Field(0, ge=0)


class BlogUpdate(BaseModel):
    """Request body for PUT /api/blogs/{id}. Every field is replaced."""

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    likes: int = Field(..., ge=0)


class Blog(BaseModel):
    """Public representation of a stored blog."""

    id: str
    title: str
    author: str
    url: str
    likes: int = 0


# ── Statistics ────────────────────────────────────────────────


class FavoriteBlog(BaseModel):
    title: str
    author: str
    likes: int


class AuthorBlogCount(BaseModel):
    author: str
    blogs: int


class AuthorLikes(BaseModel):
    author: str
    likes: int


class BlogStats(BaseModel):
    """Response for GET /api/blogs/stats."""

    count: int
    total_likes: int
    favorite_blog: FavoriteBlog | None = None
    most_blogs: AuthorBlogCount | None = None
    most_likes: AuthorLikes | None = None
