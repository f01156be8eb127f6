"""
Dependency Injection container.

Wires the abstract BlogPort to a concrete adapter. To swap the store
(e.g., Supabase → in-memory), change STORAGE_BACKEND; nothing else
in the codebase changes.

The store handle is owned by the application: it is built and opened
in the lifespan (main.py), parked on `app.state`, and resolved per
request from there.
"""

from fastapi import Depends, Request

from bloglist.adapters.memory_adapter import InMemoryBlogAdapter
from bloglist.adapters.supabase_adapter import SupabaseBlogAdapter
from bloglist.config import Settings
from bloglist.ports.blog_port import BlogPort
from bloglist.services.blog_service import BlogService


def build_blog_store(config: Settings) -> BlogPort:
    """Instantiate the adapter selected by configuration (not yet connected)."""
    if config.storage_backend == "supabase":
        return SupabaseBlogAdapter(
            url=config.supabase_url,
            key=config.supabase_service_role_key,
            table=config.blogs_table,
        )
    if config.storage_backend == "memory":
        return InMemoryBlogAdapter()
    raise ValueError(
        f"Unknown storage backend: {config.storage_backend}. "
        "Available: supabase, memory"
    )


# ── FastAPI Dependencies (return abstract types) ──────────────


def get_blog_store(request: Request) -> BlogPort:
    """Inject the store opened at startup."""
    return request.app.state.blog_store


def get_blog_service(store: BlogPort = Depends(get_blog_store)) -> BlogService:
    """Injects the store into the blog domain service."""
    return BlogService(store=store)
