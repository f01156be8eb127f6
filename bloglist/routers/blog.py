"""
Blog endpoints — thin HTTP layer, delegates all logic to BlogService.
"""

from fastapi import APIRouter, Depends, Response, status

from bloglist.dependencies import get_blog_service
from bloglist.domain.models import Blog, BlogCreate, BlogStats, BlogUpdate
from bloglist.services import stats_service
from bloglist.services.blog_service import BlogService

router = APIRouter(prefix="/api/blogs", tags=["Blog"])


@router.get("", response_model=list[Blog])
async def list_blogs(service: BlogService = Depends(get_blog_service)):
    """List every blog post."""
    return await service.list_blogs()


@router.post("", response_model=Blog, status_code=status.HTTP_201_CREATED)
async def create_blog(
    body: BlogCreate,
    service: BlogService = Depends(get_blog_service),
):
    """Create a blog post. `likes` defaults to 0."""
    return await service.create_blog(body.model_dump())


@router.get("/stats", response_model=BlogStats)
async def blog_stats(service: BlogService = Depends(get_blog_service)):
    """Totals, favourite blog and top authors across the collection."""
    blogs = await service.list_blogs()
    return stats_service.summarize(blogs)


@router.get("/{blog_id}", response_model=Blog)
async def get_blog(blog_id: str, service: BlogService = Depends(get_blog_service)):
    return await service.get_blog(blog_id)


@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog(blog_id: str, service: BlogService = Depends(get_blog_service)):
    """Delete a blog post. Deleting an unknown id still answers 204."""
    await service.delete_blog(blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{blog_id}", response_model=Blog)
async def update_blog(
    blog_id: str,
    body: BlogUpdate,
    service: BlogService = Depends(get_blog_service),
):
    """Replace every field of an existing blog post."""
    return await service.update_blog(blog_id, body.model_dump())
