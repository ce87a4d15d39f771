"""
Blog post API endpoints.
"""

from fastapi import APIRouter, Depends, status, Path
from fastapi.responses import Response
from typing import List, Optional

from estate_api.services.blog import BlogService
from estate_api.schemas.blog import BlogPostCreate, BlogPostUpdate, BlogPostResponse
from estate_api.schemas.error import (
    get_read_error_responses,
    get_write_error_responses,
    get_list_error_responses
)
from estate_api.utils.dependencies import get_blog_service
from estate_api.utils.validators import parse_positive_int, parse_limit


router = APIRouter(prefix="/blog-posts", tags=["Blog"])


def _to_response(post) -> BlogPostResponse:
    return BlogPostResponse.model_validate(post.to_dict())


@router.get("", response_model=List[BlogPostResponse], summary="List blog posts")
async def list_blog_posts(
    blog_service: BlogService = Depends(get_blog_service)
) -> List[BlogPostResponse]:
    posts = await blog_service.list_posts()
    return [_to_response(post) for post in posts]


async def _featured(blog_service: BlogService, limit: Optional[str]) -> List[BlogPostResponse]:
    parsed_limit = parse_limit(limit) if limit is not None else None
    posts = await blog_service.get_featured_posts(parsed_limit)
    return [_to_response(post) for post in posts]


@router.get(
    "/featured",
    response_model=List[BlogPostResponse],
    summary="Featured blog posts",
    responses=get_list_error_responses()
)
async def get_featured_blog_posts(
    blog_service: BlogService = Depends(get_blog_service)
) -> List[BlogPostResponse]:
    return await _featured(blog_service, None)


@router.get(
    "/featured/{limit}",
    response_model=List[BlogPostResponse],
    summary="Featured blog posts with limit",
    responses=get_list_error_responses()
)
async def get_featured_blog_posts_with_limit(
    limit: str = Path(..., description="Maximum number of posts"),
    blog_service: BlogService = Depends(get_blog_service)
) -> List[BlogPostResponse]:
    return await _featured(blog_service, limit)


@router.get(
    "/category/{category}",
    response_model=List[BlogPostResponse],
    summary="Blog posts by category",
    description="Get posts whose category matches exactly; the match is case-sensitive"
)
async def list_blog_posts_by_category(
    category: str = Path(..., description="Category name"),
    blog_service: BlogService = Depends(get_blog_service)
) -> List[BlogPostResponse]:
    posts = await blog_service.list_posts_by_category(category)
    return [_to_response(post) for post in posts]


@router.get(
    "/{post_id}",
    response_model=BlogPostResponse,
    summary="Get blog post",
    responses=get_read_error_responses()
)
async def get_blog_post(
    post_id: str = Path(..., description="Blog post ID"),
    blog_service: BlogService = Depends(get_blog_service)
) -> BlogPostResponse:
    post = await blog_service.get_post(parse_positive_int(post_id, "blog post ID"))
    return _to_response(post)


@router.post(
    "",
    response_model=BlogPostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Publish blog post",
    responses=get_write_error_responses()
)
async def create_blog_post(
    post_data: BlogPostCreate,
    blog_service: BlogService = Depends(get_blog_service)
) -> BlogPostResponse:
    post = await blog_service.create_post(post_data)
    return _to_response(post)


@router.put(
    "/{post_id}",
    response_model=BlogPostResponse,
    summary="Update blog post",
    responses=get_write_error_responses()
)
async def update_blog_post(
    post_data: BlogPostUpdate,
    post_id: str = Path(..., description="Blog post ID"),
    blog_service: BlogService = Depends(get_blog_service)
) -> BlogPostResponse:
    post = await blog_service.update_post(parse_positive_int(post_id, "blog post ID"), post_data)
    return _to_response(post)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete blog post",
    responses=get_read_error_responses()
)
async def delete_blog_post(
    post_id: str = Path(..., description="Blog post ID"),
    blog_service: BlogService = Depends(get_blog_service)
) -> Response:
    await blog_service.delete_post(parse_positive_int(post_id, "blog post ID"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
