import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from albertonet import dependencies as deps
from albertonet.exceptions import ContentError, StorageTransportError
from albertonet.schemas.blog import Post, TopPost
from albertonet.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[Post])
async def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts, newest first."""
    try:
        return await service.get_posts()
    except HTTPException:
        raise
    except StorageTransportError as e:
        logger.error(f"Storage unavailable while listing posts: {e}")
        raise HTTPException(status_code=503, detail="Content storage unavailable")
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/slugs", response_model=List[str])
async def list_post_slugs(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return await service.list_post_slugs()
    except StorageTransportError as e:
        logger.error(f"Storage unavailable while listing slugs: {e}")
        raise HTTPException(status_code=503, detail="Content storage unavailable")


@router.get("/posts/top", response_model=List[TopPost])
async def list_top_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get the curated top posts."""
    try:
        return await service.get_top_posts()
    except StorageTransportError as e:
        logger.error(f"Storage unavailable while reading top posts: {e}")
        raise HTTPException(status_code=503, detail="Content storage unavailable")
    except ContentError as e:
        logger.error(f"Top posts manifest is broken: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve top posts")


@router.get("/posts/{slug}", response_model=Post)
async def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = await service.get_post_by_slug(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except StorageTransportError as e:
        logger.error(f"Storage unavailable while retrieving post {slug}: {e}")
        raise HTTPException(status_code=503, detail="Content storage unavailable")
    except ContentError as e:
        logger.warning(f"Post {slug} could not be parsed: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
