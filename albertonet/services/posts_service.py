import asyncio
import json
import logging
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from albertonet.exceptions import MalformedDocument
from albertonet.schemas.blog import BatchFailure, Post, PostsReport, TopPost
from albertonet.services.content_parser import slug_from_path
from albertonet.settings import settings

logger = logging.getLogger(__name__)


_top_posts_adapter = TypeAdapter(List[TopPost])


class PostsService:
    def __init__(
        self,
        store,
        posts_prefix: str = settings.POSTS_PREFIX,
        top_posts_key: str = settings.TOP_POSTS_KEY,
        extension: str = settings.POST_EXTENSION,
    ):
        self.store = store
        self.posts_prefix = posts_prefix
        self.top_posts_key = top_posts_key
        self.extension = extension

    async def list_post_paths(self) -> List[str]:
        """Post keys directly under the posts prefix; nested folders are not posts."""
        paths = await self.store.list_document_paths(self.posts_prefix)
        return [
            path
            for path in paths
            if path.endswith(self.extension) and "/" not in path[len(self.posts_prefix):]
        ]

    async def list_post_slugs(self) -> List[str]:
        return [
            slug_from_path(path, self.extension)
            for path in await self.list_post_paths()
        ]

    async def get_posts(self) -> List[Post]:
        report = await self.get_posts_report()
        return report.posts

    async def get_posts_report(self) -> PostsReport:
        """Fetch every post concurrently; missing or broken posts are reported, not raised."""
        paths = await self.list_post_paths()
        results = await asyncio.gather(
            *(self.get_post_by_path(path) for path in paths), return_exceptions=True
        )

        posts: List[Post] = []
        failures: List[BatchFailure] = []
        for path, result in zip(paths, results):
            if isinstance(result, Post):
                posts.append(result)
                continue
            reason = "not found" if result is None else f"{type(result).__name__}: {result}"
            logger.warning(f"Skipping post {path}: {reason}")
            failures.append(BatchFailure(path=path, reason=reason))

        posts.sort(key=lambda post: post.publicationDate, reverse=True)
        return PostsReport(posts=posts, failures=failures)

    async def get_post_by_slug(self, slug: str) -> Optional[Post]:
        raw = await self.store.fetch_by_prefix_and_name(
            self.posts_prefix, f"{slug}{self.extension}"
        )
        if raw is None:
            return None
        return self.store.to_post(slug, raw)

    async def get_post_by_path(self, path: str) -> Optional[Post]:
        raw = await self.store.fetch_by_path(path)
        if raw is None:
            return None
        return self.store.to_post(slug_from_path(path, self.extension), raw)

    async def get_top_posts(self) -> List[TopPost]:
        raw = await self.store.fetch_by_path(self.top_posts_key)
        if raw is None:
            logger.warning("Top posts definition was not found")
            return []
        try:
            return _top_posts_adapter.validate_python(json.loads(raw))
        except (ValueError, ValidationError) as e:
            raise MalformedDocument(f"Invalid top posts manifest: {e}", self.top_posts_key) from e
