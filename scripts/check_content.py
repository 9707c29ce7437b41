import asyncio
import logging
import sys

from albertonet.dependencies import build_document_store
from albertonet.services.posts_service import PostsService
from albertonet.settings import settings

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


async def check_content() -> int:
    service = PostsService(store=build_document_store(settings))
    report = await service.get_posts_report()
    top_posts = await service.get_top_posts()

    for post in report.posts:
        logger.info(f"ok {post.slug} ({post.publicationDate})")
    for failure in report.failures:
        logger.error(f"broken {failure.path}: {failure.reason}")
    logger.info(
        f"{len(report.posts)} posts, {len(report.failures)} broken, "
        f"{len(top_posts)} top posts"
    )
    return 1 if report.failures else 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(check_content()))
    except Exception as e:
        logger.error(f"Content check failed: {e}", exc_info=True)
        sys.exit(2)
