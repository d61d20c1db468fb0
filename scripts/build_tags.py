import logging
import sys

from blogindex.dependencies import get_posts_repo
from blogindex.services.posts_service import PostsService
from blogindex.services.site_builder import write_tag_pages
from blogindex.services.tag_index import TagIndexService
from blogindex.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    try:
        service = TagIndexService(PostsService(repo=get_posts_repo()))
        written = write_tag_pages(service, settings.OUTPUT_DIR)
        logger.info(f"Tag build completed: {len(written) - 1} tag pages.")
    except Exception as e:
        logger.error(f"Tag build failed: {e}", exc_info=True)
        sys.exit(1)
