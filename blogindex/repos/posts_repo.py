import logging
from pathlib import Path
from typing import List

from blogindex.settings import settings

logger = logging.getLogger(__name__)


class FilesystemPostsRepo:
    """Markdown posts stored as files under ``content_dir/prefix``."""

    def __init__(self, content_dir: str | Path, prefix: str | None = None):
        self.content_dir = Path(content_dir)
        self.prefix = settings.POSTS_PREFIX if prefix is None else prefix

    def list_post_docs(self) -> List[dict]:
        posts_dir = self.content_dir / self.prefix
        if not posts_dir.is_dir():
            logger.warning(f"Posts directory {posts_dir} does not exist")
            return []

        docs = []
        for path in sorted(posts_dir.rglob("*.md")):
            rel_path = path.relative_to(self.content_dir).as_posix()
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Error reading {rel_path}: {e}")
                continue
            docs.append({"_id": rel_path, "path": rel_path, "content": content})
        return docs


class CouchPostsRepo:
    """Posts synced into CouchDB by the headless CMS."""

    def __init__(self, couch_db, prefix: str | None = None):
        self.db = couch_db
        self.prefix = settings.POSTS_PREFIX if prefix is None else prefix

    def list_post_docs(self) -> List[dict]:
        all_docs = [row.get("doc", row) for row in self.db.all(include_docs=True)]
        return [doc for doc in all_docs if self._is_valid(doc)]

    def _is_valid(self, doc: dict | None) -> bool:
        if not doc:
            return False
        path = doc.get("path", doc.get("_id", ""))
        return (
            doc.get("type") == "plain"
            and path.startswith(self.prefix)
            and path.endswith(".md")
            and not doc.get("deleted", False)
        )
