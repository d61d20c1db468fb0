import logging

import pycouchdb

logger = logging.getLogger(__name__)


class ContentParser:
    def __init__(self, db=None):
        self.db = db

    def get_markdown_content(self, doc: dict) -> str:
        """Get the full markdown content from a document (decoded as text)."""
        raw = self._get_raw_content(doc)
        if isinstance(raw, bytes):
            # If somehow bytes slipped in, decode to string
            return raw.decode("utf-8", errors="ignore")
        return raw or ""

    def _get_raw_content(self, doc: dict) -> str | bytes | None:
        """Direct body first, otherwise reconstruct from leaf children."""
        for key in ("content", "data"):
            if key in doc:
                return doc[key]

        children = doc.get("children")
        if not children or self.db is None:
            return None

        parts = []
        for c in children:
            try:
                child_doc = self.db.get(c)
                if child_doc.get("type") == "leaf" and "data" in child_doc:
                    data = child_doc["data"]
                    if isinstance(data, bytes):
                        data = data.decode("utf-8", errors="ignore")
                    parts.append(data)
            except pycouchdb.exceptions.NotFound:
                continue
            except Exception as e:
                logger.error(f"Error fetching child {c}: {e}")

        return "".join(parts) if parts else None
