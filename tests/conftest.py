import textwrap

import pycouchdb

from blogindex.schemas.blog import Post


class FakeCouchDB:
    """
    Minimal in-memory CouchDB stand-in.
    Set track_calls=True to record the order of get() calls.
    """

    def __init__(self, docs: dict, track_calls: bool = False):
        self.docs = docs
        self.track_calls = track_calls
        self.calls = []

    def get(self, doc_id: str) -> dict:
        if self.track_calls:
            self.calls.append(doc_id)
        if doc_id not in self.docs:
            raise pycouchdb.exceptions.NotFound(doc_id)
        return self.docs[doc_id]

    def all(self, include_docs: bool = True):
        if self.track_calls:
            self.calls.append(f"all(include_docs={include_docs})")
        if include_docs:
            return [{"doc": doc} for doc in self.docs.values()]
        return list(self.docs.values())


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, docs):
        self.docs = docs

    def list_post_docs(self):
        return list(self.docs)


class FakeParser:
    """
    Minimal markdown/content parser stand-in.
    """

    def __init__(self, content_by_id: dict[str, str]):
        self.content_by_id = content_by_id

    def get_markdown_content(self, doc: dict) -> str | None:
        raw = self.content_by_id.get(doc.get("_id"))
        if raw is None:
            return None
        return textwrap.dedent(raw).lstrip()


class FakePostsService:
    """
    Posts service stand-in returning a fixed collection.
    """

    def __init__(self, posts=None):
        self.posts = posts or []
        self.calls = 0

    def list_posts(self):
        self.calls += 1
        return list(self.posts)


class FakeTagIndexService:
    """
    Tag index service stand-in for router tests.
    """

    def __init__(self, list_tags_return=None, get_tag_return=None):
        self._list_tags_return = list_tags_return or []
        self._get_tag_return = get_tag_return

    def list_tags(self):
        return self._list_tags_return

    def get_tag(self, tag: str):
        return self._get_tag_return


def make_post(slug: str, tags=None, added=None, **extra) -> Post:
    return Post(
        url=f"/posts/{slug}",
        slug=slug,
        title=slug.replace("-", " ").title(),
        tags=tags or [],
        added=added,
        **extra,
    )
