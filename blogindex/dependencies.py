from fastapi import Depends

from blogindex.db.couchdb import get_couch
from blogindex.repos.posts_repo import CouchPostsRepo, FilesystemPostsRepo
from blogindex.services.posts_service import PostsService
from blogindex.services.tag_index import TagIndexService
from blogindex.settings import settings


def get_posts_repo():
    if settings.CONTENT_SOURCE == "couchdb":
        couch_db, _parser = get_couch()
        return CouchPostsRepo(couch_db)
    return FilesystemPostsRepo(settings.CONTENT_DIR)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)


def get_tag_index_service(posts_service=Depends(get_posts_service)):
    return TagIndexService(posts_service)
