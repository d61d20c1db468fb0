import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from blogindex import dependencies as deps
from blogindex.schemas.blog import TagPage, TagSummary
from blogindex.services.tag_index import TagIndexService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tags", response_model=List[TagSummary])
def list_tags(service: TagIndexService = Depends(deps.get_tag_index_service)):
    """List every tag with its page route and post count."""
    try:
        return service.list_tags()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")


@router.get("/tags/{tag:path}", response_model=TagPage)
def get_tag(
    tag: str,
    service: TagIndexService = Depends(deps.get_tag_index_service),
):
    """Get the posts for one tag, most recently added first."""
    try:
        page = service.get_tag(tag)
        if not page:
            raise HTTPException(status_code=404, detail="Tag not found")
        return page
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving tag {tag}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tag")
