import logging

from fastapi import FastAPI

from blogindex.routers import tags
from blogindex.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog Tag Index", description="Posts grouped by tag, newest first")

app.include_router(tags.router)


@app.get("/")
async def root():
    return {"message": "Blog Tag Index is running"}
