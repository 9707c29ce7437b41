import logging

from fastapi import Depends, FastAPI

from albertonet.routers import posts, site
from albertonet.security import get_api_key
from albertonet.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="albertonet API", description="Blog, projects and contact for albertonet")

app.include_router(posts.router, dependencies=[Depends(get_api_key)])
app.include_router(site.router, dependencies=[Depends(get_api_key)])

logger.info(f"Serving content from the {settings.STORAGE_BACKEND} backend")


@app.get("/")
async def root():
    return {"message": "albertonet API is running"}
