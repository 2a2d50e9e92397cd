import logging

from fastapi import FastAPI

from .api.routes import router as api_router
from .config import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="Texas Jurisdiction Lookup")
app.include_router(api_router)
