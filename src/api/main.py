import logging
import os

from fastapi import FastAPI

from api.routers import ops, parse, tasks

# Logging configuration
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="quick-add-parser")
app.include_router(parse.router)
app.include_router(tasks.router)
app.include_router(ops.router)

logger.info("Quick-add API ready")
