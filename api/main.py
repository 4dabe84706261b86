# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Description: main.py
# -----------------------------------------------------------------------------
import logging

from fastapi import FastAPI
from api.routers import health, stats, search, migrate

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
app = FastAPI(title="Question Vector Search API")
app.include_router(health.router)
app.include_router(stats.router)
app.include_router(search.router)
app.include_router(migrate.router)
