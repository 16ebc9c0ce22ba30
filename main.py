from contextlib import asynccontextmanager
from pathlib import Path
import logging

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

import config
import stores
from routes import home_router, themes_router, auth_router
from services import create_scheduler

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app):
    """Open the stores and start the session cleanup job for the app's lifetime."""
    await stores.init_stores(config.DB_PATH)
    scheduler = create_scheduler(stores.get_auth_store())
    scheduler.start()
    logger.info(f"Stores ready at {config.DB_PATH}")
    try:
        yield
    finally:
        scheduler.shutdown()
        await stores.close_stores()


# --- FastAPI setup ---
app = FastAPI(lifespan=lifespan)

# --- Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["POST", "GET"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


# --- HTML Homepage ---
@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/static/index.html")


# --- Register routes ---
app.include_router(home_router)
app.include_router(themes_router)
app.include_router(auth_router)
