"""HTTP route modules (FastAPI routers) for the application.

This file explicitly exports the router objects provided by each
submodule so callers can do:

	from routes import home_router
	app.include_router(home_router)

Submodules should expose an `APIRouter` named `router`.
"""

from .home import router as home_router
from .themes import router as themes_router
from .auth import router as auth_router

__all__ = [
	"home_router",
	"themes_router",
	"auth_router",
]
