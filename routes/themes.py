from fastapi import APIRouter, HTTPException

from models import Theme
from theme_catalog import list_themes, get_theme

router = APIRouter()


@router.get("/api/themes", response_model=list[Theme])
async def all_themes():
	"""Every theme, in display order. The first one is the default."""
	return list_themes()


@router.get("/api/themes/{name}", response_model=Theme)
async def theme_by_name(name: str):
	theme = get_theme(name)
	if theme is None:
		raise HTTPException(status_code=404, detail="Theme not found")
	return theme
