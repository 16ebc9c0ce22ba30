from fastapi import APIRouter, Request, Depends
from fastapi.responses import JSONResponse
import logging

from services import load_page_data
from stores import get_results_store, get_auth_store
from utils.cookies import resolve_identity, read_visitation_marker, mark_visited

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/home")
async def home_page_data(request: Request, results_store = Depends(get_results_store), auth_store = Depends(get_auth_store)):
	"""Tutorial flag and usage stats for the home page. Always 200."""
	identity = await resolve_identity(request, auth_store)
	page_data = await load_page_data(identity, results_store)

	output = JSONResponse(page_data.model_dump())
	# first visit on this browser: remember it for later anonymous visits
	if read_visitation_marker(request) is None:
		output = mark_visited(output)
	return output
