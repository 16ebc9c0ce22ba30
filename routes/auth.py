from fastapi import APIRouter, Request, HTTPException, Depends
from fastapi.responses import JSONResponse
import logging

import config
from stores import get_auth_store, SessionNotFound
from utils.cookies import get_cookie, delete_cookie

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/logout")
async def logout(request: Request, auth_store = Depends(get_auth_store)):
	"""Revoke the session in the session cookie and clear the cookie."""
	session_token = get_cookie(request, config.SESSION_COOKIE)
	if not session_token:
		return JSONResponse({"error": "No session token found"}, status_code=400)

	try:
		await auth_store.invalidate_session(session_token)
	except SessionNotFound:
		# already gone; logout stays idempotent
		logger.warning("Attempt to revoke non-existent session token")
	except Exception as e:
		logger.error(f"Failed to revoke session token: {e}", exc_info=True)
		raise HTTPException(status_code=500, detail="Failed to revoke session token")

	output = JSONResponse({"message": "Session revoked"})
	return delete_cookie(output, config.SESSION_COOKIE)
