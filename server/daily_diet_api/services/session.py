"""Anonymous per-browser session identity carried in a cookie."""
import logging
import uuid

from fastapi import HTTPException, Request, Response

from ..config import get_settings

logger = logging.getLogger(__name__)


def _set_session_cookie(response: Response, session_id: str) -> None:
    settings = get_settings()
    response.set_cookie(
        settings.session_cookie_name,
        session_id,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        max_age=settings.session_cookie_max_age,
        path="/",
    )


def read_session_id(request: Request) -> str | None:
    """Return the session id presented by the client, if any."""
    return request.cookies.get(get_settings().session_cookie_name) or None


def require_session_id(request: Request) -> str:
    """FastAPI dependency: the caller's session id, or 401 when there is none."""
    session_id = read_session_id(request)
    if not session_id:
        raise HTTPException(status_code=401, detail="Unauthorized.")
    return session_id


def ensure_session_id(request: Request, response: Response) -> str:
    """FastAPI dependency: the caller's session id, issuing a new one if absent."""
    session_id = read_session_id(request)
    if session_id:
        return session_id

    session_id = str(uuid.uuid4())
    _set_session_cookie(response, session_id)
    logger.info("[SESSION] Issued new session cookie")
    return session_id
