import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .domain.admin.sessions import AdminSession, session_store
from .security_utils import mask_sensitive_data

logger = logging.getLogger(__name__)

# auto_error=False so a missing header is answered with our 401 body instead of a 403
security = HTTPBearer(auto_error=False)


def require_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AdminSession:
    """Allow the request only if it carries the token of the live admin session"""
    if not credentials:
        logger.warning(f"🔒 Missing bearer token for {request.method} {request.url.path}")
        raise HTTPException(status_code=401, detail="Unauthorized.")

    session = session_store.validate(credentials.credentials)
    if session is None:
        logger.warning(
            f"🔒 Rejected token {mask_sensitive_data(credentials.credentials)} for {request.method} {request.url.path}"
        )
        raise HTTPException(status_code=401, detail="Unauthorized.")

    return session
