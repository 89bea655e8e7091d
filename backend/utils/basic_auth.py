# utils/basic_auth.py
import logging
import secrets
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from config import settings

logger = logging.getLogger(__name__)

REALM = 'Basic realm="Restricted Area"'

# auto_error=False so a missing header gets our own message and challenge
basic_scheme = HTTPBasic(auto_error=False)


def _challenge(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": REALM},
    )


def _matches(given: str, expected: str) -> bool:
    return secrets.compare_digest(given.encode("utf8"), expected.encode("utf8"))


# Check the static credential pair sent with every request
def require_basic_auth(
    request: Request,
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_scheme),
) -> str:
    if credentials is None:
        raise _challenge("Authentication required.")

    user_ok = _matches(credentials.username, settings.BASIC_AUTH_USER)
    pass_ok = _matches(credentials.password, settings.BASIC_AUTH_PASS)
    if not (user_ok and pass_ok):
        client = request.client.host if request.client else None
        logger.warning("Rejected credentials for user %r from %s", credentials.username, client)
        raise _challenge("Invalid credentials.")
    return credentials.username
