"""
HTTP Basic authentication for the API.

The API accepts a single credential pair taken from the application
settings and grants it one static role, ``USER``.  Credentials are
compared in constant time.  The settings are read from
``request.app.state`` so that every application instance (for example
one per test) authenticates against its own configuration.
"""

import hmac
import logging
from typing import Callable, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

logger = logging.getLogger(__name__)

USER_ROLE = "USER"

security = HTTPBasic(auto_error=False)


def _matches(given: str, expected: str) -> bool:
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def get_current_user(
    request: Request,
    credentials: Optional[HTTPBasicCredentials] = Depends(security),
) -> Dict[str, str]:
    """Dependency that authenticates the request.

    Raises HTTP 401 with a ``WWW-Authenticate: Basic`` challenge when
    the ``Authorization`` header is missing or the credentials do not
    match.  On success returns a small principal dictionary.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Basic"},
        )
    settings = request.app.state.settings
    # Evaluate both comparisons so timing does not reveal which one failed.
    username_ok = _matches(credentials.username, settings.auth_username)
    password_ok = _matches(credentials.password, settings.auth_password)
    if not (username_ok and password_ok):
        logger.warning("Rejected credentials for user '%s'", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return {"sub": credentials.username, "role": USER_ROLE}


def require_roles(*roles: str) -> Callable[..., Dict[str, str]]:
    """Dependency factory to enforce that the current user has one of ``roles``.

    Use it in routers via ``Depends(require_roles(USER_ROLE))``.  If the
    authenticated principal does not carry one of the given roles an
    HTTP 403 error is raised.
    """

    def _role_dependency(current_user: Dict[str, str] = Depends(get_current_user)) -> Dict[str, str]:
        if current_user.get("role") not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user

    return _role_dependency
