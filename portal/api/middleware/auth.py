"""JWT authentication for mutating API requests.

The token subject is the caller identity passed to the registry, which
compares it with the owner. Authentication failures are 401; a valid
token for someone other than the owner is rejected later with 403.
"""

import os
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import ValidationError

from portal.api.models.context import CallerContext
from portal.observability.logging import get_logger

logger = get_logger(__name__)

security_scheme = HTTPBearer(auto_error=False)


def get_jwt_secret() -> str:
    """Get JWT secret from environment."""
    secret = os.environ.get("PORTAL_JWT_SECRET")
    if not secret:
        raise RuntimeError("PORTAL_JWT_SECRET environment variable not set")
    return secret


def get_jwt_algorithm() -> str:
    """Get JWT algorithm from environment."""
    return os.environ.get("PORTAL_JWT_ALGORITHM", "HS256")


def _unauthenticated(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_caller_context(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security_scheme)],
) -> CallerContext:
    """Extract the caller identity from the bearer token.

    Raises:
        HTTPException: 401 if the token is missing, invalid, expired or
            has no subject
    """
    if credentials is None:
        logger.warning("auth_missing_token", path=request.url.path)
        raise _unauthenticated("Missing authentication token")

    try:
        payload = jwt.decode(
            credentials.credentials,
            get_jwt_secret(),
            algorithms=[get_jwt_algorithm()],
        )
        subject = payload.get("sub")
        if not subject:
            logger.warning("auth_missing_subject", path=request.url.path)
            raise _unauthenticated("Token missing sub claim")

        context = CallerContext(caller=subject)
        logger.debug("auth_success", caller=context.caller)
        return context

    except JWTError as e:
        logger.warning("auth_jwt_error", error=str(e), path=request.url.path)
        raise _unauthenticated("Invalid or expired token") from None
    except ValidationError as e:
        logger.warning("auth_validation_error", error=str(e), path=request.url.path)
        raise _unauthenticated("Invalid token claims") from None


CallerContextDep = Annotated[CallerContext, Depends(get_caller_context)]
