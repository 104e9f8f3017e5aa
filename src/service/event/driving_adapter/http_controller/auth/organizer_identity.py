from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Cookie, Depends, Header

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import UnauthorizedError
from src.service.event.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


BEARER_PREFIX = 'bearer '


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX) :].strip() or None


@inject
async def get_current_organizer_id(
    authorization: Optional[str] = Header(None),
    cookie_token: Optional[str] = Cookie(None, alias=settings.AUTH_COOKIE_NAME),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> Optional[str]:
    """
    Resolve the caller's organizer id, or None when unauthenticated.

    Endpoints decide whether an identity is required; the use cases raise
    UnauthorizedError when they need one and get None.
    """
    token = extract_bearer_token(authorization) or cookie_token
    return jwt_auth.resolve_organizer_id(token)


async def require_organizer_id(
    organizer_id: Optional[str] = Depends(get_current_organizer_id),
) -> str:
    if not organizer_id:
        raise UnauthorizedError('Unauthorized')
    return organizer_id
