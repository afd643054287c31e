"""Guards — HTTP Basic authentication followed by an ACL check per route.

Invariants:
    - authenticate attaches AuthUser to request.state.user or raises 401
    - authorize(resource, action) raises 403 unless a role holds the grant
    - Credentials compared in constant time

Design Decisions:
    - Guards are plain FastAPI dependencies: tests swap `authenticate` through
      app.dependency_overrides instead of patching
"""

import logging
import secrets

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from app.config import Settings, get_settings
from app.core.acl import can
from app.core.domain_types import Action, AuthUser, Resource
from app.core.errors import ForbiddenError, UnauthorizedError

logger = logging.getLogger(__name__)
basic_scheme = HTTPBasic(auto_error=False)


async def authenticate(
    request: Request,
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
    settings: Settings = Depends(get_settings),
) -> AuthUser:
    """Validate Basic credentials against the configured account."""
    if credentials is None:
        raise UnauthorizedError()
    username_ok = secrets.compare_digest(
        credentials.username.encode(), settings.basic_auth_username.encode(),
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode(), settings.basic_auth_password.encode(),
    )
    if not (username_ok and password_ok):
        logger.warning(
            "Rejected credentials", extra={"path": request.url.path},
        )
        raise UnauthorizedError()
    user = AuthUser(credentials.username, tuple(settings.basic_auth_roles))
    request.state.user = user
    return user


def authorize(resource: Resource, action: Action):
    """Dependency factory: require `action` on `resource`."""

    async def check_grant(user: AuthUser = Depends(authenticate)) -> AuthUser:
        if not can(user.roles, resource, action):
            raise ForbiddenError(resource.value, action.value)
        return user

    return check_grant
