"""Caller identity resolution from API Gateway authorizer context.

The hosting platform authenticates callers; this module only reads the
identity it attached to the proxy event.
"""

from typing import Any

from core.models.errors import UnauthorizedError


def _clean(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def resolve_caller_id(event: dict[str, Any]) -> str | None:
    """Return the authenticated caller id, or None when unauthenticated.

    Looks up, in order:
    - ``principalId`` set by a Lambda authorizer
    - ``claims.sub`` set by a Cognito user pool authorizer
    - ``jwt.claims.sub`` set by an HTTP API JWT authorizer
    """
    request_context = event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}

    if not isinstance(authorizer, dict):
        return None

    principal_id = _clean(authorizer.get("principalId"))
    if principal_id:
        return principal_id

    claims = authorizer.get("claims") or {}
    if isinstance(claims, dict) and _clean(claims.get("sub")):
        return _clean(claims.get("sub"))

    jwt = authorizer.get("jwt") or {}
    jwt_claims = jwt.get("claims") if isinstance(jwt, dict) else None
    if isinstance(jwt_claims, dict):
        return _clean(jwt_claims.get("sub"))

    return None


def get_header(event: dict[str, Any], name: str) -> str | None:
    """Case-insensitive header lookup on an API Gateway proxy event."""
    headers = event.get("headers") or {}
    wanted = name.lower()

    for key, value in headers.items():
        if isinstance(key, str) and key.lower() == wanted:
            return value if isinstance(value, str) else None

    return None


def require_caller_id(event: dict[str, Any]) -> str:
    """Return the authenticated caller id.

    Raises:
        UnauthorizedError: If the event carries no caller identity
    """
    user_id = resolve_caller_id(event)
    if not user_id:
        raise UnauthorizedError()

    return user_id
