"""Per-request caller identity."""

from dataclasses import dataclass
from typing import Optional

from errors import NotAuthenticated


@dataclass(frozen=True)
class RequestContext:
    """Identity of the caller for a single request.

    The user id is trusted as-is. It is the only tenancy boundary: every
    query and every ownership check is keyed by it.
    """

    user_id: Optional[int]


def require_user(ctx: Optional[RequestContext]) -> int:
    """Return the caller's user id, or raise if there is none.

    Raises:
        NotAuthenticated: If ctx is missing or carries no user id.
    """
    if ctx is None or ctx.user_id is None:
        raise NotAuthenticated("Authentication required")
    return ctx.user_id


def authenticate(services, user_name: Optional[str]) -> RequestContext:
    """Resolve a registered user name into a RequestContext.

    Args:
        services: Services container with a users service.
        user_name: Name supplied by the caller.

    Raises:
        NotAuthenticated: If no name is given or no such user is registered.
    """
    if not user_name:
        raise NotAuthenticated("No user given. Pass --user or set default_user.")

    user = services.users.find_by_name(user_name)
    if user is None:
        raise NotAuthenticated(f"Unknown user '{user_name}'")
    return RequestContext(user_id=user.id)
