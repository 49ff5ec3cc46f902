from dataclasses import dataclass

from fastapi import Depends, Request, Security
from fastapi.security import APIKeyHeader

from trackstar.config import USER_ID_HEADER
from trackstar.errors import Unauthenticated


@dataclass(frozen=True)
class Identity:
    user_id: str


class SessionResolver:
    """Turns an incoming request into an Identity or raises Unauthenticated."""

    def resolve(self, request: Request) -> Identity:
        raise NotImplementedError


class HeaderSessionResolver(SessionResolver):
    """
    Trusts the user id carried in a request header (x-user-id by default).
    Stand-in until a real auth provider is plugged in through create_app().
    """

    def __init__(self, header: str = USER_ID_HEADER):
        self.header = header

    def resolve(self, request: Request) -> Identity:
        user_id = (request.headers.get(self.header) or "").strip()
        if not user_id:
            raise Unauthenticated("User not authenticated")
        return Identity(user_id=user_id)


# Declares the header in the OpenAPI document; resolution itself is left to the resolver.
user_id_header = APIKeyHeader(
    name=USER_ID_HEADER,
    auto_error=False,
    description="User ID (temporary for testing)",
)


async def get_identity(request: Request, _: str | None = Security(user_id_header)) -> Identity:
    """
    FastAPI dependency — resolves the caller through the resolver that
    create_app() placed on app.state.
    Raises Unauthenticated (401) if no identity can be resolved.
    """
    resolver: SessionResolver = request.app.state.session_resolver
    return resolver.resolve(request)


async def get_current_user(identity: Identity = Depends(get_identity)) -> str:
    """FastAPI dependency — the resolved caller's user id."""
    return identity.user_id
