"""Bearer session resolution: turns a request into an explicit Identity."""

from fastapi import Request

from actionscribe.domain.errors import Unauthorized
from actionscribe.ports.inbound import Identity


def resolve_identity(request: Request) -> Identity:
    """FastAPI dependency: map ``Authorization: Bearer <token>`` to an Identity."""
    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        raise Unauthorized("Missing or invalid authorization header")
    token = auth_header[len("Bearer "):].strip()
    email = request.app.state.config.auth.session_tokens.get(token)
    if not email:
        raise Unauthorized("Invalid session token")
    return Identity(email=email)
