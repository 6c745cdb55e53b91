from dataclasses import dataclass

from fastapi import Request

from app.core.security import decode_access_token


@dataclass(frozen=True)
class CurrentUser:
    id: int
    email: str


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("authorization")
    if not header:
        return None
    parts = header.split(" ", 1)
    if len(parts) != 2 or not parts[1].strip():
        return None
    return parts[1].strip()


def get_current_user(request: Request) -> CurrentUser:
    """Resolve the caller from the bearer token without touching the database."""
    claims = decode_access_token(_bearer_token(request))
    return CurrentUser(id=claims["id"], email=claims["email"])
