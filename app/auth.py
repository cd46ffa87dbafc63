"""API key check for quest endpoints."""

from fastapi import HTTPException, Header

from app.config import settings


def _presented_key(x_api_key: str | None, authorization: str | None) -> str | None:
    if x_api_key is not None:
        return x_api_key
    if authorization and authorization.startswith("Bearer "):
        return authorization[len("Bearer "):].strip()
    return None


async def verify_api_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    authorization: str | None = Header(default=None),
) -> str:
    """Accept the key from X-API-Key or Authorization: Bearer.

    With QUEST_API_KEY unset every request passes; once set, a missing or
    wrong key is a 401.
    """
    expected = settings.quest_api_key
    if expected is None:
        return ""

    key = _presented_key(x_api_key, authorization)
    if key != expected:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
    return key
