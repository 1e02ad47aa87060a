from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig

ONE_YEAR = timedelta(days=365)


@dataclass(frozen=True)
class SessionClaims:
    open_id: str
    name: str
    expires_at: datetime


def issue_session_token(open_id: str, name: str, expires_in: timedelta = ONE_YEAR) -> str:
    """
    Generate a signed session token

    Args:
        open_id: Identity key of the signed-in user
        name: Display name, informational only
        expires_in: Token lifetime

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    payload = {
        "sub": open_id,
        "name": name,
        "exp": now + expires_in,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_session_token(token: Optional[str]) -> Optional[SessionClaims]:
    """
    Verify and decode a session token

    Malformed, tampered, expired and subject-less tokens all yield None.
    """
    if not token:
        return None
    try:
        payload = jwt.decode(token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"])
    except JWTError:
        return None

    open_id = payload.get("sub")
    if not isinstance(open_id, str) or not open_id:
        return None

    return SessionClaims(
        open_id=open_id,
        name=payload.get("name") or "",
        expires_at=datetime.fromtimestamp(payload["exp"], UTC),
    )
