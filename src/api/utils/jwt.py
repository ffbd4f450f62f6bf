from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(
    subject: str,
    email: str,
    given_name: Optional[str] = None,
    family_name: Optional[str] = None,
    picture: Optional[str] = None,
    expires_delta: timedelta = timedelta(minutes=15),
) -> str:
    """
    Generate a caller JWT as the identity provider issues it

    The service never issues tokens itself; this mints them for tests and
    local development against the shared JWT secret.

    Args:
        subject: Identity-provider user id
        email: Primary email address
        given_name: First name, if known
        family_name: Last name, if known
        picture: Avatar URL, if known
        expires_delta: Token lifetime

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    payload = {
        "sub": subject,
        "email": email,
        "exp": now + expires_delta,
        "iat": now,
    }
    if given_name is not None:
        payload["given_name"] = given_name
    if family_name is not None:
        payload["family_name"] = family_name
    if picture is not None:
        payload["picture"] = picture
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
