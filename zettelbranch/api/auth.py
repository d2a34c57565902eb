import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from zettelbranch.config import settings

security = HTTPBasic(auto_error=False)


def verify_credentials(
    credentials: HTTPBasicCredentials | None = Depends(security),  # noqa: B008
) -> str | None:
    """Verify basic auth credentials when auth is configured."""
    if not settings.auth_enabled:
        return None

    if credentials is None or not verify_basic_auth(credentials):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username


def verify_basic_auth(credentials: HTTPBasicCredentials) -> bool:
    """Verify basic auth credentials without raising exceptions."""
    is_correct_username = secrets.compare_digest(
        credentials.username.encode(), (settings.auth_username or "").encode()
    )
    is_correct_password = secrets.compare_digest(
        credentials.password.encode(), (settings.auth_password or "").encode()
    )
    return is_correct_username and is_correct_password
