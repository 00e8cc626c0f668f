from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from .config import load_identities

bearer_scheme = HTTPBearer(auto_error=False)


class Identity(BaseModel):
    """The caller a request was authenticated as."""
    name: str
    is_admin: bool = False


def get_identities() -> dict[str, Identity]:
    """Token → identity lookup, read from the identity registry."""
    return {
        record.token: Identity(name=record.name, is_admin=record.is_admin)
        for record in load_identities()
    }


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    identities: dict[str, Identity] = Depends(get_identities),
) -> Identity:
    """FastAPI dependency: resolve the caller or fail with 401."""
    if credentials is None:
        raise HTTPException(status_code=401, detail="401 Unauthorized!")
    identity = identities.get(credentials.credentials)
    if identity is None:
        raise HTTPException(status_code=401, detail="401 Unauthorized!")
    return identity


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    """FastAPI dependency: the caller must be an admin, else 403."""
    if not identity.is_admin:
        raise HTTPException(status_code=403, detail="403 Forbidden!")
    return identity
