from typing import Optional
import uuid

import jwt

from .config import settings


def decode_owner_id(token: str) -> Optional[uuid.UUID]:
    """Return the owner id carried in the token's ``sub`` claim, or None."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.exceptions.PyJWTError:
        return None

    subject = payload.get("sub")
    if subject is None:
        return None
    try:
        return uuid.UUID(str(subject))
    except ValueError:
        return None
