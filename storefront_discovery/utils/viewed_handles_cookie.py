"""
Viewed-handles cookie — signed, client-held token for the recently-viewed list.

The token is an HS256 JWT whose ``handles`` claim carries the list. The
first secret signs; every configured secret verifies, so secrets can be
rotated without logging visitors out of their history.

The codec only encodes/decodes. Dedup, ordering and the length bound are
enforced by the history service.
"""
import logging
from typing import List, Optional, Sequence

from fastapi import Request, Response
from jose import JWTError, jwt

from storefront_discovery.core.constants.history import (
    HISTORY_COOKIE_MAX_AGE,
    HISTORY_COOKIE_NAME,
    MAX_COOKIE_VALUE_BYTES,
)

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class ViewedHandlesCookie:
    """Encode/decode the recently-viewed token and attach it to responses."""

    def __init__(
        self,
        secrets: Sequence[str],
        name: str = HISTORY_COOKIE_NAME,
        max_age: int = HISTORY_COOKIE_MAX_AGE,
        secure: bool = True,
    ) -> None:
        if not secrets:
            raise ValueError("at least one cookie secret is required")
        self._secrets = list(secrets)
        self.name = name
        self.max_age = max_age
        self.secure = secure

    def encode(self, handles: Sequence[str]) -> str:
        return jwt.encode({"handles": list(handles)}, self._secrets[0], algorithm=ALGORITHM)

    def decode(self, token: Optional[str]) -> List[str]:
        """Return the handle list carried by ``token``.

        A missing, malformed or badly signed token yields an empty list.
        """
        if not token:
            return []

        for secret in self._secrets:
            try:
                claims = jwt.decode(token, secret, algorithms=[ALGORITHM])
            except JWTError:
                continue
            handles = claims.get("handles")
            if not isinstance(handles, list):
                return []
            return [item for item in handles if isinstance(item, str)]

        logger.warning("viewed-handles token failed verification, ignoring")
        return []

    def fit(self, handles: Sequence[str]) -> List[str]:
        """Longest prefix of ``handles`` whose token stays within the cookie size limit."""
        kept = list(handles)
        while kept and len(self.encode(kept)) > MAX_COOKIE_VALUE_BYTES:
            kept.pop()
        if len(kept) < len(handles):
            logger.info(f"viewed-handles trimmed to fit cookie: {len(handles)} -> {len(kept)}")
        return kept

    def read(self, request: Request) -> List[str]:
        return self.decode(request.cookies.get(self.name))

    def write(self, response: Response, handles: Sequence[str]) -> None:
        response.set_cookie(
            key=self.name,
            value=self.encode(handles),
            max_age=self.max_age,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )
