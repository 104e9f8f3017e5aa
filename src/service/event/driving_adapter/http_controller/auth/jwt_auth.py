"""
Organizer token codec.

Tokens are issued by the upstream account service; this service only needs to
read the organizer id back out of them.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def create_jwt_token(self, *, organizer_id: str, **claims: object) -> str:
        payload = {
            'sub': organizer_id,
            'exp': datetime.now(timezone.utc) + timedelta(minutes=self.token_expire_minutes),
            'iat': datetime.now(timezone.utc),
            'organizer_id': organizer_id,
            **claims,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Optional[Dict]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            Logger.base.warning(f'🔒 [AUTH] Rejected token: {e}')
            return None

    def resolve_organizer_id(self, token: Optional[str]) -> Optional[str]:
        """Absent, expired or tampered tokens all resolve to no identity."""
        if not token:
            return None

        payload = self.decode_jwt_token(token)
        if payload is None:
            return None

        organizer_id = payload.get('organizer_id') or payload.get('sub')
        return str(organizer_id) if organizer_id else None
