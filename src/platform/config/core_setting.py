from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Event Lifecycle Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    ALGORITHM: str = 'HS256'
    AUTH_COOKIE_NAME: str = 'fastapiusersauth'

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'event_lifecycle'

    # Connection pool
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30  # seconds
    DB_POOL_RECYCLE: int = 3600  # seconds
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # Object storage (S3 compatible)
    STORAGE_BUCKET: str = 'event-media'
    STORAGE_REGION: str = 'us-west-2'
    STORAGE_ENDPOINT_URL: Optional[str] = None  # e.g. http://localhost:9000 for MinIO
    STORAGE_ACCESS_KEY_ID: Optional[str] = None
    STORAGE_SECRET_ACCESS_KEY: Optional[SecretStr] = None
    # SigV2 ('s3') presigned URLs are not capped at 7 days like 's3v4'
    STORAGE_SIGNATURE_VERSION: str = 's3'
    # When set, minted URLs are '{base}/{path}' (public-read bucket or CDN) instead of presigned
    STORAGE_PUBLIC_BASE_URL: Optional[str] = None
    STORAGE_URL_EXPIRES_AT: datetime = datetime(2030, 3, 1, tzinfo=timezone.utc)

    # Event lifecycle
    EVENT_IMAGE_CATEGORY: str = 'event'
    EVENT_STATUS_STRICT: bool = False  # Reject unknown status labels when True


settings = Settings()  # type: ignore
