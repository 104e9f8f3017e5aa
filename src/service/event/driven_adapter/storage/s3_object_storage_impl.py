"""
S3-compatible object storage.

boto3 is blocking, so every call runs in a worker thread via anyio. Each
operation opens a manual span since there is no boto3 auto-instrumentation
in the stack.
"""

from datetime import datetime, timezone
import threading
from typing import Any, Optional

import anyio.to_thread
import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from opentelemetry import trace

from src.platform.config.core_setting import Settings, settings as default_settings
from src.platform.exception.exceptions import UploadFailureError
from src.platform.logging.loguru_io import Logger
from src.service.event.app.interface.i_object_storage import IObjectStorage


class S3ObjectStorageImpl(IObjectStorage):
    def __init__(self, *, config: Optional[Settings] = None, client: Any = None) -> None:
        self.config = config or default_settings
        self.bucket = self.config.STORAGE_BUCKET
        self._client = client
        self._client_lock = threading.Lock()
        self.tracer = trace.get_tracer(__name__)

    def _get_client(self) -> Any:
        # Client construction loads service models from disk, so it only runs in a worker thread
        with self._client_lock:
            if self._client is None:
                secret = self.config.STORAGE_SECRET_ACCESS_KEY
                self._client = boto3.client(
                    's3',
                    region_name=self.config.STORAGE_REGION,
                    endpoint_url=self.config.STORAGE_ENDPOINT_URL,
                    aws_access_key_id=self.config.STORAGE_ACCESS_KEY_ID,
                    aws_secret_access_key=secret.get_secret_value() if secret else None,
                    config=Config(signature_version=self.config.STORAGE_SIGNATURE_VERSION),
                )
            return self._client

    async def _call(self, operation: str, *args: Any, **kwargs: Any) -> Any:
        def invoke() -> Any:
            return getattr(self._get_client(), operation)(*args, **kwargs)

        return await anyio.to_thread.run_sync(invoke)

    @Logger.io
    async def store(
        self, *, path: str, data: bytes, content_type: str, public_read: bool = True
    ) -> None:
        params: dict[str, Any] = {
            'Bucket': self.bucket,
            'Key': path,
            'Body': data,
            'ContentType': content_type,
        }
        if public_read:
            params['ACL'] = 'public-read'

        with self.tracer.start_as_current_span(
            'object_storage.store',
            attributes={
                'storage.bucket': self.bucket,
                'storage.key': path,
                'storage.size': len(data),
            },
        ):
            try:
                await self._call('put_object', **params)
            except (ClientError, BotoCoreError) as e:
                raise UploadFailureError(f'Failed to store object {path}: {e}') from e

    @Logger.io
    async def mint_public_url(self, *, path: str, expires_at: datetime) -> str:
        if self.config.STORAGE_PUBLIC_BASE_URL:
            return f'{self.config.STORAGE_PUBLIC_BASE_URL.rstrip("/")}/{path}'

        expires_in = max(int((expires_at - datetime.now(timezone.utc)).total_seconds()), 1)

        with self.tracer.start_as_current_span(
            'object_storage.mint_public_url',
            attributes={'storage.bucket': self.bucket, 'storage.key': path},
        ):
            try:
                return await self._call(
                    'generate_presigned_url',
                    'get_object',
                    Params={'Bucket': self.bucket, 'Key': path},
                    ExpiresIn=expires_in,
                )
            except (ClientError, BotoCoreError) as e:
                raise UploadFailureError(f'Failed to mint URL for {path}: {e}') from e
