"""
Upload Event Image Use Case

Turns an uploaded binary into a durable, publicly resolvable reference:
1. Reject non-image payloads before touching storage (no side effects)
2. Store the bytes under `{category}/{timestamp_ms}-{filename}` with public-read ACL
3. Mint a far-future URL for the stored object

Not idempotent: every call writes a new object, even for identical bytes.
"""

from pathlib import PurePosixPath
import time
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import (
    UnauthorizedError,
    UploadFailureError,
    ValidationFailureError,
)
from src.platform.logging.loguru_io import Logger
from src.service.event.app.interface.i_object_storage import IObjectStorage
from src.service.event.domain.value_object.uploaded_image import UploadedImage


class UploadEventImageUseCase:
    def __init__(self, object_storage: IObjectStorage) -> None:
        self.object_storage = object_storage

    @classmethod
    @inject
    def depends(
        cls,
        object_storage: IObjectStorage = Depends(Provide[Container.object_storage]),
    ) -> Self:
        return cls(object_storage=object_storage)

    @staticmethod
    def build_object_path(*, category: str, filename: str, timestamp_ms: int) -> str:
        # Client-supplied names may carry directories; keep the basename only
        safe_name = PurePosixPath(filename.replace('\\', '/')).name or 'upload'
        return f'{category}/{timestamp_ms}-{safe_name}'

    @Logger.io
    async def upload(self, *, organizer_id: Optional[str], image: Optional[UploadedImage]) -> str:
        """Standalone upload endpoint: caller must be an authenticated organizer."""
        if not organizer_id:
            raise UnauthorizedError('Unauthorized')
        return await self.attach(image=image)

    @Logger.io
    async def attach(
        self, *, image: Optional[UploadedImage], category: Optional[str] = None
    ) -> str:
        """
        Returns the minted URL, or '' when no payload was supplied.

        Raises:
            ValidationFailureError: content type is not image/*
            UploadFailureError: storage write or URL mint failed
        """
        if image is None:
            return ''

        if not image.is_image:
            raise ValidationFailureError('Only image files are allowed!')

        if image.is_empty:
            return ''

        path = self.build_object_path(
            category=category or settings.EVENT_IMAGE_CATEGORY,
            filename=image.filename,
            timestamp_ms=int(time.time() * 1000),
        )

        Logger.base.info(f'📤 [UPLOAD_IMAGE] Uploading {image.size} bytes to {path}')
        try:
            await self.object_storage.store(
                path=path,
                data=image.content,
                content_type=image.content_type,
                public_read=True,
            )
            url = await self.object_storage.mint_public_url(
                path=path, expires_at=settings.STORAGE_URL_EXPIRES_AT
            )
        except UploadFailureError:
            raise
        except Exception as e:
            raise UploadFailureError(f'Failed to upload image: {e}') from e

        Logger.base.info(f'✅ [UPLOAD_IMAGE] Stored {path}')
        return url
