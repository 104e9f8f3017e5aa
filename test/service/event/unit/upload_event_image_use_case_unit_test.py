"""
Unit tests for UploadEventImageUseCase

Object path layout, image-only guard, and failure translation.
"""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from src.platform.exception.exceptions import (
    UnauthorizedError,
    UploadFailureError,
    ValidationFailureError,
)
from src.service.event.app.command.upload_event_image_use_case import UploadEventImageUseCase
from src.service.event.domain.value_object.uploaded_image import UploadedImage


USE_CASE_MODULE = 'src.service.event.app.command.upload_event_image_use_case'


@pytest.mark.unit
class TestBuildObjectPath:
    def test_category_timestamp_and_filename(self) -> None:
        path = UploadEventImageUseCase.build_object_path(
            category='event', filename='poster.png', timestamp_ms=1714000000000
        )
        assert path == 'event/1714000000000-poster.png'

    @pytest.mark.parametrize(
        'filename',
        ['../../etc/poster.png', 'C:\\Users\\me\\poster.png', 'nested/dir/poster.png'],
    )
    def test_directories_in_filename_are_dropped(self, filename: str) -> None:
        path = UploadEventImageUseCase.build_object_path(
            category='event', filename=filename, timestamp_ms=1
        )
        assert path == 'event/1-poster.png'


@pytest.mark.unit
class TestAttachImage:
    @pytest.fixture
    def use_case(self, object_storage) -> UploadEventImageUseCase:
        return UploadEventImageUseCase(object_storage=object_storage)

    @pytest.mark.asyncio
    async def test_png_is_stored_public_and_url_returned(self, use_case, object_storage) -> None:
        image = UploadedImage(content=b'\x89PNG-bytes', content_type='image/png', filename='a.png')

        with patch(f'{USE_CASE_MODULE}.time.time', return_value=1714000000.123):
            url = await use_case.attach(image=image)

        assert object_storage.stored == [
            {
                'path': 'event/1714000000123-a.png',
                'data': b'\x89PNG-bytes',
                'content_type': 'image/png',
                'public_read': True,
            }
        ]
        assert url == 'https://cdn.test/event/1714000000123-a.png'

    @pytest.mark.asyncio
    async def test_url_expires_at_configured_far_future(self, use_case, object_storage) -> None:
        image = UploadedImage(content=b'x', content_type='image/jpeg', filename='b.jpg')

        await use_case.attach(image=image)

        assert object_storage.minted[0]['expires_at'] == datetime(2030, 3, 1, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_custom_category_prefix(self, use_case, object_storage) -> None:
        image = UploadedImage(content=b'x', content_type='image/gif', filename='c.gif')

        await use_case.attach(image=image, category='banner')

        assert object_storage.stored[0]['path'].startswith('banner/')

    @pytest.mark.asyncio
    async def test_no_payload_returns_empty_reference(self, use_case, object_storage) -> None:
        assert await use_case.attach(image=None) == ''
        assert object_storage.stored == []

    @pytest.mark.asyncio
    async def test_zero_byte_image_returns_empty_reference(self, use_case, object_storage) -> None:
        image = UploadedImage(content=b'', content_type='image/png', filename='empty.png')

        assert await use_case.attach(image=image) == ''
        assert object_storage.stored == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize('content_type', ['application/pdf', 'text/plain', '', 'IMAGE/png'])
    async def test_non_image_rejected_before_storage(
        self, use_case, object_storage, content_type: str
    ) -> None:
        doc = UploadedImage(content=b'%PDF-1.4', content_type=content_type, filename='doc.pdf')

        with pytest.raises(ValidationFailureError, match='Only image files are allowed!'):
            await use_case.attach(image=doc)

        assert object_storage.stored == []
        assert object_storage.minted == []

    @pytest.mark.asyncio
    async def test_store_failure_surfaces_as_upload_failure(self, failing_store_storage) -> None:
        use_case = UploadEventImageUseCase(object_storage=failing_store_storage)
        image = UploadedImage(content=b'x', content_type='image/png', filename='a.png')

        with pytest.raises(UploadFailureError, match='bucket unavailable'):
            await use_case.attach(image=image)

    @pytest.mark.asyncio
    async def test_unexpected_mint_error_wrapped_with_message(self, failing_mint_storage) -> None:
        use_case = UploadEventImageUseCase(object_storage=failing_mint_storage)
        image = UploadedImage(content=b'x', content_type='image/png', filename='a.png')

        with pytest.raises(UploadFailureError, match='signer exploded'):
            await use_case.attach(image=image)

    @pytest.mark.asyncio
    async def test_each_call_writes_a_new_object(self, use_case, object_storage) -> None:
        image = UploadedImage(content=b'same', content_type='image/png', filename='a.png')

        with patch(f'{USE_CASE_MODULE}.time.time', return_value=1.0):
            first = await use_case.attach(image=image)
        with patch(f'{USE_CASE_MODULE}.time.time', return_value=2.0):
            second = await use_case.attach(image=image)

        assert first != second
        assert len(object_storage.stored) == 2


@pytest.mark.unit
class TestStandaloneUpload:
    @pytest.mark.asyncio
    async def test_requires_identity(self, object_storage) -> None:
        use_case = UploadEventImageUseCase(object_storage=object_storage)
        image = UploadedImage(content=b'x', content_type='image/png', filename='a.png')

        with pytest.raises(UnauthorizedError):
            await use_case.upload(organizer_id=None, image=image)

        assert object_storage.stored == []

    @pytest.mark.asyncio
    async def test_returns_minted_url(self, object_storage) -> None:
        use_case = UploadEventImageUseCase(object_storage=object_storage)
        image = UploadedImage(content=b'x', content_type='image/webp', filename='w.webp')

        url = await use_case.upload(organizer_id='org-1', image=image)

        assert url.startswith('https://cdn.test/event/')
        assert url.endswith('-w.webp')
