from abc import ABC, abstractmethod
from datetime import datetime


class IObjectStorage(ABC):
    """Binary object store. Implementations raise UploadFailureError on any provider error."""

    @abstractmethod
    async def store(
        self, *, path: str, data: bytes, content_type: str, public_read: bool = True
    ) -> None:
        pass

    @abstractmethod
    async def mint_public_url(self, *, path: str, expires_at: datetime) -> str:
        pass
