"""Event Domain Value Objects"""

from src.service.event.domain.value_object.location import Location
from src.service.event.domain.value_object.uploaded_image import UploadedImage

__all__ = ['Location', 'UploadedImage']
