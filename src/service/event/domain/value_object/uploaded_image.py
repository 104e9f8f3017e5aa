import attrs


IMAGE_CONTENT_TYPE_PREFIX = 'image/'


@attrs.frozen
class UploadedImage:
    """Binary received with a request; becomes at most one storage object."""

    content: bytes = attrs.field(repr=False)
    content_type: str
    filename: str

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def is_empty(self) -> bool:
        return not self.content

    @property
    def is_image(self) -> bool:
        return (self.content_type or '').startswith(IMAGE_CONTENT_TYPE_PREFIX)
