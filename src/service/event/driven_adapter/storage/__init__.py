from src.service.event.driven_adapter.storage.s3_object_storage_impl import S3ObjectStorageImpl

__all__ = ['S3ObjectStorageImpl']
