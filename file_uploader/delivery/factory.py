from pathlib import Path

from file_uploader.config.settings import Settings
from file_uploader.delivery.base import BaseBlobDelivery
from file_uploader.delivery.directory_adapter import DirectoryDelivery
from file_uploader.delivery.memory_adapter import MemoryDelivery


class DeliveryFactory:
    """Creates the blob delivery adapter based on settings."""

    @classmethod
    def create(cls, settings: Settings) -> BaseBlobDelivery:
        target = settings.delivery_target.lower()
        if target == "directory":
            return DirectoryDelivery(Path(settings.download_dir))
        if target == "memory":
            return MemoryDelivery()
        raise ValueError(
            f"Unknown delivery target '{target}'. Choose from: ['directory', 'memory']"
        )
