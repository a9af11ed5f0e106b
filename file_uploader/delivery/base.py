from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Blob:
    """A named, typed chunk of bytes to hand to the user."""

    filename: str
    content: bytes
    mime_type: str


class BaseBlobDelivery(ABC):
    """Contract for delivering downloaded bytes and links to the user."""

    @abstractmethod
    def deliver(self, blob: Blob) -> str:
        """Deliver a blob to the user.

        Returns:
            Where the blob ended up (a path, or an adapter-specific handle).
        """

    @abstractmethod
    def open_url(self, url: str) -> None:
        """Open an external link for the user."""
