from file_uploader.delivery.base import BaseBlobDelivery, Blob


class MemoryDelivery(BaseBlobDelivery):
    """Keeps delivered blobs and opened links in memory."""

    def __init__(self) -> None:
        self.blobs: list[Blob] = []
        self.opened_urls: list[str] = []

    def deliver(self, blob: Blob) -> str:
        self.blobs.append(blob)
        return f"memory://{blob.filename}"

    def open_url(self, url: str) -> None:
        self.opened_urls.append(url)
