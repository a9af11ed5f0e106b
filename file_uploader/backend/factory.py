from typing import ClassVar

from file_uploader.backend.base import BaseEvaluationService
from file_uploader.backend.example_adapter import ExampleEvaluationService
from file_uploader.backend.http_adapter import HttpEvaluationService
from file_uploader.config.settings import Settings


class EvaluationServiceFactory:
    """Creates the configured evaluation service adapter."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("http", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseEvaluationService:
        provider = settings.backend_provider.lower()
        if provider == "example":
            return ExampleEvaluationService()
        if provider == "http":
            base_url = settings.backend_base_url.strip()
            if not base_url:
                raise ValueError("backend_base_url is required for backend_provider=http")
            return HttpEvaluationService(
                base_url=base_url,
                timeout_seconds=settings.backend_timeout_seconds,
                api_token=settings.backend_api_token,
            )
        raise ValueError(
            f"Unknown backend provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
