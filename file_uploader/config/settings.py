from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    backend_provider: str = "http"
    backend_base_url: str = "http://localhost:8080/services/apexrest/FileUploadController"
    backend_api_token: str = ""
    backend_timeout_seconds: int = 30

    max_upload_bytes: int = 6 * 1024 * 1024
    candidate_eval_url_template: str = "https://eval.trential.dev/candidate/{candidate_id}"

    delivery_target: str = "directory"
    download_dir: str = "downloads"
