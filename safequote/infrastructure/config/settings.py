"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    log_level: str = "INFO"
    ajax_url: str = "http://localhost/wp-admin/admin-ajax.php"
    ajax_nonce: str = ""  # Empty disables option loading until a page supplies one
    request_timeout_seconds: int = 10
    max_tracked_pages: int = 1000  # Page sessions whose request tickets are kept

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
