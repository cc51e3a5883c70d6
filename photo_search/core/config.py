"""
Application configuration using Pydantic Settings
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings

DEFAULT_API_URL = "https://api.unsplash.com"
DEFAULT_SITE_URL = "https://unsplash.com"
DEFAULT_PAGE_SIZE = 40
DEFAULT_ATTRIBUTION_TEMPLATE = (
    'Photo by <a href="{user_url}">{user_name}</a> on <a href="{site_url}">{service}</a>'
)


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Unsplash API Settings
    unsplash_api_url: str = DEFAULT_API_URL
    unsplash_access_key: str = ""  # sent as client_id on every request
    unsplash_per_page: int = DEFAULT_PAGE_SIZE
    unsplash_app_name: str = ""  # utm_source of attribution links
    # Appended to raw image URLs, e.g. "&w=1920&fm=jpg&q=80"
    unsplash_download_parameters: str = ""
    unsplash_site_url: str = DEFAULT_SITE_URL
    # Placeholders: user_url, user_name, site_url, service
    unsplash_attribution_template: str = DEFAULT_ATTRIBUTION_TEMPLATE
    # None = no timeout; enforce one upstream if needed
    unsplash_request_timeout: Optional[float] = None

    # Logging Settings
    log_level: str = "INFO"
    log_format: str = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    log_file: str = ""

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


class ClientConfig(BaseModel):
    """Immutable configuration owned by a single gateway instance.

    Unset (or empty) fields fall back to the public defaults, so
    ``ClientConfig()`` talks to the public API with an empty key.
    """

    base_url: str = DEFAULT_API_URL
    api_key: str = ""
    default_page_size: int = DEFAULT_PAGE_SIZE
    app_id: str = ""
    url_suffix: str = ""
    site_url: str = DEFAULT_SITE_URL
    attribution_template: str = DEFAULT_ATTRIBUTION_TEMPLATE
    request_timeout: Optional[float] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("base_url", mode="before")
    @classmethod
    def default_base_url(cls, v):
        """Replace an empty base URL with the API root and drop trailing slashes."""
        return str(v).rstrip("/") if v else DEFAULT_API_URL

    @field_validator("site_url", mode="before")
    @classmethod
    def default_site_url(cls, v):
        return str(v).rstrip("/") if v else DEFAULT_SITE_URL

    @field_validator("attribution_template", mode="before")
    @classmethod
    def default_attribution_template(cls, v):
        return v or DEFAULT_ATTRIBUTION_TEMPLATE

    @field_validator("default_page_size", mode="before")
    @classmethod
    def default_page_size_if_unset(cls, v):
        return v if v else DEFAULT_PAGE_SIZE

    @field_validator("api_key", "app_id", "url_suffix", mode="before")
    @classmethod
    def empty_string_if_unset(cls, v):
        return v or ""

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "ClientConfig":
        """Build a config from the environment-backed settings."""
        s = source or settings
        return cls(
            base_url=s.unsplash_api_url,
            api_key=s.unsplash_access_key,
            default_page_size=s.unsplash_per_page,
            app_id=s.unsplash_app_name,
            url_suffix=s.unsplash_download_parameters,
            site_url=s.unsplash_site_url,
            attribution_template=s.unsplash_attribution_template,
            request_timeout=s.unsplash_request_timeout,
        )


# Global settings instance
settings = Settings()
