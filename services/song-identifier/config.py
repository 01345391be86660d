"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, computed_field


class AcrCloudConfig(BaseModel, frozen=True):
    """ACRCloud identification API configuration."""

    host: str = "identify-ap-southeast-1.acrcloud.com"
    endpoint: str = "/v1/identify"
    access_key: str
    access_secret: str
    timeout_seconds: float = 30.0

    @computed_field
    @property
    def url(self) -> str:
        """Returns the full identification endpoint URL."""
        return f"https://{self.host}{self.endpoint}"

    @property
    def is_configured(self) -> bool:
        """True when both credentials are present."""
        return bool(self.access_key) and bool(self.access_secret)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    acrcloud: AcrCloudConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        acrcloud=AcrCloudConfig(
            host=os.getenv("ACRCLOUD_HOST", "identify-ap-southeast-1.acrcloud.com"),
            endpoint=os.getenv("ACRCLOUD_ENDPOINT", "/v1/identify"),
            access_key=os.getenv("ACRCLOUD_ACCESS_KEY", ""),
            access_secret=os.getenv("ACRCLOUD_ACCESS_SECRET", ""),
            timeout_seconds=float(os.getenv("ACRCLOUD_TIMEOUT_SECONDS", "30")),
        ),
    )
