"""Infrastructure layer exports."""

from .acrcloud_client import AcrCloudClient

__all__ = ["AcrCloudClient"]
