# file: league_app/services/media.py
"""Image uploads to the Cloudinary media host.

Blog covers, vlog thumbnails and team logos are uploaded unsigned with an
upload preset; only the returned ``secure_url`` is stored.

Settings (all optional):
    ``CLOUDINARY_CLOUD_NAME``, ``CLOUDINARY_UPLOAD_PRESET``,
    ``CLOUDINARY_UPLOAD_FOLDER``, ``CLOUDINARY_TIMEOUT``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import IO, Any, Optional

import httpx
from django.conf import settings

from league_app.exceptions import MediaConfigurationError, MediaUploadError

logger = logging.getLogger(__name__)

DEFAULT_CLOUD_NAME = "dg2kyhuh0"
DEFAULT_UPLOAD_PRESET = "collage_league"
DEFAULT_FOLDER = "league-loom"
API_BASE = "https://api.cloudinary.com/v1_1"

__all__ = ["CloudinaryConfig", "CloudinaryUploader", "upload_image"]


@dataclass(frozen=True)
class CloudinaryConfig:
    cloud_name: str
    upload_preset: str
    folder: str
    timeout: float = 30.0

    @classmethod
    def from_settings(cls) -> "CloudinaryConfig":
        """Read the configuration from Django settings.

        Raises:
            MediaConfigurationError: If the cloud name is blank.
        """
        raw_cloud = getattr(settings, "CLOUDINARY_CLOUD_NAME", None)
        raw_preset = getattr(settings, "CLOUDINARY_UPLOAD_PRESET", None)
        raw_folder = getattr(settings, "CLOUDINARY_UPLOAD_FOLDER", None)

        cloud_name = (DEFAULT_CLOUD_NAME if raw_cloud is None else raw_cloud).strip()
        if not cloud_name:
            raise MediaConfigurationError(
                "Missing Cloudinary cloud name. Set CLOUDINARY_CLOUD_NAME and restart the server."
            )

        preset = (raw_preset or "").strip()
        if not preset:
            logger.warning(
                "CLOUDINARY_UPLOAD_PRESET is not set; falling back to the default preset %r",
                DEFAULT_UPLOAD_PRESET,
            )
            preset = DEFAULT_UPLOAD_PRESET

        folder = (DEFAULT_FOLDER if raw_folder is None else raw_folder).strip()
        timeout = float(getattr(settings, "CLOUDINARY_TIMEOUT", 30.0))
        return cls(cloud_name=cloud_name, upload_preset=preset, folder=folder, timeout=timeout)

    @property
    def upload_url(self) -> str:
        return f"{API_BASE}/{self.cloud_name}/image/upload"


class CloudinaryUploader:
    """Unsigned image uploader.

    Args:
        config: Upload configuration; read from settings when omitted.
        client: Optional ``httpx.Client`` (tests pass one with a mock
            transport). A private client is created per upload otherwise.
    """

    def __init__(self, config: Optional[CloudinaryConfig] = None, client: Optional[httpx.Client] = None) -> None:
        self.config = config or CloudinaryConfig.from_settings()
        self._client = client

    def upload_image(self, file: IO[bytes] | Any) -> str:
        """Upload ``file`` and return its public ``secure_url``.

        Args:
            file: Django ``UploadedFile`` or any binary file-like object with a
                ``name``.

        Raises:
            MediaUploadError: On transport errors, non-2xx answers or a
            response without ``secure_url``.
        """
        name = getattr(file, "name", None) or "upload"
        content_type = getattr(file, "content_type", None) or "application/octet-stream"
        if hasattr(file, "seek"):
            file.seek(0)
        files = {"file": (name.rsplit("/", 1)[-1], file.read(), content_type)}
        data = {"upload_preset": self.config.upload_preset}
        if self.config.folder:
            data["folder"] = self.config.folder

        try:
            if self._client is not None:
                response = self._client.post(self.config.upload_url, data=data, files=files)
            else:
                with httpx.Client(timeout=self.config.timeout) as client:
                    response = client.post(self.config.upload_url, data=data, files=files)
        except httpx.HTTPError as exc:
            logger.exception("Upload of %s to Cloudinary failed", name)
            raise MediaUploadError("Failed to upload image to Cloudinary") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if response.is_error:
            message = (payload.get("error") or {}).get("message") if isinstance(payload, dict) else None
            logger.error("Cloudinary rejected %s (%s): %s", name, response.status_code, message)
            raise MediaUploadError(message or "Failed to upload image to Cloudinary")

        secure_url = payload.get("secure_url") if isinstance(payload, dict) else None
        if not isinstance(secure_url, str):
            raise MediaUploadError("Cloudinary response did not include a secure_url")

        logger.info("Uploaded %s to Cloudinary folder %r", name, self.config.folder)
        return secure_url


def upload_image(file: IO[bytes] | Any) -> str:
    """Upload with the settings-based configuration."""
    return CloudinaryUploader().upload_image(file)
