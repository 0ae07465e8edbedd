# file: league_app/tests/services/test_media.py
"""Tests for Cloudinary uploads (HTTP stubbed with ``httpx.MockTransport``)."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
import pytest

from league_app.exceptions import MediaConfigurationError, MediaUploadError
from league_app.services.media import (
    DEFAULT_UPLOAD_PRESET,
    CloudinaryConfig,
    CloudinaryUploader,
)
from league_app.tests.conftest import SECURE_URL

CONFIG = CloudinaryConfig(cloud_name="demo", upload_preset="preset", folder="league-loom")


def _client(status: int, body: Any) -> httpx.Client:
    content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(status, content=content)))


# --- Configuration -----------------------------------------------------------


def test_config_from_settings(settings: Any) -> None:
    settings.CLOUDINARY_CLOUD_NAME = "demo"
    settings.CLOUDINARY_UPLOAD_PRESET = "covers"
    settings.CLOUDINARY_UPLOAD_FOLDER = "blog"

    config = CloudinaryConfig.from_settings()

    assert (config.cloud_name, config.upload_preset, config.folder) == ("demo", "covers", "blog")
    assert config.upload_url == "https://api.cloudinary.com/v1_1/demo/image/upload"


def test_blank_cloud_name_is_a_configuration_error(settings: Any) -> None:
    settings.CLOUDINARY_CLOUD_NAME = "  "
    with pytest.raises(MediaConfigurationError):
        CloudinaryConfig.from_settings()


def test_blank_preset_falls_back_with_warning(settings: Any, caplog: pytest.LogCaptureFixture) -> None:
    settings.CLOUDINARY_CLOUD_NAME = "demo"
    settings.CLOUDINARY_UPLOAD_PRESET = ""

    with caplog.at_level(logging.WARNING, logger="league_app.services.media"):
        config = CloudinaryConfig.from_settings()

    assert config.upload_preset == DEFAULT_UPLOAD_PRESET
    assert "CLOUDINARY_UPLOAD_PRESET" in caplog.text


# --- Uploads --------------------------------------------------------------------


def test_upload_returns_secure_url(
    png_upload: Any, cloudinary_client: httpx.Client, cloudinary_requests: list[httpx.Request]
) -> None:
    url = CloudinaryUploader(CONFIG, cloudinary_client).upload_image(png_upload)

    assert url == SECURE_URL
    (request,) = cloudinary_requests
    assert str(request.url) == CONFIG.upload_url
    body = request.read()
    assert b'name="upload_preset"' in body and b"preset" in body
    assert b'name="folder"' in body and b"league-loom" in body
    assert b'filename="cover.png"' in body


def test_upload_error_uses_host_message(png_upload: Any) -> None:
    client = _client(400, {"error": {"message": "Upload preset not found"}})
    with pytest.raises(MediaUploadError, match="Upload preset not found"):
        CloudinaryUploader(CONFIG, client).upload_image(png_upload)


def test_upload_error_without_json_body(png_upload: Any) -> None:
    client = _client(502, b"<html>bad gateway</html>")
    with pytest.raises(MediaUploadError, match="Failed to upload image"):
        CloudinaryUploader(CONFIG, client).upload_image(png_upload)


def test_upload_without_secure_url_fails(png_upload: Any) -> None:
    client = _client(200, {"url": "http://insecure"})
    with pytest.raises(MediaUploadError, match="secure_url"):
        CloudinaryUploader(CONFIG, client).upload_image(png_upload)


def test_transport_error_is_wrapped(png_upload: Any) -> None:
    def boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    client = httpx.Client(transport=httpx.MockTransport(boom))
    with pytest.raises(MediaUploadError) as excinfo:
        CloudinaryUploader(CONFIG, client).upload_image(png_upload)
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
