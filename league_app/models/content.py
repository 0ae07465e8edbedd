# file: league_app/models/content.py
"""Published content: blog posts and vlogs.

Images and thumbnails live on the media host; only their public URLs are
stored here. Both models list newest first.
"""

from __future__ import annotations

from django.db import models


class BlogPost(models.Model):
    """Article shown on the public blog page."""

    title = models.CharField("Title", max_length=255)
    excerpt = models.TextField("Excerpt")
    author = models.CharField("Author", max_length=255)
    category = models.CharField("Category", max_length=100)
    image_url = models.URLField("Cover image", max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Blog post"
        verbose_name_plural = "Blog posts"
        ordering = ("-created_at", "-id")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.title


class Vlog(models.Model):
    """Video entry shown on the public vlog page."""

    title = models.CharField("Title", max_length=255)
    description = models.TextField("Description")
    category = models.CharField("Category", max_length=100)
    video_url = models.URLField("Video URL", max_length=500)
    thumbnail_url = models.URLField("Thumbnail", max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Vlog"
        verbose_name_plural = "Vlogs"
        ordering = ("-created_at", "-id")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.title
