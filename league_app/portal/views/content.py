# file: league_app/portal/views/content.py
"""Blog and vlog managers.

Both pages list existing entries, accept a new one with an image upload, and
delete entries by POST. Failed uploads come back as form errors.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from django.contrib import messages
from django.db import models
from django.forms import ModelForm
from django.http import Http404, HttpResponse
from django.shortcuts import get_object_or_404, redirect
from django.views import View
from django.views.generic import FormView

from league_app.forms import BlogPostForm, VlogForm
from league_app.models import BlogPost, Vlog
from league_app.portal.mixins import LeagueAdminRequiredMixin
from league_app.services.media import CloudinaryUploader

logger = logging.getLogger(__name__)


class _ContentManagerView(LeagueAdminRequiredMixin, FormView):
    model: type[models.Model]
    url_name: str = ""
    created_message: str = ""
    uploader: Optional[CloudinaryUploader] = None

    def get_form_kwargs(self) -> dict[str, Any]:
        kwargs = super().get_form_kwargs()
        kwargs["uploader"] = self.uploader
        return kwargs

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        ctx = super().get_context_data(**kwargs)
        ctx["current"] = self.url_name
        ctx["entries"] = self.model.objects.all()
        return ctx

    def form_valid(self, form: ModelForm) -> HttpResponse:
        obj = form.save()
        logger.info("Published %s %s", self.model.__name__, obj.pk)
        messages.success(self.request, self.created_message)
        return redirect(f"portal:{self.url_name}")

    def form_invalid(self, form: ModelForm) -> HttpResponse:
        messages.error(self.request, "Please fix the errors below.")
        return super().form_invalid(form)


class BlogManagerView(_ContentManagerView):
    template_name = "portal/blog_manager.html"
    form_class = BlogPostForm
    model = BlogPost
    url_name = "blog_manager"
    created_message = "Your blog post has been published."


class VlogManagerView(_ContentManagerView):
    template_name = "portal/vlog_manager.html"
    form_class = VlogForm
    model = Vlog
    url_name = "vlog_manager"
    created_message = "Your vlog entry has been added."


class ContentDeleteView(LeagueAdminRequiredMixin, View):
    """POST-only delete for blog posts and vlogs."""

    http_method_names = ["post"]
    models_by_kind: dict[str, tuple[type[models.Model], str]] = {
        "blog": (BlogPost, "blog_manager"),
        "vlog": (Vlog, "vlog_manager"),
    }

    def post(self, request: Any, kind: str, pk: int) -> HttpResponse:
        if kind not in self.models_by_kind:
            raise Http404("Unknown content type")
        model, url_name = self.models_by_kind[kind]
        obj = get_object_or_404(model, pk=pk)
        obj.delete()
        logger.info("Deleted %s %s", model.__name__, pk)
        messages.success(request, f"{model._meta.verbose_name.capitalize()} deleted.")
        return redirect(f"portal:{url_name}")
