# file: league_app/portal/views/account.py
"""Account page: profile photo and password change on one screen.

POST handling is routed by a hidden ``action`` field:

* ``"photo"`` uploads a new profile photo to the media host,
* ``"remove_photo"`` clears the stored photo URL,
* ``"password"`` changes the password and keeps the session signed in.

Any authenticated role may use the page.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from django.contrib import messages
from django.contrib.auth import update_session_auth_hash
from django.contrib.auth.forms import PasswordChangeForm
from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect
from django.views.generic import TemplateView

from league_app.forms import ProfilePhotoForm
from league_app.models import UserProfile
from league_app.services.media import CloudinaryUploader

logger = logging.getLogger(__name__)


class AccountView(LoginRequiredMixin, TemplateView):
    """Profile photo and password management for the signed-in user."""

    template_name: str = "portal/account.html"
    uploader: Optional[CloudinaryUploader] = None

    def get_profile(self) -> UserProfile:
        profile, _ = UserProfile.objects.get_or_create(user=self.request.user)
        return profile

    def _context(self, photo_form: ProfilePhotoForm, password_form: PasswordChangeForm) -> dict[str, Any]:
        return {
            "profile": photo_form.instance,
            "photo_form": photo_form,
            "password_form": password_form,
            "current": "account",
        }

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        ctx = super().get_context_data(**kwargs)
        ctx.update(
            self._context(
                ProfilePhotoForm(instance=self.get_profile()),
                PasswordChangeForm(user=self.request.user),
            )
        )
        return ctx

    def post(self, request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        """Process a photo upload, photo removal or password change."""
        user = request.user
        profile = self.get_profile()
        action = request.POST.get("action")

        if action == "photo":
            photo_form = ProfilePhotoForm(request.POST, request.FILES, instance=profile, uploader=self.uploader)
            if photo_form.is_valid():
                photo_form.save()
                logger.info("Updated profile photo of %s", user)
                messages.success(request, "Profile photo updated")
                return redirect("portal:account")
            messages.error(request, "Failed to update photo")
            return self.render_to_response(self._context(photo_form, PasswordChangeForm(user=user)))

        if action == "remove_photo":
            profile.photo_url = None
            profile.save(update_fields=["photo_url"])
            messages.success(request, "Profile photo removed")
            return redirect("portal:account")

        if action == "password":
            password_form = PasswordChangeForm(user=user, data=request.POST)
            if password_form.is_valid():
                user = password_form.save()
                update_session_auth_hash(request, user)  # stay signed in
                messages.success(request, "Password updated")
                return redirect("portal:account")
            for err in password_form.non_field_errors():
                messages.error(request, err)
            for field, errs in password_form.errors.items():
                for err in errs:
                    if field in password_form.fields:
                        messages.error(request, f"{password_form.fields[field].label}: {err}")
            return self.render_to_response(self._context(ProfilePhotoForm(instance=profile), password_form))

        return redirect("portal:account")
