# file: league_app/site/views/auth.py
"""Authentication views for the public site.

- :class:`SiteLoginView` – username **or** e-mail (see
  :mod:`league_app.auth_backends`); always continues to the portal dashboard.
- :class:`SiteLogoutView` – POST-only logout back to the homepage.
- :class:`SignupView` – self-registration of student accounts.
"""

from __future__ import annotations

import logging
from typing import Any

from django.contrib import messages
from django.contrib.auth import login
from django.contrib.auth.views import LoginView, LogoutView
from django.http import HttpResponse, HttpResponseRedirect
from django.urls import reverse, reverse_lazy
from django.views.generic import FormView

from league_app.forms import SignupForm

logger = logging.getLogger(__name__)


class SiteLoginView(LoginView):
    """Login form; already authenticated users skip straight to the portal."""

    template_name = "site/auth/login.html"
    redirect_authenticated_user = True

    def get_success_url(self) -> str:  # type: ignore[override]
        return reverse("portal:dashboard")


class SiteLogoutView(LogoutView):
    """Logout endpoint constrained to POST with a redirect to Home."""

    http_method_names = ["post", "options"]
    next_page = "site:home"


class SignupView(FormView):
    """Create a student account and log it in."""

    template_name = "site/auth/signup.html"
    form_class = SignupForm
    success_url = reverse_lazy("portal:dashboard")

    def dispatch(self, request: Any, *args: Any, **kwargs: Any) -> HttpResponse:
        if request.user.is_authenticated:
            return HttpResponseRedirect(self.get_success_url())
        return super().dispatch(request, *args, **kwargs)

    def form_valid(self, form: SignupForm) -> HttpResponse:
        user = form.save()
        login(self.request, user, backend="django.contrib.auth.backends.ModelBackend")
        logger.info("Registered student account %s", user.pk)
        messages.success(self.request, "Welcome to the league!")
        return super().form_valid(form)
