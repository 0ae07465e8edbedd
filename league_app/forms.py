# file: league_app/forms.py
"""Forms shared by the portal views and the admin.

Highlights
---------
- `SignupForm` creates a student account with a league profile.
- `ResultForm` captures a final score for an unfinished game.
- `MoveTeamForm` moves a team into a group (or out of all groups).
- `BlogPostForm`, `VlogForm`, `TeamForm` and `ProfilePhotoForm` take an image
  file and push it to the media host while validating; only the returned URL
  is stored.
"""

from __future__ import annotations

from typing import Any, Optional

from django import forms
from django.contrib.auth import get_user_model
from django.contrib.auth.forms import UserCreationForm

from .exceptions import LeagueError
from .models import BlogPost, Game, GameStatus, Group, Team, UserProfile, Vlog
from .services.media import CloudinaryUploader


# --- Accounts --------------------------------------------------------------


class SignupForm(UserCreationForm):
    """Self-service registration; new accounts always get the student role."""

    email = forms.EmailField(label="E-mail")
    first_name = forms.CharField(label="Name", max_length=150)
    college = forms.CharField(label="College", max_length=255, required=False)

    class Meta(UserCreationForm.Meta):
        model = get_user_model()
        fields = ("username", "first_name", "email")

    def clean_email(self) -> str:
        """Reject e-mails already used by another account (case-insensitive)."""
        email = self.cleaned_data["email"].strip()
        if get_user_model().objects.filter(email__iexact=email).exists():
            raise forms.ValidationError("User already exists")
        return email

    def save(self, commit: bool = True) -> Any:  # type: ignore[override]
        user = super().save(commit=commit)
        if commit:
            profile, _ = UserProfile.objects.get_or_create(user=user)
            profile.role = UserProfile.Role.STUDENT
            profile.college = self.cleaned_data.get("college") or None
            profile.save(update_fields=["role", "college"])
        return user


# --- Results ---------------------------------------------------------------


class ResultForm(forms.Form):
    """Final score of a game plus disciplinary counts."""

    game = forms.ModelChoiceField(
        queryset=Game.objects.none(),
        label="Game",
    )
    home_score = forms.IntegerField(label="Home score", min_value=0)
    away_score = forms.IntegerField(label="Away score", min_value=0)
    home_yellow_cards = forms.IntegerField(label="Home yellow cards", min_value=0, initial=0, required=False)
    away_yellow_cards = forms.IntegerField(label="Away yellow cards", min_value=0, initial=0, required=False)
    home_red_cards = forms.IntegerField(label="Home red cards", min_value=0, initial=0, required=False)
    away_red_cards = forms.IntegerField(label="Away red cards", min_value=0, initial=0, required=False)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.fields["game"].queryset = (
            Game.objects.select_related("home_team", "away_team")
            .exclude(status=GameStatus.FINISHED)
            .order_by("starts_at")
        )


# --- Groups ----------------------------------------------------------------


class MoveTeamForm(forms.Form):
    team = forms.ModelChoiceField(queryset=Team.objects.order_by("name"), label="Team")
    group = forms.ModelChoiceField(
        queryset=Group.objects.order_by("id"),
        label="Move to",
        required=False,
        empty_label="No group",
    )


# --- Content ---------------------------------------------------------------


class _ImageUploadForm(forms.ModelForm):
    """ModelForm storing the URL of an uploaded image in ``url_field``.

    The file is pushed to the media host during ``clean()``, so a rejected
    upload is reported as an error on the image field. ``uploader`` may be
    injected (tests); a settings-configured :class:`CloudinaryUploader` is
    used otherwise.
    """

    url_field: str = ""
    image_field: str = "image"

    def __init__(self, *args: Any, uploader: Optional[CloudinaryUploader] = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.uploader = uploader
        if self.instance.pk and getattr(self.instance, self.url_field, None):
            # Keep the current image when editing without a new file.
            self.fields[self.image_field].required = False

    def clean(self) -> dict[str, Any]:
        cleaned = super().clean()
        upload = cleaned.get(self.image_field)
        if upload and not self.errors:
            try:
                uploader = self.uploader or CloudinaryUploader()
                url = uploader.upload_image(upload)
            except LeagueError as exc:
                self.add_error(self.image_field, str(exc))
            else:
                setattr(self.instance, self.url_field, url)
                # construct_instance() copies cleaned_data over the instance.
                if self.url_field in self.fields:
                    cleaned[self.url_field] = url
        return cleaned


class BlogPostForm(_ImageUploadForm):
    url_field = "image_url"
    image_field = "image"

    image = forms.ImageField(label="Cover image")

    class Meta:
        model = BlogPost
        fields = ("title", "excerpt", "author", "category")

    def clean_title(self) -> str:
        title = self.cleaned_data["title"].strip()
        if len(title) < 3:
            raise forms.ValidationError("Title must be at least 3 characters")
        return title


class VlogForm(_ImageUploadForm):
    url_field = "thumbnail_url"
    image_field = "thumbnail"

    thumbnail = forms.ImageField(label="Thumbnail image")

    class Meta:
        model = Vlog
        fields = ("title", "description", "category", "video_url")

    def clean_title(self) -> str:
        title = self.cleaned_data["title"].strip()
        if len(title) < 3:
            raise forms.ValidationError("Title must be at least 3 characters")
        return title

    def clean_description(self) -> str:
        description = self.cleaned_data["description"].strip()
        if len(description) < 20:
            raise forms.ValidationError("Description must be at least 20 characters")
        return description


class TeamForm(_ImageUploadForm):
    """Team edit form; a new logo file replaces ``logo_url``."""

    url_field = "logo_url"
    image_field = "logo"

    logo = forms.ImageField(label="Logo image", required=False)

    class Meta:
        model = Team
        fields = ("name", "college", "logo_url")


class ProfilePhotoForm(_ImageUploadForm):
    """Replace the profile photo of the current user."""

    url_field = "photo_url"
    image_field = "photo"

    photo = forms.ImageField(label="Profile photo")

    class Meta:
        model = UserProfile
        fields = ()

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        # A new file is the only input of this form.
        self.fields[self.image_field].required = True
