# file: league_app/admin.py
"""Django admin configuration for teams, groups, games, users and content.

The admin is the back office of the league: team/user/group management,
fixtures and results, blog and vlog publishing. Content forms upload images
to the media host before saving.
"""

from __future__ import annotations

from typing import Any

import nested_admin
from django.contrib import admin, messages
from django.contrib.admin.sites import NotRegistered
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count
from django.utils.html import format_html

from .forms import BlogPostForm, TeamForm, VlogForm
from .models import (
    BlogPost,
    Game,
    GameStatus,
    Group,
    PlayerSelection,
    Result,
    Team,
    UserProfile,
    Vlog,
)
from .services.groups import refresh_current_group

User = get_user_model()


# ------------------------------------------------------------
# Safe unregistration (idempotent)
# ------------------------------------------------------------
try:
    admin.site.unregister(User)
except NotRegistered:
    pass


# ------------------------------------------------------------
# Users
# ------------------------------------------------------------
class UserProfileInline(admin.StackedInline):
    model = UserProfile
    can_delete = False
    fk_name = "user"
    autocomplete_fields = ("team",)
    verbose_name_plural = "League profile"


@admin.register(User)
class LeagueUserAdmin(BaseUserAdmin):
    """Auth user admin extended with the league role."""

    inlines = (UserProfileInline,)
    list_display = ("username", "email", "first_name", "role", "college", "is_staff")
    list_filter = ("league_profile__role", "is_staff", "is_active")
    search_fields = ("username", "email", "first_name", "last_name", "league_profile__college")

    @admin.display(description="Role", ordering="league_profile__role")
    def role(self, obj: Any) -> str:
        profile = getattr(obj, "league_profile", None)
        return profile.get_role_display() if profile else "—"

    @admin.display(description="College", ordering="league_profile__college")
    def college(self, obj: Any) -> str:
        profile = getattr(obj, "league_profile", None)
        return (profile.college if profile else None) or "—"


# ------------------------------------------------------------
# Teams & groups
# ------------------------------------------------------------
@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    """Admin for teams with a logo preview and the cached current group."""

    form = TeamForm
    list_display = ("name", "college", "current_group", "logo_preview")
    list_filter = ("current_group",)
    search_fields = ("name", "college")
    readonly_fields = ("current_group", "logo_preview")

    @admin.display(description="Logo")
    def logo_preview(self, obj: Team) -> str:
        if not obj.logo_url:
            return "—"
        return format_html('<img src="{}" alt="" style="height:32px;width:auto;">', obj.logo_url)


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
    """Admin for groups; membership edits refresh the teams' cached group."""

    list_display = ("name", "member_count", "updated_at")
    search_fields = ("name", "description")
    filter_horizontal = ("teams",)
    actions = ["resync_current_groups"]

    def get_queryset(self, request: Any) -> Any:
        return super().get_queryset(request).annotate(_member_count=Count("teams", distinct=True))

    @admin.display(description="Teams", ordering="_member_count")
    def member_count(self, obj: Group) -> int:
        return getattr(obj, "_member_count", None) or obj.teams.count()

    @admin.action(description="Resync the current group of member teams")
    def resync_current_groups(self, request: Any, queryset: Any) -> None:
        team_ids = set(Team.objects.filter(member_groups__in=queryset).values_list("id", flat=True))
        changed = refresh_current_group(team_ids)
        self.message_user(request, f"Done. Updated {changed} teams.")


# ------------------------------------------------------------
# Games & results
# ------------------------------------------------------------
class ResultInline(nested_admin.NestedStackedInline):
    model = Result
    fk_name = "game"
    extra = 0
    max_num = 1
    fields = (
        ("home_score", "away_score"),
        ("home_points", "away_points"),
        ("home_yellow_cards", "away_yellow_cards"),
        ("home_red_cards", "away_red_cards"),
    )


@admin.register(Game)
class GameAdmin(nested_admin.NestedModelAdmin):
    """Admin for fixtures with the result edited inline."""

    list_display = ("starts_at", "home_team", "away_team", "status", "score")
    list_filter = ("status",)
    search_fields = ("home_team__name", "away_team__name", "venue")
    autocomplete_fields = ("home_team", "away_team")
    date_hierarchy = "starts_at"
    inlines = [ResultInline]
    actions = ["mark_finished"]

    def get_queryset(self, request: Any) -> Any:
        return super().get_queryset(request).select_related("home_team", "away_team", "result")

    @admin.display(description="Score")
    def score(self, obj: Game) -> str:
        result = getattr(obj, "result", None)
        if result is None:
            return "—"
        return f"{result.home_score}:{result.away_score}"

    def save_formset(self, request: Any, form: Any, formset: Any, change: bool) -> None:
        """Copy the game's teams onto inline results before saving."""
        instances = formset.save(commit=False)
        for obj in instances:
            if isinstance(obj, Result):
                obj.home_team_id = form.instance.home_team_id
                obj.away_team_id = form.instance.away_team_id
            obj.save()
        for obj in formset.deleted_objects:
            obj.delete()
        formset.save_m2m()

    @admin.action(description="Mark as finished (games with a result)")
    def mark_finished(self, request: Any, queryset: Any) -> None:
        finished = queryset.filter(result__isnull=False).exclude(status=GameStatus.FINISHED)
        done = finished.update(status=GameStatus.FINISHED)
        missing = queryset.filter(result__isnull=True).count()
        if missing:
            self.message_user(
                request, f"{missing} games have no result and were skipped.", level=messages.WARNING
            )
        self.message_user(request, f"Done. Finished {done} games.")


@admin.register(Result)
class ResultAdmin(admin.ModelAdmin):
    list_display = ("__str__", "game", "home_points", "away_points", "updated_at")
    list_select_related = ("home_team", "away_team", "game")
    search_fields = ("home_team__name", "away_team__name")
    autocomplete_fields = ("home_team", "away_team")
    raw_id_fields = ("game",)


# ------------------------------------------------------------
# Content
# ------------------------------------------------------------
@admin.register(BlogPost)
class BlogPostAdmin(admin.ModelAdmin):
    form = BlogPostForm
    list_display = ("title", "author", "category", "created_at")
    list_filter = ("category",)
    search_fields = ("title", "excerpt", "author")


@admin.register(Vlog)
class VlogAdmin(admin.ModelAdmin):
    form = VlogForm
    list_display = ("title", "category", "video_url", "created_at")
    list_filter = ("category",)
    search_fields = ("title", "description")


@admin.register(PlayerSelection)
class PlayerSelectionAdmin(admin.ModelAdmin):
    list_display = ("__str__", "sport", "team", "player_count", "created_by", "created_at")
    list_filter = ("sport", "team")
    filter_horizontal = ("players",)
    readonly_fields = ("created_by",)

    @admin.display(description="Players")
    def player_count(self, obj: PlayerSelection) -> int:
        return obj.players.count()

    def save_model(self, request: Any, obj: PlayerSelection, form: Any, change: bool) -> None:
        if not change and not obj.created_by_id:
            obj.created_by = request.user
        super().save_model(request, obj, form, change)
