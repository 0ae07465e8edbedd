from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Team",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, unique=True, verbose_name="Team name")),
                ("college", models.CharField(blank=True, max_length=255, null=True, verbose_name="College")),
                ("logo_url", models.URLField(blank=True, max_length=500, null=True, verbose_name="Logo URL")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Team",
                "verbose_name_plural": "Teams",
                "ordering": ("name",),
            },
        ),
        migrations.CreateModel(
            name="Group",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, verbose_name="Group name")),
                ("description", models.TextField(blank=True, null=True, verbose_name="Description")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("teams", models.ManyToManyField(blank=True, related_name="member_groups", to="league_app.team", verbose_name="Teams")),
            ],
            options={
                "verbose_name": "Group",
                "verbose_name_plural": "Groups",
                "ordering": ("id",),
            },
        ),
        migrations.AddField(
            model_name="team",
            name="current_group",
            field=models.ForeignKey(
                blank=True,
                editable=False,
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="current_teams",
                to="league_app.group",
                verbose_name="Current group",
            ),
        ),
        migrations.CreateModel(
            name="UserProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("role", models.CharField(
                    choices=[("admin", "Admin"), ("collegeHead", "College head"), ("student", "Student")],
                    default="student",
                    max_length=20,
                    verbose_name="Role",
                )),
                ("college", models.CharField(blank=True, max_length=255, null=True, verbose_name="College")),
                ("team", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="members",
                    to="league_app.team",
                    verbose_name="Team",
                )),
                ("user", models.OneToOneField(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="league_profile",
                    to=settings.AUTH_USER_MODEL,
                    verbose_name="User",
                )),
            ],
            options={
                "verbose_name": "User profile",
                "verbose_name_plural": "User profiles",
            },
        ),
        migrations.CreateModel(
            name="Game",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("starts_at", models.DateTimeField(verbose_name="Kick-off")),
                ("status", models.CharField(
                    choices=[("Upcoming", "Upcoming"), ("Live", "Live"), ("Finished", "Finished")],
                    default="Upcoming",
                    max_length=20,
                    verbose_name="Status",
                )),
                ("venue", models.CharField(blank=True, max_length=255, null=True, verbose_name="Venue")),
                ("away_team", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="games_away",
                    to="league_app.team",
                    verbose_name="Away team",
                )),
                ("home_team", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="games_home",
                    to="league_app.team",
                    verbose_name="Home team",
                )),
            ],
            options={
                "verbose_name": "Game",
                "verbose_name_plural": "Games",
                "ordering": ("starts_at", "id"),
            },
        ),
        migrations.CreateModel(
            name="Result",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("home_score", models.PositiveIntegerField(default=0, verbose_name="Home score")),
                ("away_score", models.PositiveIntegerField(default=0, verbose_name="Away score")),
                ("home_points", models.PositiveSmallIntegerField(blank=True, null=True, verbose_name="Home points")),
                ("away_points", models.PositiveSmallIntegerField(blank=True, null=True, verbose_name="Away points")),
                ("home_yellow_cards", models.PositiveSmallIntegerField(default=0, verbose_name="Home yellow cards")),
                ("away_yellow_cards", models.PositiveSmallIntegerField(default=0, verbose_name="Away yellow cards")),
                ("home_red_cards", models.PositiveSmallIntegerField(default=0, verbose_name="Home red cards")),
                ("away_red_cards", models.PositiveSmallIntegerField(default=0, verbose_name="Away red cards")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("away_team", models.ForeignKey(
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="results_away",
                    to="league_app.team",
                    verbose_name="Away team",
                )),
                ("game", models.OneToOneField(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="result",
                    to="league_app.game",
                    verbose_name="Game",
                )),
                ("home_team", models.ForeignKey(
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="results_home",
                    to="league_app.team",
                    verbose_name="Home team",
                )),
            ],
            options={
                "verbose_name": "Result",
                "verbose_name_plural": "Results",
                "ordering": ("id",),
            },
        ),
        migrations.CreateModel(
            name="BlogPost",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255, verbose_name="Title")),
                ("excerpt", models.TextField(verbose_name="Excerpt")),
                ("author", models.CharField(max_length=255, verbose_name="Author")),
                ("category", models.CharField(max_length=100, verbose_name="Category")),
                ("image_url", models.URLField(max_length=500, verbose_name="Cover image")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Blog post",
                "verbose_name_plural": "Blog posts",
                "ordering": ("-created_at", "-id"),
            },
        ),
        migrations.CreateModel(
            name="Vlog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255, verbose_name="Title")),
                ("description", models.TextField(verbose_name="Description")),
                ("category", models.CharField(max_length=100, verbose_name="Category")),
                ("video_url", models.URLField(max_length=500, verbose_name="Video URL")),
                ("thumbnail_url", models.URLField(max_length=500, verbose_name="Thumbnail")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Vlog",
                "verbose_name_plural": "Vlogs",
                "ordering": ("-created_at", "-id"),
            },
        ),
        migrations.CreateModel(
            name="PlayerSelection",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(blank=True, max_length=255, verbose_name="Name")),
                ("sport", models.CharField(
                    blank=True,
                    choices=[
                        ("Valorant", "Valorant"),
                        ("League of Legends", "League of Legends"),
                        ("CS:GO", "CS:GO"),
                        ("Overwatch", "Overwatch"),
                        ("Rocket League", "Rocket League"),
                    ],
                    max_length=50,
                    verbose_name="Sport",
                )),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="+",
                    to=settings.AUTH_USER_MODEL,
                    verbose_name="Created by",
                )),
                ("players", models.ManyToManyField(
                    related_name="player_selections",
                    to=settings.AUTH_USER_MODEL,
                    verbose_name="Players",
                )),
                ("team", models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="selections",
                    to="league_app.team",
                    verbose_name="Team",
                )),
            ],
            options={
                "verbose_name": "Player selection",
                "verbose_name_plural": "Player selections",
                "ordering": ("-created_at", "-id"),
            },
        ),
    ]
