from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("league_app", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="userprofile",
            name="photo_url",
            field=models.URLField(blank=True, max_length=500, null=True, verbose_name="Photo URL"),
        ),
    ]
