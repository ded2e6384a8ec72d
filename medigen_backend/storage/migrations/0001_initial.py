"""
PATH: storage/migrations/0001_initial.py

MIGRATION: CREATE KeyValueEntry
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="KeyValueEntry",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("scope_key", models.CharField(max_length=191, unique=True)),
                ("value", models.JSONField(default=list)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["scope_key"],
                "verbose_name": "Key/value entry",
                "verbose_name_plural": "Key/value entries",
            },
        ),
    ]
