import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Account",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=255)),
                ("role", models.CharField(max_length=50)),
                ("club_name", models.CharField(blank=True, max_length=255, null=True)),
            ],
            options={
                "db_table": "users",
            },
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("date", models.DateField()),
                ("time", models.TimeField()),
                ("location", models.CharField(max_length=255)),
                ("poster", models.CharField(blank=True, max_length=500, null=True)),
                ("created_by", models.IntegerField(db_index=True)),
                ("club_name", models.CharField(blank=True, max_length=255, null=True)),
            ],
            options={
                "db_table": "events",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Registration",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("event", models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name="registrations", to="club_events.event")),
                ("student", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="registrations", to="club_events.account")),
            ],
            options={
                "db_table": "student_registrations",
            },
        ),
    ]
