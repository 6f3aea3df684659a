from pathlib import Path

from django.apps import AppConfig
from django.conf import settings


class ClubEventsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "club_events"
    verbose_name = "Club events"

    def ready(self) -> None:
        # Posters are written here; the directory must exist before the first upload.
        Path(settings.MEDIA_ROOT).mkdir(parents=True, exist_ok=True)
