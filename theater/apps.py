from django.apps import AppConfig


class TheaterConfig(AppConfig):
    name = "theater"
    verbose_name = "Theater statements"

    def ready(self) -> None:
        from theater import signals  # noqa: F401
