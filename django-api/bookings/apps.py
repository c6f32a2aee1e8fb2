from django.apps import AppConfig


class BookingsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "bookings"
    verbose_name = "Ticket bookings"

    def ready(self) -> None:
        import bookings.signals  # noqa: F401
