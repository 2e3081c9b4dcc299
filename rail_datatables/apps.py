"""Django app configuration for rail-datatables."""

from django.apps import AppConfig as BaseAppConfig


class AppConfig(BaseAppConfig):
    """Registers the library so its management commands are discoverable."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "rail_datatables"
    verbose_name = "Rail DataTables"
    label = "rail_datatables"
