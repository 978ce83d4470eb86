"""
Django app configuration for recordql.

Installing the app provides the persisted schema-description models, the
generic record table used by the ORM storage backend and the
``eject_schema`` management command.
"""

import logging

from django.apps import AppConfig as BaseAppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for recordql."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "recordql"
    verbose_name = "RecordQL"
    label = "recordql"

    def ready(self):
        """Validate library settings once Django has loaded."""
        from .core.settings import SchemaSettings

        try:
            schema_settings = SchemaSettings.from_settings()
            schema_settings.validate()
            logger.debug(
                "recordql configured with storage %s and metadata source %s",
                schema_settings.storage_backend,
                schema_settings.metadata_source,
            )
        except Exception as e:
            logger.error(f"Invalid recordql configuration: {e}")
            # Don't raise in production to avoid breaking the app
            if getattr(settings, "DEBUG", False):
                raise
