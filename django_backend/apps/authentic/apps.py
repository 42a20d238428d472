"""
Authentic application configuration module.

Defines the Django application configuration for the app resolving
authentication settings of authenticable models.
"""

import logging

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


class AuthenticAppConfig(AppConfig):
    """
    Django application configuration for authenticable models.

    Models register themselves when their module is imported, so by the
    time ``ready`` runs every authenticable model is on the default site.
    """

    default_auto_field: str = "django.db.models.BigAutoField"
    name: str = "apps.authentic"
    verbose_name: str = _("Authenticable Models")
    label: str = "authentic"

    def ready(self) -> None:
        """Report the models registered during model loading."""
        from .registry import site

        for model in site.registered_models():
            config = site.get_config(model)
            logger.debug(
                "Authenticable model %s uses session %s with login field %s",
                model._meta.label,
                config.session_class,
                config.login_field,
            )
