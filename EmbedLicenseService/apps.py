"""
App configuration for Embed License Service.
"""

import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class EmbedLicenseServiceConfig(AppConfig):
    """App configuration for EmbedLicenseService."""

    name = "EmbedLicenseService"
    verbose_name = "Embed License Service"

    def ready(self):
        """Called when Django starts."""
        # Only log once per process
        if hasattr(self, "_initialized"):
            return

        embed_settings = getattr(settings, "EMBED_SETTINGS", {})
        logger.info(
            "Embed license service ready",
            extra={
                "template_dir": str(embed_settings.get("TEMPLATE_DIR", "")),
                "delivery_base_url": embed_settings.get("DELIVERY_BASE_URL", ""),
                "domain_match_policy": settings.LICENSE_SETTINGS["DOMAIN_MATCH_POLICY"],
            },
        )
        self._initialized = True
