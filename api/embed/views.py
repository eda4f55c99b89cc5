"""
Embed delivery view.

Serves the embeddable page with a fresh CSP nonce on every request.
Failures are answered with fixed plain-text bodies; details such as
filesystem paths only reach the server log.
"""

import logging

from django.conf import settings
from django.http import HttpRequest, HttpResponse
from django.views import View

from core.domain.exceptions import TemplateLoadError, TemplateNotFoundError
from core.metrics import embed_template_errors_total
from embed.application.commands.render_embed import RenderEmbedCommand
from embed.application.handlers.render_embed_handler import RenderEmbedHandler
from embed.domain.csp import ContentSecurityPolicy
from embed.domain.nonce import NonceIssuer
from embed.infrastructure.file_template_store import FileTemplateStore

logger = logging.getLogger(__name__)

NOT_FOUND_BODY = (
    "Not Found: Embeddable content could not be loaded. Check server logs for details."
)
INTERNAL_ERROR_BODY = (
    "Internal Server Error: Embeddable content could not be loaded. "
    "Check server logs for details."
)
PLAIN_TEXT = "text/plain; charset=utf-8"

_nonce_issuer = NonceIssuer()


def _build_handler() -> RenderEmbedHandler:
    """Build the render handler from current settings."""
    embed_settings = settings.EMBED_SETTINGS
    return RenderEmbedHandler(
        nonce_issuer=_nonce_issuer,
        template_store=FileTemplateStore(embed_settings["TEMPLATE_DIR"]),
        policy=ContentSecurityPolicy.from_settings(embed_settings.get("CSP", {})),
    )


class EmbedContentView(View):
    """View delivering the embeddable content."""

    def get(self, request: HttpRequest) -> HttpResponse:
        """Render the embed page."""
        embed_settings = settings.EMBED_SETTINGS
        command = RenderEmbedCommand(
            template_name=embed_settings["TEMPLATE_NAME"],
            placeholder=embed_settings["NONCE_PLACEHOLDER"],
        )

        try:
            page = _build_handler().handle(command)
        except TemplateNotFoundError as exc:
            embed_template_errors_total.labels(reason="not_found").inc()
            logger.error("Embed content unavailable: %s", exc.message, extra={"code": exc.code})
            return HttpResponse(NOT_FOUND_BODY, status=404, content_type=PLAIN_TEXT)
        except TemplateLoadError as exc:
            embed_template_errors_total.labels(reason="read_error").inc()
            logger.error("Embed content unavailable: %s", exc.message, extra={"code": exc.code})
            return HttpResponse(INTERNAL_ERROR_BODY, status=500, content_type=PLAIN_TEXT)
        except Exception:  # pylint: disable=broad-exception-caught
            embed_template_errors_total.labels(reason="unexpected").inc()
            logger.exception("Unexpected error rendering embed content")
            return HttpResponse(INTERNAL_ERROR_BODY, status=500, content_type=PLAIN_TEXT)

        response = HttpResponse(page.body, content_type="text/html; charset=utf-8")
        response["Content-Security-Policy"] = page.content_security_policy
        # The nonce is single-use, so the body must not be cached
        response["Cache-Control"] = "no-store"
        return response
