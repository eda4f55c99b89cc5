"""
RenderEmbedHandler.

Handles rendering the embed page: one nonce per call, substituted into
the template and referenced by the Content-Security-Policy header.
"""

import logging

from core.metrics import embed_nonces_issued_total
from embed.application.commands.render_embed import RenderEmbedCommand
from embed.application.dto.embed_dto import EmbedPageDTO
from embed.domain.csp import ContentSecurityPolicy
from embed.domain.nonce import NonceIssuer
from embed.ports.template_store import TemplateStore

logger = logging.getLogger(__name__)


class RenderEmbedHandler:
    """Handler for RenderEmbedCommand."""

    def __init__(
        self,
        nonce_issuer: NonceIssuer,
        template_store: TemplateStore,
        policy: ContentSecurityPolicy,
    ):
        """Initialize handler with its collaborators."""
        self.nonce_issuer = nonce_issuer
        self.template_store = template_store
        self.policy = policy

    def handle(self, command: RenderEmbedCommand) -> EmbedPageDTO:
        """
        Handle render embed command.

        Args:
            command: RenderEmbedCommand

        Returns:
            EmbedPageDTO with the substituted body and CSP header

        Raises:
            TemplateLoadError: If the template cannot be loaded
        """
        nonce = self.nonce_issuer.issue()
        embed_nonces_issued_total.inc()

        template = self.template_store.load(command.template_name)
        occurrences = template.count(command.placeholder)
        body = template.replace(command.placeholder, nonce)

        logger.debug(
            "Embed template rendered",
            extra={"template_name": command.template_name, "placeholders": occurrences},
        )

        return EmbedPageDTO(
            body=body,
            nonce=nonce,
            content_security_policy=self.policy.render(nonce),
        )
