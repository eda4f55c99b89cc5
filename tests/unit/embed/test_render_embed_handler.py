"""
Unit tests for RenderEmbedHandler.
"""

import pytest

from core.domain.exceptions import TemplateNotFoundError, TemplateReadError
from embed.application.commands.render_embed import RenderEmbedCommand
from embed.application.handlers.render_embed_handler import RenderEmbedHandler
from embed.domain.csp import ContentSecurityPolicy
from embed.domain.nonce import NonceIssuer
from embed.ports.template_store import TemplateStore


class InMemoryTemplateStore(TemplateStore):
    """Template store backed by a dict."""

    def __init__(self, templates=None, error=None):
        self.templates = templates or {}
        self.error = error
        self.loads = 0

    def load(self, name):
        self.loads += 1
        if self.error:
            raise self.error
        if name not in self.templates:
            raise TemplateNotFoundError(f"Template not found: {name}")
        return self.templates[name]


def make_handler(store, random_bytes=None):
    """Build a handler around the given store."""
    issuer = NonceIssuer(random_bytes=random_bytes) if random_bytes else NonceIssuer()
    return RenderEmbedHandler(
        nonce_issuer=issuer,
        template_store=store,
        policy=ContentSecurityPolicy(script_sources=("https://unpkg.com",)),
    )


class TestRenderEmbedHandler:
    """Tests for RenderEmbedHandler."""

    def test_render_substitutes_every_placeholder(self):
        """Test all placeholders receive the same nonce."""
        store = InMemoryTemplateStore(
            {"embed.html": '<style nonce="NONCE_PLACEHOLDER"></style>'
                           '<script nonce="NONCE_PLACEHOLDER"></script>'}
        )

        page = make_handler(store).handle(RenderEmbedCommand(template_name="embed.html"))

        assert "NONCE_PLACEHOLDER" not in page.body
        assert page.body.count(f'nonce="{page.nonce}"') == 2
        assert f"'nonce-{page.nonce}'" in page.content_security_policy

    def test_render_with_fixed_random_source(self):
        """Test the body and header carry the issued nonce."""
        store = InMemoryTemplateStore({"embed.html": "<p>NONCE_PLACEHOLDER</p>"})

        page = make_handler(store, random_bytes=lambda n: b"\x00" * n).handle(
            RenderEmbedCommand(template_name="embed.html")
        )

        assert page.nonce == "AAAAAAAAAAAAAAAAAAAAAA=="
        assert page.body == "<p>AAAAAAAAAAAAAAAAAAAAAA==</p>"
        assert "'nonce-AAAAAAAAAAAAAAAAAAAAAA=='" in page.content_security_policy

    def test_render_without_placeholder(self):
        """Test a template without placeholders is served unchanged with a header."""
        store = InMemoryTemplateStore({"embed.html": "<p>static</p>"})

        page = make_handler(store).handle(RenderEmbedCommand(template_name="embed.html"))

        assert page.body == "<p>static</p>"
        assert f"'nonce-{page.nonce}'" in page.content_security_policy

    def test_render_custom_placeholder(self):
        """Test a configured placeholder token is honored."""
        store = InMemoryTemplateStore({"embed.html": "<p>{{NONCE}}</p>"})

        page = make_handler(store).handle(
            RenderEmbedCommand(template_name="embed.html", placeholder="{{NONCE}}")
        )

        assert page.body == f"<p>{page.nonce}</p>"

    def test_each_render_gets_fresh_nonce(self):
        """Test two renders never share a nonce."""
        store = InMemoryTemplateStore({"embed.html": "NONCE_PLACEHOLDER"})
        handler = make_handler(store)

        first = handler.handle(RenderEmbedCommand(template_name="embed.html"))
        second = handler.handle(RenderEmbedCommand(template_name="embed.html"))

        assert first.nonce != second.nonce
        assert store.loads == 2

    def test_missing_template_propagates(self):
        """Test a missing template surfaces as TemplateNotFoundError."""
        with pytest.raises(TemplateNotFoundError):
            make_handler(InMemoryTemplateStore()).handle(
                RenderEmbedCommand(template_name="embed.html")
            )

    def test_read_error_propagates(self):
        """Test read failures surface as TemplateReadError."""
        store = InMemoryTemplateStore(error=TemplateReadError("disk error"))
        with pytest.raises(TemplateReadError):
            make_handler(store).handle(RenderEmbedCommand(template_name="embed.html"))
