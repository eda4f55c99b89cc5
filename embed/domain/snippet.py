"""
Embed URL and script tag construction.
"""

from html import escape
from urllib.parse import quote

# Characters JavaScript's encodeURIComponent leaves unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode a query value the way encodeURIComponent does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_embed_url(base_url: str, domain: str, token: str) -> str:
    """
    Build the URL a third-party page loads the embed from.

    Args:
        base_url: Delivery endpoint URL
        domain: Licensed domain
        token: Encoded license token

    Returns:
        URL of the form <base>?site=<domain>&license=<token>
    """
    return (
        f"{base_url}?site={encode_uri_component(domain)}"
        f"&license={encode_uri_component(token)}"
    )


def build_script_tag(embed_url: str) -> str:
    """Return an async script tag pointing at the embed URL."""
    return f'<script src="{escape(embed_url, quote=True)}" async></script>'
