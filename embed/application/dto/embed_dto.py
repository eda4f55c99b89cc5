"""
Embed DTOs.
"""
from dataclasses import dataclass


@dataclass
class EmbedPageDTO:
    """Rendered embed page and the header that authorizes its scripts."""

    body: str
    nonce: str
    content_security_policy: str


@dataclass
class EmbedSnippetDTO:
    """DTO for an embed URL and its script tag."""

    embed_url: str
    script_tag: str
