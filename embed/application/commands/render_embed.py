"""
RenderEmbedCommand.

Command to render the embed page for one request.
"""

from dataclasses import dataclass

DEFAULT_NONCE_PLACEHOLDER = "NONCE_PLACEHOLDER"


@dataclass
class RenderEmbedCommand:
    """Command to render an embed template with a fresh nonce."""

    template_name: str
    placeholder: str = DEFAULT_NONCE_PLACEHOLDER
