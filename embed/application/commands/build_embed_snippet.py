"""
BuildEmbedSnippetCommand.

Command to build the embed URL and script tag for a licensed site.
"""

from dataclasses import dataclass


@dataclass
class BuildEmbedSnippetCommand:
    """Command to build an embed snippet."""

    domain: str
    token: str
    base_url: str
