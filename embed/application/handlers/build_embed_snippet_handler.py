"""
BuildEmbedSnippetHandler.

Handler for building the embed URL and script tag.
"""

from core.domain.value_objects import LicensedDomain
from embed.application.commands.build_embed_snippet import BuildEmbedSnippetCommand
from embed.application.dto.embed_dto import EmbedSnippetDTO
from embed.domain.snippet import build_embed_url, build_script_tag


class BuildEmbedSnippetHandler:
    """Handler for BuildEmbedSnippetCommand."""

    def handle(self, command: BuildEmbedSnippetCommand) -> EmbedSnippetDTO:
        """
        Handle build embed snippet command.

        Raises:
            ValueError: If the domain is empty after normalization
        """
        domain = LicensedDomain.parse(command.domain).value
        embed_url = build_embed_url(command.base_url, domain, command.token.strip())
        return EmbedSnippetDTO(embed_url=embed_url, script_tag=build_script_tag(embed_url))
