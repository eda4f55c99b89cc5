"""
Content-Security-Policy construction for the embed response.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class ContentSecurityPolicy:
    """
    Policy for the embed page.

    Scripts and styles are allowed from self, from the request's nonce and
    from the listed CDN origins. Everything else falls back to restrictive
    defaults.
    """

    script_sources: Tuple[str, ...] = field(default_factory=tuple)
    style_sources: Tuple[str, ...] = field(default_factory=tuple)
    font_sources: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_settings(cls, csp_settings: dict) -> "ContentSecurityPolicy":
        """Build a policy from the EMBED_SETTINGS["CSP"] mapping."""
        return cls(
            script_sources=tuple(csp_settings.get("SCRIPT_SOURCES", ())),
            style_sources=tuple(csp_settings.get("STYLE_SOURCES", ())),
            font_sources=tuple(csp_settings.get("FONT_SOURCES", ())),
        )

    def directives(self, nonce: str) -> List[Tuple[str, Sequence[str]]]:
        """Return (directive, sources) pairs in header order."""
        nonce_source = f"'nonce-{nonce}'"
        return [
            ("default-src", ["'self'"]),
            ("script-src", ["'self'", nonce_source, *self.script_sources]),
            ("style-src", ["'self'", nonce_source, "'unsafe-inline'", *self.style_sources]),
            ("font-src", ["'self'", *self.font_sources]),
            ("connect-src", ["'self'"]),
            ("img-src", ["'self'", "data:"]),
            ("object-src", ["'none'"]),
            ("base-uri", ["'self'"]),
            ("form-action", ["'self'"]),
            ("frame-ancestors", ["'none'"]),
        ]

    def render(self, nonce: str) -> str:
        """Render the header value on a single line."""
        return " ".join(
            f"{name} {' '.join(sources)};" for name, sources in self.directives(nonce)
        )
