"""
Filesystem implementation of TemplateStore.
"""

import logging
from pathlib import Path
from typing import Union

from core.domain.exceptions import TemplateNotFoundError, TemplateReadError
from embed.ports.template_store import TemplateStore

logger = logging.getLogger(__name__)


class FileTemplateStore(TemplateStore):
    """
    Loads templates from a directory on disk.

    Each load is a single read with no caching and no retry.
    """

    def __init__(self, directory: Union[str, Path]):
        """Initialize store rooted at ``directory``."""
        self.directory = Path(directory)

    def _resolve(self, name: str) -> Path:
        """Resolve a template name, refusing paths outside the directory."""
        root = self.directory.resolve()
        path = (root / name).resolve()
        if root != path and root not in path.parents:
            logger.error(
                "Embed template path escapes template directory",
                extra={"template_name": name, "template_dir": str(root)},
            )
            raise TemplateNotFoundError(f"Template {name!r} is outside the template directory")
        return path

    def load(self, name: str) -> str:
        """Read a template as UTF-8 text."""
        path = self._resolve(name)
        try:
            with open(path, encoding="utf-8") as template_file:
                return template_file.read()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
            logger.error(
                "Embed template not found",
                extra={"template_path": str(path), "cwd": str(Path.cwd()), "error": str(exc)},
            )
            raise TemplateNotFoundError(f"Template not found at {path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            logger.error(
                "Embed template could not be read",
                extra={"template_path": str(path), "error": str(exc)},
                exc_info=True,
            )
            raise TemplateReadError(f"Template at {path} could not be read: {exc}") from exc
