"""
Template store port (interface).

This defines the contract for loading the embed page template.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod


class TemplateStore(ABC):
    """
    Abstract store for embed templates.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    def load(self, name: str) -> str:
        """
        Load a template by name.

        Args:
            name: Template name

        Returns:
            Template text

        Raises:
            TemplateNotFoundError: If the template does not exist
            TemplateReadError: If the template exists but cannot be read
        """
        pass
