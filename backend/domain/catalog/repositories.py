"""
Catalog Domain - Repository Interfaces (Ports).

These are abstract interfaces that define how the domain reads the remote
catalog store. The actual implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import List

from .entities import Calculator, CalculatorCategory


class CatalogSource(ABC):
    """
    Read-only port onto the remote calculator catalog.

    Implementations may raise anything on network, permission or data
    errors; the resolver treats every failure as "remote unavailable".
    Returned categories carry no calculators, the resolver attaches them.
    """

    @abstractmethod
    async def list_calculators(self) -> List[Calculator]:
        """List every calculator document, in store order."""
        pass

    @abstractmethod
    async def list_categories(self) -> List[CalculatorCategory]:
        """List every category document, ordered by name."""
        pass
