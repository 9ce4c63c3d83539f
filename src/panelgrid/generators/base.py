"""Base class for geometry generators."""

from abc import ABC, abstractmethod

from ..core.mesh import Mesh


class MeshGenerator(ABC):
    """Abstract base class for mesh generators.

    Provides a standard interface for generators that produce Mesh objects.
    Subclasses implement generate() to create specific geometry.
    """

    @abstractmethod
    def generate(self) -> Mesh:
        """Generate and return mesh geometry.

        Returns:
            A Mesh object containing the generated geometry.
        """
        pass
