"""Infrastructure layer.

This package provides the concrete adapters behind the application ports:
console and null loggers, CSV reading and writing, and the dependency
container that wires them together.
"""

from .container import DependencyContainer

__all__ = ["DependencyContainer"]
