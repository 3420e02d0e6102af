"""
Dependency Injection

Wires repositories, use cases and presenters together.
"""

from .dependency_injection import DependencyContainer, get_container, reset_container

__all__ = ["DependencyContainer", "get_container", "reset_container"]
