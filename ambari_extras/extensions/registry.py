"""
Extension Registry - Dynamic extension registration (OCP).

The orchestrator composes extensions from a registered list: adding a
new extension type requires only registration, not code modification.

Thread-safe singleton implementation.
"""

import threading
from typing import Any, Callable, Dict, Iterable, Optional, Type, TypeVar

from loguru import logger

from ambari_extras.config.models import ExtensionDefinition
from ambari_extras.core.exceptions import ExtensionNotFoundError

T = TypeVar("T")


class ExtensionRegistry:
    """
    Registry for dynamic extension registration and lookup.

    Usage:
        registry = get_extension_registry()

        # Register extension types
        registry.register("ranger", RangerExtension)

        # Or use decorator
        @registry.extension("knox")
        class KnoxExtension(BaseExtension):
            ...

        # Instantiate from a definition
        extension = registry.create(definition)
    """

    _instance: Optional["ExtensionRegistry"] = None
    _lock: threading.Lock = threading.Lock()
    _extensions: Dict[str, Type[Any]]
    _factories: Dict[str, Callable[..., Any]]
    _registry_lock: threading.RLock

    def __new__(cls) -> "ExtensionRegistry":
        """Thread-safe singleton pattern for global registry access."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._extensions = {}
                    instance._factories = {}
                    instance._registry_lock = threading.RLock()
                    cls._instance = instance
        return cls._instance

    def register(
        self,
        name: str,
        extension_class: Type[T],
        factory: Optional[Callable[..., T]] = None,
    ) -> None:
        """
        Register an extension class by type name (thread-safe).

        Args:
            name: Extension type name (e.g., "ranger")
            extension_class: The extension class to register
            factory: Optional factory function for custom instantiation
        """
        with self._registry_lock:
            if name in self._extensions:
                logger.warning(f"⚠️ Extension type '{name}' already registered, overwriting")

            self._extensions[name] = extension_class
            if factory:
                self._factories[name] = factory
            else:
                self._factories.pop(name, None)

        logger.debug(f"🧩 Registered extension type: {name}")

    def extension(self, name: str) -> Callable[[Type[T]], Type[T]]:
        """
        Decorator for extension registration.

        Usage:
            @registry.extension("ranger")
            class RangerExtension(BaseExtension):
                ...
        """

        def decorator(cls: Type[T]) -> Type[T]:
            self.register(name, cls)
            return cls

        return decorator

    def get(self, name: str, **kwargs) -> Any:
        """
        Instantiate an extension by type name (thread-safe).

        Args:
            name: Extension type name
            **kwargs: Arguments to pass to the extension constructor

        Raises:
            ExtensionNotFoundError: If the type is not registered
        """
        with self._registry_lock:
            if name not in self._extensions:
                raise ExtensionNotFoundError(name, list(self._extensions.keys()))

            extension_class = self._extensions[name]
            factory = self._factories.get(name)

        if factory:
            return factory(**kwargs)

        return extension_class(**kwargs)

    def create(self, definition: ExtensionDefinition) -> Any:
        """Instantiate the extension described by a definition."""
        return self.get(
            definition.type,
            config=definition.to_config(),
            options=definition.options,
        )

    def has(self, name: str) -> bool:
        """Check if an extension type is registered (thread-safe)."""
        with self._registry_lock:
            return name in self._extensions

    def list_all(self) -> list[str]:
        """List all registered extension type names (thread-safe)."""
        with self._registry_lock:
            return list(self._extensions.keys())

    def list_with_descriptions(self) -> Dict[str, str]:
        """
        List extension types with their docstring descriptions.

        Returns:
            Dict mapping type name to the first docstring line
        """
        with self._registry_lock:
            result = {}
            for name, cls in self._extensions.items():
                doc = cls.__doc__ or "No description"
                result[name] = doc.strip().split("\n")[0]
            return result

    def clear(self) -> None:
        """Clear all registered extension types (useful for testing)."""
        with self._registry_lock:
            self._extensions.clear()
            self._factories.clear()

    @classmethod
    def reset_instance(cls) -> None:
        """Reset singleton instance (useful for testing)."""
        global _registry
        with cls._lock:
            cls._instance = None
        with _registry_lock:
            _registry = None


_registry_lock = threading.Lock()
_registry: Optional[ExtensionRegistry] = None


def get_extension_registry() -> ExtensionRegistry:
    """Get the global extension registry (thread-safe)."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = ExtensionRegistry()
    return _registry


def register_builtin_extensions() -> None:
    """
    Register all built-in extension types.

    New built-in extensions only need to be added here.
    """
    registry = get_extension_registry()

    # Lazy imports to avoid circular dependencies
    from ambari_extras.extensions.generic import GenericExtension
    from ambari_extras.extensions.ranger import RangerExtension

    registry.register("generic", GenericExtension)
    registry.register("ranger", RangerExtension)

    logger.info(f"🧩 Registered {len(registry.list_all())} built-in extension types")


def build_extensions(
    definitions: Iterable[ExtensionDefinition],
    registry: Optional[ExtensionRegistry] = None,
) -> list[Any]:
    """
    Instantiate extensions in definition order.

    Raises:
        ExtensionNotFoundError: If a definition names an unregistered type
    """
    registry = registry or get_extension_registry()
    extensions = [registry.create(definition) for definition in definitions]
    logger.debug(f"🧩 Built {len(extensions)} extensions")
    return extensions
