"""Named plugin registry.

Built-in implementations are declared as ``"module:ClassName"`` import
paths and only imported the first time they are requested; custom
implementations are registered as classes at runtime.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class PluginFactory(Generic[T]):
    """Create plugin instances by name.

    Subclasses set ``_builtins`` (name -> import path), ``_default_type``
    and ``_entity_name``, and get their own ``_registry`` automatically.
    """

    _builtins: ClassVar[dict[str, str]] = {}
    _default_type: ClassVar[str]
    _entity_name: ClassVar[str] = "plugin"
    _registry: ClassVar[dict[str, type[Any]]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._registry = {}

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Register an implementation class under a name, replacing any built-in."""
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Drop a runtime registration; built-ins stay available."""
        cls._registry.pop(name, None)

    @classmethod
    def resolve(cls, name: str) -> type[T]:
        """Look up the implementation class for a name.

        Raises:
            ValueError: If nothing is registered under the name.
        """
        if name not in cls._registry and name in cls._builtins:
            module_path, _, class_name = cls._builtins[name].partition(":")
            cls._registry[name] = getattr(import_module(module_path), class_name)

        try:
            return cls._registry[name]
        except KeyError:
            available = ", ".join(cls.available_types())
            raise ValueError(
                f"Unknown {cls._entity_name} type: {name}. Available types: {available}"
            ) from None

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> T:
        """Instantiate the named implementation (the default type if None)."""
        impl_class = cls.resolve(name if name is not None else cls._default_type)
        return impl_class(**kwargs)

    @classmethod
    def available_types(cls) -> list[str]:
        """Get the sorted names of built-in and registered implementations."""
        return sorted({*cls._builtins, *cls._registry})
