"""Type registry for typea.

Maps type identifiers to bundles of named check functions. Every bundle
carries a mandatory `type` check that performs the baseline coercion; the
other checks are invoked when a typed field names them as options.

A type can be referenced three ways:
- by its TypeKey (the identity minted at registration)
- by its name string (e.g. "String"), inside typed fields
- by a Python class aliased to it (e.g. `str` -> String)

Entries are never removed: `use()` only creates types or merges checks into
existing ones.
"""

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping

from typea.checks.common import COMMON_CHECKS
from typea.types import Check

logger = logging.getLogger(__name__)


class TypeKey:
    """Interned identity of a registered type.

    Two keys are equal only if they are the same object, so a key minted by
    one registry never collides with a same-named key minted elsewhere.
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"TypeKey({self.name!r})"


@dataclass(frozen=True)
class RegisteredType:
    """A type's check bundle.

    Attributes:
        key: The type's identity
        checks: Read-only mapping of check name to check function
    """

    key: TypeKey
    checks: Mapping[str, Check]

    @property
    def name(self) -> str:
        return self.key.name

    def coerce(self, data: Any, origin: Any) -> Any:
        """Run the mandatory `type` check."""
        return self.checks["type"](data, self.key, origin)


class TypeNamespace(Mapping[str, TypeKey]):
    """Read-only view of a registry's type keys.

    Supports both `types.String` and `types["String"]`. It is a live view:
    types registered later show up here too.
    """

    def __init__(self, names: Mapping[str, TypeKey]):
        object.__setattr__(self, "_names", names)

    def __getitem__(self, name: str) -> TypeKey:
        return self._names[name]

    def __getattr__(self, name: str) -> TypeKey:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._names[name]
        except KeyError:
            raise AttributeError(f"No registered type named '{name}'") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Type namespace is read-only; use TypeRegistry.use()")

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"TypeNamespace({sorted(self._names)})"


class TypeRegistry:
    """Registry of validation types.

    Registries are plain objects so tests can build isolated ones; the
    package-level functions operate on a shared default instance.

    Mutations are serialized with a lock. Check bundles are replaced rather
    than mutated, so validations running concurrently with `use()` always
    see a complete bundle.

    Example:
        registry = TypeRegistry()
        even = registry.use("Even", {"type": check_even})
        registry.get("Even").coerce(4, None)  # 4
    """

    def __init__(self) -> None:
        self._types: dict[TypeKey, RegisteredType] = {}
        self._names: dict[str, TypeKey] = {}
        self._aliases: dict[type, TypeKey] = {}
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def resolve(self, identifier: Any) -> TypeKey | None:
        """Resolve a TypeKey, name string, or aliased class to a TypeKey."""
        if isinstance(identifier, TypeKey):
            return identifier if identifier in self._types else None
        if isinstance(identifier, str):
            return self._names.get(identifier)
        if isinstance(identifier, type):
            return self._aliases.get(identifier)
        return None

    def get(self, identifier: Any) -> RegisteredType | None:
        """Get a registered type, or None if the identifier is unknown."""
        key = self.resolve(identifier)
        if key is None:
            return None
        return self._types.get(key)

    def is_registered(self, identifier: Any) -> bool:
        """Check if an identifier resolves to a registered type."""
        return self.resolve(identifier) is not None

    def list_registered(self) -> list[str]:
        """List all registered type names."""
        return sorted(self._names)

    @property
    def types(self) -> TypeNamespace:
        """Read-only namespace of type keys by name."""
        return TypeNamespace(self._names)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def use(self, identifier: Any, checks: Mapping[str, Check] | None = None) -> TypeKey | None:
        """Register a new type or extend an existing one.

        - Falsy identifier: no-op.
        - Known identifier (key, name or aliased class): merge `checks` into
          its bundle. Same-named checks are replaced, the rest are kept.
        - Unknown string: mint a new type with the common checks plus `checks`.
        - Unknown TypeKey: adopt it under its own name.
        - Unknown class: mint a type named after the class and alias the class.

        Args:
            identifier: TypeKey, type name, or Python class
            checks: Check functions by name

        Returns:
            The TypeKey of the created or extended type, or None for a no-op
        """
        if not identifier:
            return None
        checks = dict(checks or {})

        with self._lock:
            key = self.resolve(identifier)
            if key is not None:
                self._merge(key, checks)
                return key

            if isinstance(identifier, str):
                key = TypeKey(identifier)
            elif isinstance(identifier, TypeKey):
                key = identifier
            elif isinstance(identifier, type):
                key = self._names.get(identifier.__name__) or TypeKey(identifier.__name__)
                self._aliases[identifier] = key
                logger.info("Aliased class %s to type %s", identifier.__qualname__, key.name)
                if key in self._types:
                    self._merge(key, checks)
                    return key
            else:
                raise TypeError(
                    f"Cannot register type identifier of kind {type(identifier).__name__}; "
                    "expected a name, TypeKey, or class"
                )

            if key.name in self._names:
                raise ValueError(f"Type name '{key.name}' is already registered to another key")

            self._names[key.name] = key
            self._types[key] = RegisteredType(key, MappingProxyType({**COMMON_CHECKS, **checks}))
            logger.debug("Registered type %s with checks %s", key.name, sorted(self._types[key].checks))
            return key

    def alias(self, cls: type, identifier: Any) -> TypeKey:
        """Make a Python class refer to an existing registered type.

        Raises:
            ValueError: If the identifier is not registered
        """
        with self._lock:
            key = self.resolve(identifier)
            if key is None:
                raise ValueError(f"Cannot alias {cls.__qualname__}: type {identifier!r} is not registered")
            self._aliases[cls] = key
            return key

    def clear(self) -> None:
        """Clear all registrations. Primarily for testing."""
        with self._lock:
            self._types.clear()
            self._names.clear()
            self._aliases.clear()

    def _merge(self, key: TypeKey, checks: dict[str, Check]) -> None:
        current = self._types[key]
        replaced = sorted(name for name in checks if name in current.checks)
        merged = MappingProxyType({**current.checks, **checks})
        self._types[key] = RegisteredType(key, merged)
        if replaced:
            logger.debug("Extended type %s, replacing checks %s", key.name, replaced)
        else:
            logger.debug("Extended type %s with checks %s", key.name, sorted(checks))
