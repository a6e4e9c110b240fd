"""
Attribute base class, target markers and the reflection-based reader.

Attributes are stored on the decorated class itself under
``__temporal_support_attributes__`` and only ever read from the class's own
``__dict__``, so a subclass never sees its parent's attributes twice.
"""

import inspect
import logging
import weakref
from typing import Dict, Iterator, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict

from ..exceptions import AttributeUsageError

logger = logging.getLogger(__name__)

_ATTRIBUTES = "__temporal_support_attributes__"

T = TypeVar("T")


class AttributeForActivity:
    """Marker: the attribute applies to activity classes."""


class AttributeForWorkflow:
    """Marker: the attribute applies to workflow classes."""


class Attribute(BaseModel):
    """
    Base class for metadata attributes.

    An attribute instance is a class decorator: applying it records the
    attribute on the class and returns the class unchanged.
    """

    model_config = ConfigDict(frozen=True)

    def __call__(self, target: Type[T]) -> Type[T]:
        if not inspect.isclass(target):
            raise AttributeUsageError(
                f"{type(self).__name__} can only decorate classes, got {target!r}"
            )
        own = target.__dict__.get(_ATTRIBUTES, ())
        if any(type(attribute) is type(self) for attribute in own):
            raise AttributeUsageError(
                f"{type(self).__name__} is not repeatable, already applied to {target.__qualname__}"
            )
        # Decorators apply bottom-up, prepend to keep declaration order
        setattr(target, _ATTRIBUTES, (self,) + own)
        AttributeReader.clear_cache()
        return target


class AttributeCollection:
    """Immutable, ordered view over the attributes found for a class."""

    def __init__(self, attributes: Sequence[Attribute] = ()):
        self._attributes: Tuple[Attribute, ...] = tuple(attributes)

    def first(self, attribute_type: Type[T]) -> Optional[T]:
        """Return the nearest attribute of ``attribute_type``, or None."""
        for attribute in self._attributes:
            if isinstance(attribute, attribute_type):
                return attribute
        return None

    def all(self, attribute_type: Type[T]) -> Tuple[T, ...]:
        """Return every attribute of ``attribute_type`` in nearest-first order."""
        return tuple(a for a in self._attributes if isinstance(a, attribute_type))

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"AttributeCollection({list(self._attributes)!r})"


class AttributeReader:
    """
    Reads attributes from a class and its whole parent hierarchy.

    The hierarchy is walked in method resolution order, so the class's own
    attributes come first, then parent classes, then interface-like bases
    (abstract classes and protocols) further up.
    """

    # Entries go away with their class
    _cache: "weakref.WeakKeyDictionary[type, Dict[Tuple[type, ...], AttributeCollection]]" = (
        weakref.WeakKeyDictionary()
    )

    @classmethod
    def collection_from_class(
        cls,
        target: type,
        filters: Sequence[type] = (),
    ) -> AttributeCollection:
        """
        Collect the attributes declared on ``target`` and its ancestors.

        Args:
            target: The class to inspect
            filters: Keep only attributes that are instances of at least one
                of these types; keep everything when empty

        Returns:
            AttributeCollection in nearest-first order
        """
        if not inspect.isclass(target):
            raise AttributeUsageError(f"Attributes can only be read from classes, got {target!r}")

        key = tuple(filters)
        per_class = cls._cache.setdefault(target, {})
        cached = per_class.get(key)
        if cached is not None:
            return cached

        found = []
        for klass in inspect.getmro(target):
            if klass is object:
                continue
            for attribute in klass.__dict__.get(_ATTRIBUTES, ()):
                if not filters or isinstance(attribute, tuple(filters)):
                    found.append(attribute)

        collection = AttributeCollection(found)
        per_class[key] = collection
        logger.debug(f"Read {len(collection)} attribute(s) from {target.__qualname__}")
        return collection

    @classmethod
    def clear_cache(cls) -> None:
        cls._cache.clear()
