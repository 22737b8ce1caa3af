"""Base calendar component with a whitelisted property bag."""

import logging
from abc import ABC, abstractmethod

from vcal import serialization
from vcal.exceptions import (
    InvalidParameterTypeError,
    MissingParametersError,
    UnsupportedPropertyError,
)
from vcal.models.data import ComponentData
from vcal.serialization import Block

logger = logging.getLogger(__name__)


class VObject(ABC):
    """Base of every calendar component.

    Supported properties, and their initial values, come from
    :meth:`defaults`. The property map always holds exactly those keys;
    ``add``/``set``/``remove`` only change values. Removing a property sets
    it to ``None``, which keeps it out of the serialized text.

    Only variants with ``container = True`` can hold child components.
    """

    #: whether this variant may hold child components
    container: bool = False

    def __init__(self, serialized: str | None = None):
        """Create a component from defaults, or from serialized text."""
        self._properties: dict[str, str | None] = self.defaults()
        self._children: list["VObject"] = []

        if serialized is not None:
            self.unserialize(serialized)

    @abstractmethod
    def type(self) -> str:
        """Type identifier, e.g. ``VCALENDAR``."""

    @abstractmethod
    def defaults(self) -> dict[str, str | None]:
        """Supported property names mapped to their default values.

        Returns a fresh dict on every call; it doubles as the whitelist
        used by ``add`` and ``remove``.
        """

    def add(self, *args) -> "VObject":
        """Add a child component, or set a property.

        Either ``add(component)`` or ``add(name, value)``. Returns ``self``
        so calls can be chained.

        Raises:
            MissingParametersError: no component and fewer than two arguments
            InvalidParameterTypeError: name or value is not a string, or a
                component is added to a variant that cannot hold children
            UnsupportedPropertyError: name is not a supported property
        """
        if args and isinstance(args[0], VObject):
            if not self.container:
                raise InvalidParameterTypeError(
                    f"{self.type()} cannot contain other components."
                )
            self._children.append(args[0])
            return self

        if len(args) < 2:
            raise MissingParametersError(
                "Missing parameters: at least two are required."
            )

        name, value = args[0], args[1]
        if not isinstance(name, str) or not isinstance(value, str):
            raise InvalidParameterTypeError(
                "Invalid parameter: argument has to be a string."
            )

        self._properties[self._supported_name(name)] = value
        return self

    def set(self, name: str, value: str) -> "VObject":
        """Set a property; alias for ``add(name, value)``."""
        return self.add(name, value)

    def remove(self, *args) -> "VObject":
        """Remove a child component, or unset a property.

        Removing a component that is not a child is a no-op. Children are
        matched by identity, not by equality.
        """
        if not args:
            raise MissingParametersError("Missing parameters: one is required.")

        target = args[0]
        if isinstance(target, VObject):
            for index, child in enumerate(self._children):
                if child is target:
                    del self._children[index]
                    break
            return self

        if not isinstance(target, str):
            raise InvalidParameterTypeError(
                "Invalid parameter: argument has to be a string."
            )

        self._properties[self._supported_name(target)] = None
        return self

    def properties(self) -> dict[str, str | None]:
        """Current property values, in whitelist order."""
        return dict(self._properties)

    def children(self) -> list["VObject"]:
        """Child components in insertion order."""
        return list(self._children)

    # name used by older callers
    objects = children

    def serialize(self) -> str:
        """Serialize this component and its children to text."""
        return serialization.serialize(self)

    def unserialize(self, serialized: str) -> None:
        """Replace this component's state with the parsed text.

        Existing children are discarded.
        """
        self._load_block(serialization.scan(serialized))

    def to_data(self) -> ComponentData:
        """Structured copy of this component tree."""
        return ComponentData(
            type=self.type(),
            properties=self.properties(),
            children=[child.to_data() for child in self._children],
        )

    def _supported_name(self, name: str) -> str:
        key = name.upper()
        if key not in self.defaults():
            raise UnsupportedPropertyError(
                f"Invalid parameter: property '{name}' is not supported."
            )
        return key

    def _load_block(self, block: Block) -> None:
        # keys are matched verbatim; unknown keys are ignored
        properties = self.defaults()
        for name, value in block.properties:
            if name in properties:
                properties[name] = value
            else:
                logger.debug(f"Ignoring unsupported {self.type()} property {name!r}")
        self._properties = properties

        self._children = []
        if self.container:
            for child_block in block.children:
                self._children.append(self._make_child(child_block))

    def _make_child(self, block: Block) -> "VObject":
        raise NotImplementedError(f"{self.type()} cannot contain other components.")

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} properties={len(self._properties)} "
            f"children={len(self._children)}>"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VObject):
            return NotImplemented
        return (
            self.type() == other.type()
            and self._properties == other._properties
            and self._children == other._children
        )

    __hash__ = None
