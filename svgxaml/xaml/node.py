"""Output tree node — one XAML element plus its properties and children."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

PropertyValue = Union[str, "XamlNode"]


@dataclass
class XamlNode:
    """A node of the produced template.

    ``properties`` is ordered. A ``str`` value becomes an XML attribute; a nested
    ``XamlNode`` becomes a property element ``<Kind.Name>`` unless the name is
    already qualified (contains a dot).
    """

    kind: str
    properties: dict[str, PropertyValue] = field(default_factory=dict)
    children: list[XamlNode] = field(default_factory=list)

    def set(self, name: str, value: PropertyValue | None) -> None:
        """Set a property, overwriting in place. ``None`` leaves the node untouched."""
        if value is None:
            return
        self.properties[name] = value

    def unset(self, name: str) -> None:
        self.properties.pop(name, None)

    def get(self, name: str) -> PropertyValue | None:
        return self.properties.get(name)

    def append(self, child: XamlNode) -> None:
        self.children.append(child)
