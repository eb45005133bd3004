"""Write compact XAML markup from an output node tree."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgxaml.xaml.node import XamlNode

XAML_NS = "http://schemas.microsoft.com/winfx/2006/xaml/presentation"
XAML_X_NS = "http://schemas.microsoft.com/winfx/2006/xaml"

# Presentation elements serialize unprefixed, language attributes under x:.
# ElementTree keeps one process-wide prefix map and tostring() takes no per-call
# map, so this registers the two XAML URIs globally. No other URI is touched.
ET.register_namespace("", XAML_NS)
ET.register_namespace("x", XAML_X_NS)

# Declarations stripped from the output so the fragment can be embedded in a host
# document that already declares both namespaces.
_NAMESPACE_DECLARATIONS = (
    f' xmlns="{XAML_NS}"',
    f' xmlns:x="{XAML_X_NS}"',
)


def to_element(node: XamlNode) -> ET.Element:
    """Build the ElementTree equivalent of ``node``.

    String properties become attributes in insertion order. Node-valued properties
    become property elements ahead of the regular children.
    """
    el = ET.Element(f"{{{XAML_NS}}}{node.kind}")

    property_elements: list[tuple[str, XamlNode]] = []
    for name, value in node.properties.items():
        if isinstance(value, XamlNode):
            property_elements.append((name, value))
        else:
            el.set(_attribute_name(name), value)

    for name, value in property_elements:
        qualified = name if "." in name else f"{node.kind}.{name}"
        holder = ET.SubElement(el, f"{{{XAML_NS}}}{qualified}")
        holder.append(to_element(value))

    for child in node.children:
        el.append(to_element(child))

    return el


def serialize_xaml(node: XamlNode) -> str:
    """Serialize without formatting and strip the default namespace declarations."""
    text = ET.tostring(to_element(node), encoding="unicode")
    for declaration in _NAMESPACE_DECLARATIONS:
        text = text.replace(declaration, "")
    return text


def _attribute_name(name: str) -> str:
    if name.startswith("x:"):
        return f"{{{XAML_X_NS}}}{name[2:]}"
    return name
