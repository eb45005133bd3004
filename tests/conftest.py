"""Shared test fixtures."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from svgxaml.xaml.serializer import XAML_NS, XAML_X_NS


# Sample SVGs

ICON_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="48" height="48" viewBox="0 0 24 24">
  <path d="M3 10a2 2 0 0 1 .7-1.5l7-6a2 2 0 0 1 2.6 0l7 6A2 2 0 0 1 21 10v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z" fill="#4ECDC4"/>
  <rect x="9" y="14" width="6" height="7" fill="#FF6B6B"/>
  <circle cx="12" cy="8" r="2" fill="white"/>
  <polygon points="2,10 12,2 22,10" fill="none" stroke="black"/>
</svg>'''

GROUPED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 50">
  <g transform="translate(10, 5)" stroke="black">
    <path d="M0 0 L10 10"/>
    <g>
      <rect x="1" y="2" width="3" height="4"/>
    </g>
  </g>
  <circle cx="50" cy="25" r="5"/>
</svg>'''

GRADIENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <defs>
    <linearGradient id="g1" x1="0%" y1="0%" x2="100%" y2="0%">
      <stop offset="0%" stop-color="#FFFFFF"/>
      <stop offset="100%" stop-color="#000000"/>
    </linearGradient>
  </defs>
  <rect width="10" height="10" fill="url(#g1)"/>
</svg>'''

UNSUPPORTED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <text x="1" y="10">Label</text>
  <switch>
    <path d="M0 0 L1 1"/>
  </switch>
  <ellipse cx="5" cy="5" rx="2" ry="1"/>
  <path d="M2 2 L4 4"/>
</svg>'''

NO_SIZE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <path d="M0 0 L1 1"/>
</svg>'''


def parse_xaml(xaml: str) -> ET.Element:
    """Parse converter output the way a host would: namespaces declared up front."""
    declared = xaml.replace(
        "<ControlTemplate ",
        f'<ControlTemplate xmlns="{XAML_NS}" xmlns:x="{XAML_X_NS}" ',
        1,
    )
    return ET.fromstring(declared)


def xaml_tag(name: str) -> str:
    return f"{{{XAML_NS}}}{name}"


@pytest.fixture
def icon_svg() -> str:
    return ICON_SVG


@pytest.fixture
def grouped_svg() -> str:
    return GROUPED_SVG


@pytest.fixture
def gradient_svg() -> str:
    return GRADIENT_SVG
