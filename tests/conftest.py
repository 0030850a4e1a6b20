"""Shared helpers for inspecting rendered SVG documents."""

import xml.etree.ElementTree as ET

import pytest

NS = "{http://www.w3.org/2000/svg}"


class Svg:
    def __init__(self, document: str):
        self.document = document
        self.root = ET.fromstring(document)

    @property
    def width(self) -> float:
        return float(self.root.get("width"))

    @property
    def height(self) -> float:
        return float(self.root.get("height"))

    @property
    def rects(self) -> list[ET.Element]:
        return list(self.root.iter(f"{NS}rect"))

    @property
    def cells(self) -> list[ET.Element]:
        """Filled cell rectangles (border overlays have fill="none")."""
        return [r for r in self.rects if r.get("fill") != "none"]

    @property
    def borders(self) -> list[ET.Element]:
        return [r for r in self.rects if r.get("fill") == "none"]

    @property
    def texts(self) -> list[ET.Element]:
        return list(self.root.iter(f"{NS}text"))

    @property
    def text_values(self) -> list[str]:
        return [t.text for t in self.texts]


@pytest.fixture
def parse_svg():
    return Svg
