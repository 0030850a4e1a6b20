"""Minimal SVG string assembly. Attribute names use snake_case -> kebab-case."""

from __future__ import annotations

from xml.sax.saxutils import escape, quoteattr

from .theme import FONTS

SVG_NS = "http://www.w3.org/2000/svg"


def fmt(value: object) -> str:
    """Render a number without trailing ``.0`` noise."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(round(value, 2))
    return str(value)


def element(tag: str, content: str | None = None, **attrs: object) -> str:
    parts = [f"{name.replace('_', '-')}={quoteattr(fmt(value))}" for name, value in attrs.items()]
    attr_str = (" " + " ".join(parts)) if parts else ""
    if content is None:
        return f"<{tag}{attr_str}/>"
    return f"<{tag}{attr_str}>{content}</{tag}>"


def rect(x: float, y: float, width: float, height: float, radius: float = 0, **attrs: object) -> str:
    if radius > 0:
        attrs = {"rx": radius, "ry": radius, **attrs}
    return element("rect", x=x, y=y, width=width, height=height, **attrs)


def text(content: object, x: float, y: float, **attrs: object) -> str:
    attrs = {"text_anchor": "middle", "font_family": FONTS["sans"], **attrs}
    return element("text", escape(str(content)), x=x, y=y, **attrs)


def document(width: float, height: float, body: str) -> str:
    return (
        f'<svg width="{fmt(width)}" height="{fmt(height)}" xmlns="{SVG_NS}">'
        f"{body}</svg>\n"
    )
