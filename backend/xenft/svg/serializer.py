"""Write SVG markup from element dictionaries."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr

SVG_NS = "http://www.w3.org/2000/svg"

# Keys of an element dict that are not SVG attributes.
_RESERVED = ("tag", "text", "children")


def fmt_num(value: float, places: int = 2) -> str:
    """Compact number formatting: 200.0 -> "200", 12.3456 -> "12.35"."""
    rounded = round(float(value), places)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{places}f}".rstrip("0")


def _attr_str(elem: dict[str, Any]) -> str:
    parts = []
    for key, value in elem.items():
        if key in _RESERVED or value is None:
            continue
        if isinstance(value, float):
            value = fmt_num(value)
        parts.append(f"{key}={quoteattr(str(value))}")
    return " ".join(parts)


def serialize_element(elem: dict[str, Any], indent: str = "  ") -> list[str]:
    tag = elem.get("tag", "path")
    attr_str = _attr_str(elem)
    open_tag = f"<{tag} {attr_str}" if attr_str else f"<{tag}"

    children = elem.get("children")
    if children:
        lines = [f"{indent}{open_tag}>"]
        for child in children:
            lines.extend(serialize_element(child, indent + "  "))
        lines.append(f"{indent}</{tag}>")
        return lines
    if "text" in elem:
        return [f"{indent}{open_tag}>{escape(str(elem['text']))}</{tag}>"]
    return [f"{indent}{open_tag} />"]


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 400,
    canvas_h: float = 400,
    title: str = "",
    description: str = "",
    xml_declaration: bool = False,
) -> str:
    """Generate SVG markup from element definitions."""
    w, h = fmt_num(canvas_w), fmt_num(canvas_h)
    lines = []
    if xml_declaration:
        lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" xmlns="{SVG_NS}" role="img">'
    )

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    for elem in elements:
        lines.extend(serialize_element(elem))

    lines.append("</svg>")
    return "\n".join(lines)
