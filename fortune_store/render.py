# ==================================================
# fortune_store/render.py
# ==================================================
"""Turn a Fortune into text for a given content type."""
from __future__ import annotations

import json
from xml.sax.saxutils import escape

from .models import Fortune

XML_PREAMBLE = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
BR = "<br />"
ATTR_ENTITIES = {'"': "&quot;"}


def as_text(f: Fortune) -> str:
    head = f"category={f.category}\nnumber={f.number}\n"
    return head + "\n".join(f.lines)


def as_xml(f: Fortune) -> str:
    lines = "".join(f"<line>{escape(line)}</line>" for line in f.lines)
    return (f'{XML_PREAMBLE}<fortune category="{escape(f.category, ATTR_ENTITIES)}" number="{f.number}">'
            f"<lines>{lines}</lines></fortune>")


def as_html(f: Fortune) -> str:
    lines = BR + BR.join(escape(line) for line in f.lines) + BR
    return (f"<div><p>Cookie number {f.number} selected from category "
            f"{escape(f.category)}.{lines}</p></div>")


def as_json(f: Fortune) -> str:
    return json.dumps({"category": f.category, "number": f.number,
                       "lines": list(f.lines)}, ensure_ascii=False)


RENDERERS = {
    "text/plain"           : as_text,
    "application/xml"      : as_xml,
    "text/xml"             : as_xml,
    "application/xhtml+xml": as_html,
    "text/html"            : as_html,
    "application/json"     : as_json,
}

ALIASES = {"text": "text/plain", "xml": "application/xml",
           "html": "text/html", "json": "application/json"}


def render(fortune: Fortune, content_type: str = "text/plain") -> str:
    key = content_type.split(";", 1)[0].strip().lower()
    key = ALIASES.get(key, key)
    try:
        renderer = RENDERERS[key]
    except KeyError:
        raise ValueError(f"Cannot create content-type [{content_type}] "
                         f"for fortune {fortune.category}#{fortune.number}") from None
    return renderer(fortune)
