"""
Rendering tests — one Fortune, every supported content type.
"""

import json

import pytest

from fortune_store.models import Fortune
from fortune_store.render import render

COOKIE = Fortune("art", 2, ("Art is <long>,", "life & short."))


class TestRender:

    def test_text(self):
        assert render(COOKIE, "text/plain") == (
            "category=art\nnumber=2\nArt is <long>,\nlife & short.")

    @pytest.mark.parametrize("ctype", ["application/xml", "text/xml", "xml"])
    def test_xml(self, ctype):
        assert render(COOKIE, ctype) == (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
            '<fortune category="art" number="2"><lines>'
            "<line>Art is &lt;long&gt;,</line><line>life &amp; short.</line>"
            "</lines></fortune>")

    @pytest.mark.parametrize("ctype", ["text/html", "application/xhtml+xml", "html"])
    def test_html(self, ctype):
        assert render(COOKIE, ctype) == (
            "<div><p>Cookie number 2 selected from category art."
            "<br />Art is &lt;long&gt;,<br />life &amp; short.<br /></p></div>")

    def test_json(self):
        assert json.loads(render(COOKIE, "json")) == {
            "category": "art", "number": 2, "lines": ["Art is <long>,", "life & short."]}

    def test_parameters_ignored(self):
        assert render(COOKIE, "text/plain; charset=utf-8").startswith("category=art")

    def test_default_is_text(self):
        assert render(COOKIE) == render(COOKIE, "text")

    def test_unsupported(self):
        with pytest.raises(ValueError, match="Cannot create content-type"):
            render(COOKIE, "image/png")

    def test_xml_quotes_category(self):
        cookie = Fortune('say "hi"', 1, ("x",))
        assert '<fortune category="say &quot;hi&quot;" number="1">' in render(cookie, "xml")

    @pytest.mark.parametrize("ctype", ["JSON", "Xml", "Text/Plain", " HTML "])
    def test_case_insensitive(self, ctype):
        assert render(COOKIE, ctype) == render(COOKIE, ctype.strip().lower())
