"""Lightweight markdown-to-HTML conversion for exported content."""

import re
from html import escape
from typing import List, Pattern, Tuple

# Applied in order; headings and bullets consume the line break after them.
FORMAT_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.*?)\*"), r"<em>\1</em>"),
    (re.compile(r"\n"), "<br />"),
    (re.compile(r"#{3}\s+(.*?)(<br />|$)"), r"<h3>\1</h3>"),
    (re.compile(r"#{2}\s+(.*?)(<br />|$)"), r"<h2>\1</h2>"),
    (re.compile(r"#{1}\s+(.*?)(<br />|$)"), r"<h1>\1</h1>"),
    (re.compile(r"•\s+(.*?)(<br />|$)"), r"<li>\1</li>"),
    (re.compile(r"(<li>.*?</li>)"), r"<ul>\1</ul>"),
]

HTML_DOCUMENT = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>{title}</title>
</head>
<body>
{body}
</body>
</html>
"""


def format_content(content: str | None) -> str:
    """Convert generated markdown-ish text to an HTML fragment.

    Only the handful of constructs the generator emits are handled:
    bold, italics, line breaks, three heading levels and bullets.
    """
    if not content:
        return ""

    html = content
    for pattern, replacement in FORMAT_RULES:
        html = pattern.sub(replacement, html)
    return html


def render_html_document(title: str, content: str) -> str:
    """Wrap formatted content in a standalone HTML page."""
    return HTML_DOCUMENT.format(title=escape(title), body=format_content(content))
