"""Development-only component inspector.

The overlay itself lives in ``static/vf-inspector.js`` and runs in the
browser. This module decides when it is served and injects the script
tag into HTML pages rendered while ``ENVIRONMENT=development``.
"""

import codecs
import logging
import re
from html.parser import HTMLParser
from pathlib import Path
from typing import Callable, Dict, List, Optional

from fastapi import Request
from fastapi.responses import Response

from ..core.config import Config


logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"
SCRIPT_PATH = STATIC_DIR / "vf-inspector.js"
SCRIPT_URL = "/vf-inspector.js"
SCRIPT_TAG = f'<script type="module" src="{SCRIPT_URL}"></script>'

COMPONENT_ATTR = "data-vf-component"
FILE_ATTR = "data-vf-file"

_BODY_CLOSE = re.compile(r"</body\s*>", re.IGNORECASE)
_SCRIPT_SRC = re.compile(r"""<script\b[^>]*\bsrc\s*=\s*["']?/vf-inspector\.js["'\s>]""", re.IGNORECASE)
_CHARSET = re.compile(r"charset\s*=\s*[\"']?([\w.:-]+)", re.IGNORECASE)


def inject_script(html: str) -> str:
    """Insert the inspector script tag before the closing body tag."""
    if _SCRIPT_SRC.search(html):
        return html
    matches = list(_BODY_CLOSE.finditer(html))
    if not matches:
        return html + SCRIPT_TAG
    last = matches[-1]
    return html[:last.start()] + SCRIPT_TAG + html[last.start():]


class _ComponentCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.components: List[Dict[str, Optional[str]]] = []

    def handle_starttag(self, tag, attrs):
        values = dict(attrs)
        if COMPONENT_ATTR in values:
            self.components.append({
                "component": values.get(COMPONENT_ATTR),
                "file": values.get(FILE_ATTR),
            })

    handle_startendtag = handle_starttag


def component_tree(html: str) -> List[Dict[str, Optional[str]]]:
    """Annotated components in document order, as the overlay reports them."""
    collector = _ComponentCollector()
    collector.feed(html)
    collector.close()
    return collector.components


def _charset(content_type: str) -> str:
    """Charset named in a Content-Type header, utf-8 when absent or unknown."""
    match = _CHARSET.search(content_type)
    if not match:
        return "utf-8"
    try:
        return codecs.lookup(match.group(1)).name
    except LookupError:
        return "utf-8"


async def inject_inspector(request: Request, call_next: Callable):
    response = await call_next(request)
    if not Config.is_development():
        return response

    content_type = response.headers.get("content-type", "")
    if not content_type.startswith("text/html"):
        return response

    charset = _charset(content_type)
    body = b"".join([chunk async for chunk in response.body_iterator])
    html = inject_script(body.decode(charset, errors="replace"))
    content = html.encode(charset, errors="xmlcharrefreplace")

    # Keep repeated headers such as Set-Cookie; only the length changes
    injected = Response(content=content, status_code=response.status_code)
    injected.raw_headers = [
        (name, value) for name, value in response.raw_headers if name.lower() != b"content-length"
    ] + [(b"content-length", str(len(content)).encode("latin-1"))]
    return injected
