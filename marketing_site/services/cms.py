"""CMS abstraction layer.

This is the only module that knows about BCMS entry shapes. Routes and
the rest of the application import the accessors below and the types in
``marketing_site.types``; nothing else talks to the BCMS client.

To swap CMS providers, replace the internals of this module and keep the
public accessors (``get_blog_posts``, ``get_services``, ...) unchanged.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..core.config import Config
from ..types import BlogPost, Service, TeamMember, Testimonial
from .bcms_client import BCMSClient


logger = logging.getLogger(__name__)

# Change these if the BCMS templates have different names
TEMPLATES = {
    "blog_post": "blog_post",
    "service": "service",
    "testimonial": "testimonial",
    "team_member": "team_member",
}

_MISSING = object()


def get_client() -> BCMSClient:
    return BCMSClient(
        Config.BCMS_ORG_ID or "",
        Config.BCMS_INSTANCE_ID or "",
        Config.BCMS_API_KEY_ID or "",
        Config.BCMS_API_KEY_SECRET or "",
        origin=Config.BCMS_API_ORIGIN,
        timeout=Config.BCMS_TIMEOUT_SECONDS,
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def meta_en(entry: Mapping[str, Any]) -> Dict[str, Any]:
    """English meta object of a parsed entry, or ``{}`` when missing."""
    meta = entry.get("meta") or {}
    return meta.get("en") or {}


def body_en(entry: Mapping[str, Any]) -> str:
    """Concatenate every English content node value into one body string."""
    content = entry.get("content") or {}
    items = content.get("en") or []
    return "".join(_string(item.get("value")) for item in items)


def optional(value: Any) -> Any:
    """Return the value, or the missing marker when it is ``None``."""
    return value if value is not None else _MISSING


def _string(value: Any) -> str:
    """String form of a meta value, rendered the way the CMS front end would."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _number(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return 0


def _attach(target: Dict[str, Any], key: str, value: Any) -> None:
    value = optional(value)
    if value is not _MISSING:
        target[key] = value


# ---------------------------------------------------------------------------
# Normalizers (BCMS shape -> app types)
# ---------------------------------------------------------------------------

def normalize_blog_post(entry: Mapping[str, Any]) -> BlogPost:
    m = meta_en(entry)

    post: BlogPost = {
        "slug": _string(m.get("slug")),
        "title": _string(m.get("title")),
        "excerpt": _string(m.get("excerpt")),
        "body": body_en(entry),
        "publishedAt": _string(m.get("published_at")),
    }
    _attach(post, "coverImage", m.get("cover_image"))
    _attach(post, "category", m.get("category"))
    _attach(post, "author", m.get("author"))
    return post


def normalize_service(entry: Mapping[str, Any]) -> Service:
    m = meta_en(entry)

    service: Service = {
        "slug": _string(m.get("slug")),
        "title": _string(m.get("title")),
        "description": _string(m.get("description")),
        "order": _number(m.get("order")),
    }
    _attach(service, "icon", m.get("icon"))
    _attach(service, "image", m.get("image"))
    _attach(service, "price", m.get("price"))
    return service


def normalize_testimonial(entry: Mapping[str, Any]) -> Testimonial:
    m = meta_en(entry)

    testimonial: Testimonial = {
        "quote": _string(m.get("quote")),
        "author": _string(m.get("author")),
    }
    _attach(testimonial, "role", m.get("role"))
    _attach(testimonial, "avatar", m.get("avatar"))
    _attach(testimonial, "rating", m.get("rating"))
    return testimonial


def normalize_team_member(entry: Mapping[str, Any]) -> TeamMember:
    m = meta_en(entry)

    member: TeamMember = {
        "name": _string(m.get("name")),
        "role": _string(m.get("role")),
        "bio": _string(m.get("bio")),
        "order": _number(m.get("order")),
    }
    _attach(member, "photo", m.get("photo"))
    return member


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_blog_posts() -> List[BlogPost]:
    entries = get_client().entry.get_all(TEMPLATES["blog_post"])
    return [normalize_blog_post(e) for e in entries]


def get_blog_post_by_slug(slug: str) -> Optional[BlogPost]:
    """Return the post with this slug, or ``None`` if it cannot be fetched."""
    try:
        entry = get_client().entry.get_by_slug(slug, TEMPLATES["blog_post"])
        return normalize_blog_post(entry)
    except Exception as e:
        logger.warning(f"Blog post '{slug}' unavailable: {e}")
        return None


def get_services() -> List[Service]:
    entries = get_client().entry.get_all(TEMPLATES["service"])
    # sorted() is stable, so equal orders keep provider order
    return sorted((normalize_service(e) for e in entries), key=lambda s: s["order"])


def get_testimonials() -> List[Testimonial]:
    entries = get_client().entry.get_all(TEMPLATES["testimonial"])
    return [normalize_testimonial(e) for e in entries]


def get_team_members() -> List[TeamMember]:
    entries = get_client().entry.get_all(TEMPLATES["team_member"])
    return sorted((normalize_team_member(e) for e in entries), key=lambda t: t["order"])
