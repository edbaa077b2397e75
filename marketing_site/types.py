"""Domain types handed to the rest of the application.

Optional keys are absent from the dict when the CMS has no value for
them; they are never present with a ``None`` value.
"""

from typing import Dict, TypedDict


class _BlogPostRequired(TypedDict):
    slug: str
    title: str
    excerpt: str
    body: str
    publishedAt: str


class BlogPost(_BlogPostRequired, total=False):
    coverImage: str
    category: str
    author: str


class _ServiceRequired(TypedDict):
    slug: str
    title: str
    description: str
    order: float


class Service(_ServiceRequired, total=False):
    icon: str
    image: str
    price: str


class _TestimonialRequired(TypedDict):
    quote: str
    author: str


class Testimonial(_TestimonialRequired, total=False):
    role: str
    avatar: str
    rating: float


class _TeamMemberRequired(TypedDict):
    name: str
    role: str
    bio: str
    order: float


class TeamMember(_TeamMemberRequired, total=False):
    photo: str


class _SiteConfigRequired(TypedDict):
    name: str
    tagline: str
    description: str


class SiteConfig(_SiteConfigRequired, total=False):
    phone: str
    email: str
    address: str
    socialLinks: Dict[str, str]
