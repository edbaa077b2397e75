import logging
import re

from fastapi import HTTPException


logger = logging.getLogger(__name__)

SLUG_PATTERN = re.compile(r'^[A-Za-z0-9_-]+$')
MAX_SLUG_LENGTH = 200


def validate_slug(slug: str) -> None:
    if not slug:
        raise HTTPException(status_code=400, detail="slug is required")

    if len(slug) > MAX_SLUG_LENGTH:
        raise HTTPException(status_code=400, detail=f"slug too long. Maximum length is {MAX_SLUG_LENGTH}")

    if not SLUG_PATTERN.match(slug):
        raise HTTPException(status_code=400, detail="Invalid slug format")
