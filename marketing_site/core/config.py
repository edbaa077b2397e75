import os
from dataclasses import dataclass
from typing import Dict, List

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Provides validated access to the BCMS credentials and the site details
    shown on every page.
    """

    BCMS_ORG_ID: str = os.getenv("BCMS_ORG_ID", "")
    BCMS_INSTANCE_ID: str = os.getenv("BCMS_INSTANCE_ID", "")
    BCMS_API_KEY_ID: str = os.getenv("BCMS_API_KEY_ID", "")
    BCMS_API_KEY_SECRET: str = os.getenv("BCMS_API_KEY_SECRET", "")
    BCMS_API_ORIGIN: str = os.getenv("BCMS_API_ORIGIN", "https://app.thebcms.com")
    BCMS_TIMEOUT_SECONDS: float = float(os.getenv("BCMS_TIMEOUT_SECONDS", "15"))
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")

    SITE_NAME: str = os.getenv("SITE_NAME", "")
    SITE_TAGLINE: str = os.getenv("SITE_TAGLINE", "")
    SITE_DESCRIPTION: str = os.getenv("SITE_DESCRIPTION", "")
    SITE_PHONE: str = os.getenv("SITE_PHONE", "")
    SITE_EMAIL: str = os.getenv("SITE_EMAIL", "")
    SITE_ADDRESS: str = os.getenv("SITE_ADDRESS", "")
    SITE_SOCIAL_LINKS: str = os.getenv("SITE_SOCIAL_LINKS", "")

    @classmethod
    def is_development(cls) -> bool:
        return cls.ENVIRONMENT == "development"

    @staticmethod
    def allowed_origins(extra_origins: List[str] | None = None) -> List[str]:
        env_origins = [o.strip() for o in os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:4321").split(",") if o.strip()]
        # Local dev server and preview
        defaults = [
            "http://localhost:4321",
            "http://localhost:3000",
        ]
        merged = env_origins + defaults
        if extra_origins:
            merged.extend(extra_origins)
        # Deduplicate while preserving order
        seen = set()
        result: List[str] = []
        for origin in merged:
            if origin not in seen:
                seen.add(origin)
                result.append(origin)
        return result

    @classmethod
    def social_links(cls) -> Dict[str, str]:
        """Parse SITE_SOCIAL_LINKS ("twitter=https://...,github=https://...")."""
        links: Dict[str, str] = {}
        for pair in cls.SITE_SOCIAL_LINKS.split(","):
            name, sep, url = pair.partition("=")
            if sep and name.strip() and url.strip():
                links[name.strip()] = url.strip()
        return links

    @classmethod
    def validate(cls) -> None:
        if not cls.BCMS_ORG_ID:
            raise ValueError("BCMS_ORG_ID environment variable is required")
        if not cls.BCMS_INSTANCE_ID:
            raise ValueError("BCMS_INSTANCE_ID environment variable is required")
        if not cls.BCMS_API_KEY_ID:
            raise ValueError("BCMS_API_KEY_ID environment variable is required")
        if not cls.BCMS_API_KEY_SECRET:
            raise ValueError("BCMS_API_KEY_SECRET environment variable is required")
