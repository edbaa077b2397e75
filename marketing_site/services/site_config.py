from ..core.config import Config
from ..types import SiteConfig


def get_site_config() -> SiteConfig:
    """Site-wide details from the environment; empty optionals are left out."""
    site: SiteConfig = {
        "name": Config.SITE_NAME,
        "tagline": Config.SITE_TAGLINE,
        "description": Config.SITE_DESCRIPTION,
    }
    if Config.SITE_PHONE:
        site["phone"] = Config.SITE_PHONE
    if Config.SITE_EMAIL:
        site["email"] = Config.SITE_EMAIL
    if Config.SITE_ADDRESS:
        site["address"] = Config.SITE_ADDRESS
    social_links = Config.social_links()
    if social_links:
        site["socialLinks"] = social_links
    return site
