"""Backend for the marketing site: normalized CMS content and dev tooling."""
