"""Content and developer-tooling services used by the HTTP layer."""
