from __future__ import annotations

import itertools
from typing import Any

import pytest

from marketing_site.services import cms


_ids = itertools.count(1)


def make_parsed_entry(meta: dict[str, Any], content_text: str | None = None) -> dict[str, Any]:
    """Build a dict shaped like a parsed BCMS entry."""
    content_items = [{"type": "paragraph", "value": content_text}] if content_text else []
    return {
        "_id": f"entry-{next(_ids)}",
        "createdAt": 1700000000000,
        "updatedAt": 1700000000000,
        "instanceId": "inst-1",
        "templateId": "tmpl-1",
        "templateName": "blog_post",
        "userId": "user-1",
        "statuses": [],
        "meta": {"en": {"slug": meta.get("slug", "fallback-slug"), **meta}},
        "content": {"en": content_items},
    }


class FakeEntryApi:
    def __init__(self) -> None:
        self.entries: dict[str, list[dict[str, Any]]] = {}
        self.calls: list[tuple] = []
        self.error: Exception | None = None

    def get_all(self, template: str) -> list[dict[str, Any]]:
        self.calls.append(("get_all", template))
        if self.error is not None:
            raise self.error
        return list(self.entries.get(template, []))

    def get_by_slug(self, slug: str, template: str) -> dict[str, Any]:
        self.calls.append(("get_by_slug", slug, template))
        if self.error is not None:
            raise self.error
        for entry in self.entries.get(template, []):
            if entry["meta"]["en"].get("slug") == slug:
                return entry
        raise LookupError(f"no entry {slug}")


class FakeBCMSClient:
    def __init__(self) -> None:
        self.entry = FakeEntryApi()


@pytest.fixture
def fake_bcms(monkeypatch) -> FakeBCMSClient:
    client = FakeBCMSClient()
    monkeypatch.setattr(cms, "get_client", lambda: client)
    return client
