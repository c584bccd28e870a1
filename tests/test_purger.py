"""Tests for the template cache purger."""

import logging

import pytest

from silvaengine_cache_invalidator import (
    CacheTemplateResolvers,
    MappingEntity,
    TemplateCachePurger,
)

logger = logging.getLogger("test_purger")

TEMPLATES = {
    "article": [
        "/cache/%category.slug%/%slug%.html",
        "/cache/articles/%id%",
    ],
}


class FakeCache:
    def __init__(self, failures=None):
        self.removed = []
        self.failures = dict(failures or {})
        self.calls = 0

    def remove(self, key):
        self.calls += 1
        if self.failures.get(key, 0) > 0:
            self.failures[key] -= 1
            raise ConnectionError(f"cannot remove {key}")
        self.removed.append(key)


def build_purger(cache, templates=TEMPLATES, **kwargs):
    return TemplateCachePurger(
        CacheTemplateResolvers(
            remove_cache_key=cache.remove,
            get_cache_templates=lambda: templates,
        ),
        retry_wait=0,
        **kwargs,
    )


class TestPurgeEntityCache:
    def test_removes_every_computed_key(self, article):
        cache = FakeCache()
        result = build_purger(cache).purge_entity_cache(logger, "article", article)

        assert cache.removed == ["/cache/tech/intro.html", "/cache/articles/1"]
        assert result["removed_keys"] == cache.removed
        assert result["templates"] == TEMPLATES["article"]
        assert result["errors"] == []

    def test_unknown_entity_type(self, article):
        cache = FakeCache()
        result = build_purger(cache).purge_entity_cache(logger, "comment", article)

        assert result["templates"] == []
        assert cache.calls == 0

    def test_no_template_callback(self, article):
        cache = FakeCache()
        purger = TemplateCachePurger(CacheTemplateResolvers(remove_cache_key=cache.remove))
        result = purger.purge_entity_cache(logger, "article", article)
        assert result["cache_keys"] == []

    def test_previous_state_is_purged_when_changed(self, article, category):
        previous = MappingEntity(
            {"id": 1, "slug": "old-intro", "title": "Hello"},
            relations={"category": category},
        )
        cache = FakeCache()
        result = build_purger(cache).purge_entity_cache(
            logger, "article", article, previous=previous
        )

        assert result["previous_state_changed"] is True
        assert cache.removed == [
            "/cache/tech/intro.html",
            "/cache/tech/old-intro.html",
            "/cache/articles/1",
        ]

    def test_unchanged_previous_state(self, article):
        cache = FakeCache()
        result = build_purger(cache).purge_entity_cache(
            logger, "article", article, previous=article.copy()
        )

        assert result["previous_state_changed"] is False
        assert len(cache.removed) == 2

    def test_removal_is_retried(self, article):
        cache = FakeCache(failures={"/cache/articles/1": 2})
        result = build_purger(cache, retry_attempts=3).purge_entity_cache(
            logger, "article", article
        )

        assert "/cache/articles/1" in cache.removed
        assert result["errors"] == []
        assert cache.calls == 4

    def test_removal_failure_is_reported(self, article):
        cache = FakeCache(failures={"/cache/tech/intro.html": 5})
        result = build_purger(cache, retry_attempts=2).purge_entity_cache(
            logger, "article", article
        )

        assert result["removed_keys"] == ["/cache/articles/1"]
        assert len(result["errors"]) == 1
        assert "/cache/tech/intro.html" in result["errors"][0]

    def test_template_failure_does_not_stop_others(self, translated_article):
        cache = FakeCache()
        templates = {"article": ["/%title%/%slug%", "/cache/articles/%id%"]}
        result = build_purger(
            cache, templates=templates, max_combinations=1
        ).purge_entity_cache(logger, "article", translated_article)

        assert cache.removed == ["/cache/articles/1"]
        assert len(result["errors"]) == 1

    def test_runtime_is_logged(self, article, caplog):
        with caplog.at_level(logging.INFO, logger="test_purger"):
            build_purger(FakeCache()).purge_entity_cache(logger, "article", article)

        assert any(
            "purge_entity_cache" in record.getMessage() for record in caplog.records
        )


@pytest.mark.parametrize("attempts", [0, 1])
def test_at_least_one_attempt(article, attempts):
    cache = FakeCache(failures={"/cache/articles/1": 1})
    result = build_purger(cache, retry_attempts=attempts).purge_entity_cache(
        logger, "article", article
    )
    assert cache.calls == 2
    assert len(result["errors"]) == 1
