"""Shared fixtures: an in-memory article graph."""

import pytest

from silvaengine_cache_invalidator import FieldAccessError, MappingEntity


class FailingEntity(MappingEntity):
    """Entity whose reads of the ``failing`` fields raise."""

    def __init__(self, *args, failing=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.failing = frozenset(failing)

    def get_field(self, name):
        if name in self.failing:
            raise FieldAccessError(name, "backend error")
        return super().get_field(name)

    def copy(self):
        return FailingEntity(
            self.fields,
            relations=self.relations,
            translations=self.translation_map,
            identifiers=self.identifiers,
            failing=self.failing,
        )


@pytest.fixture
def category():
    return MappingEntity({"id": 7, "slug": "tech"})


@pytest.fixture
def article(category):
    return MappingEntity(
        {"id": 1, "slug": "intro", "title": "Hello"},
        relations={
            "category": category,
            "items": [MappingEntity({"id": 10, "name": "first"})],
            "editor": None,
        },
    )


@pytest.fixture
def translated_article(category):
    return MappingEntity(
        {"id": 1, "slug": "intro", "title": "Hello"},
        relations={"category": category},
        translations={
            "fr": {"title": "Bonjour", "slug": "intro"},
            "de": {"title": "Hallo", "slug": ""},
        },
    )
