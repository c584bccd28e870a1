#!/usr/bin/python
# -*- coding: utf-8 -*-
"""
Record related cache URI resolver.

Turns a cache URI template such as ``/cache/%category.slug%/%slug%.html``
into the concrete URIs to invalidate for one record.

Example:
    >>> resolver = CacheUriResolver(article, "/cache/%category.slug%/%slug%.html")
    >>> resolver.compute_uris()
    ['/cache/tech/intro.html']
"""

from __future__ import annotations

__author__ = "bibow"

import logging
from typing import Any, Dict, List, Optional

from . import expander, parser
from .entity import Entity
from .exceptions import ExpansionLimitError
from .pynamo import DEFAULT_TRANSLATION_ATTRIBUTE, to_entity
from .resolver import ValueResolver

logger = logging.getLogger(__name__)


class CacheUriResolver:
    def __init__(
        self,
        record: Any,
        cache_uri: str,
        *,
        value_resolver: Optional[ValueResolver] = None,
        max_combinations: Optional[int] = None,
        translation_attribute: str = DEFAULT_TRANSLATION_ATTRIBUTE,
    ) -> None:
        self._record: Entity = to_entity(
            record, translation_attribute=translation_attribute
        )
        self._cache_uri = cache_uri
        self._culture, self._placeholders = parser.parse(cache_uri)
        self._value_resolver = value_resolver or ValueResolver()
        self._max_combinations = max_combinations

    @property
    def record(self) -> Entity:
        return self._record

    @property
    def cache_uri(self) -> str:
        return self._cache_uri

    @property
    def culture(self) -> Optional[str]:
        return self._culture

    @property
    def placeholders(self) -> List[str]:
        return list(self._placeholders)

    def get_related_fields(self) -> Dict[str, List[str]]:
        """Map every placeholder token to the values it can take."""
        return {
            parser.placeholder_token(path): self._value_resolver.resolve(
                self._record, path, self._culture
            )
            for path in self._placeholders
        }

    def compute_uris(self) -> List[str]:
        if not self._placeholders:
            return [self._cache_uri]

        related_fields = self.get_related_fields()
        value_sets = list(related_fields.values())

        if self._max_combinations is not None:
            combinations = expander.count_combinations(value_sets)
            if combinations > self._max_combinations:
                logger.warning(
                    "Cache URI %s expands to %s combinations for %r.",
                    self._cache_uri,
                    combinations,
                    self._record,
                )
                raise ExpansionLimitError(combinations, self._max_combinations)

        return expander.expand(self._cache_uri, list(related_fields), value_sets)


def compute_cache_uris(record: Any, cache_uri: str, **kwargs: Any) -> List[str]:
    return CacheUriResolver(record, cache_uri, **kwargs).compute_uris()
