# -*- coding: utf-8 -*-
from __future__ import annotations

__author__ = "bibow"

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from deepdiff import DeepDiff
from tenacity import retry, stop_after_attempt, wait_exponential

from .cache_uri_resolver import CacheUriResolver
from .decorators import monitor_decorator
from .pynamo import DEFAULT_TRANSLATION_ATTRIBUTE, to_entity
from .resolver import ValueResolver


@dataclass(frozen=True)
class CacheTemplateResolvers:
    """Callable helpers that provide cache templates and remove cache keys."""

    remove_cache_key: Callable[[str], Any]
    get_cache_templates: Optional[Callable[[], Dict[str, List[str]]]] = None


class TemplateCachePurger:
    """Purge the cache URIs a record appears in, using configuration callbacks."""

    def __init__(
        self,
        config: CacheTemplateResolvers,
        *,
        retry_attempts: int = 3,
        retry_wait: float = 0.5,
        max_combinations: Optional[int] = None,
        value_resolver: Optional[ValueResolver] = None,
        translation_attribute: str = DEFAULT_TRANSLATION_ATTRIBUTE,
    ):
        self._config = config
        self._retry_attempts = max(1, retry_attempts)
        self._retry_wait = retry_wait
        self._max_combinations = max_combinations
        self._value_resolver = value_resolver or ValueResolver()
        self._translation_attribute = translation_attribute

    @monitor_decorator
    def purge_entity_cache(
        self,
        logger: logging.Logger,
        entity_type: str,
        record: Any,
        *,
        previous: Any = None,
    ) -> Dict[str, Any]:
        """
        Remove every cache key computed from the templates of ``entity_type``.

        Args:
            logger: Logger instance
            entity_type: Type of entity whose templates are resolved
            record: Record in its current state
            previous: Record state before the change; its keys are purged too
                when it differs from ``record``
        """
        purge_results = {
            "entity_type": entity_type,
            "templates": [],
            "cache_keys": [],
            "removed_keys": [],
            "previous_state_changed": False,
            "errors": [],
        }

        templates = self._get_cache_templates(entity_type)
        purge_results["templates"] = templates
        if not templates:
            logger.debug("No cache templates configured for entity_type=%s", entity_type)
            return purge_results

        records = [record]
        if previous is not None:
            try:
                changed = self._has_changed(previous, record)
            except Exception as exc:
                purge_results["errors"].append(
                    f"Error comparing previous {entity_type} state: {str(exc)}"
                )
                changed = True
            purge_results["previous_state_changed"] = changed
            if changed:
                records.append(previous)

        cache_keys: List[str] = []
        for template in templates:
            for candidate in records:
                try:
                    cache_keys.extend(
                        CacheUriResolver(
                            candidate,
                            template,
                            value_resolver=self._value_resolver,
                            max_combinations=self._max_combinations,
                            translation_attribute=self._translation_attribute,
                        ).compute_uris()
                    )
                except Exception as exc:
                    purge_results["errors"].append(
                        f"Error computing {entity_type} cache URIs for {template}: {str(exc)}"
                    )
                    logger.error(
                        "Error computing %s cache URIs for %s: %s",
                        entity_type,
                        template,
                        str(exc),
                    )

        purge_results["cache_keys"] = list(dict.fromkeys(cache_keys))

        for cache_key in purge_results["cache_keys"]:
            try:
                self._remove_cache_key(cache_key)
                purge_results["removed_keys"].append(cache_key)
            except Exception as exc:
                purge_results["errors"].append(
                    f"Error removing cache key {cache_key}: {str(exc)}"
                )
                logger.error("Error removing cache key %s: %s", cache_key, str(exc))

        logger.info(
            "Cleared %s of %s %s cache keys",
            len(purge_results["removed_keys"]),
            len(purge_results["cache_keys"]),
            entity_type,
        )
        return purge_results

    def _get_cache_templates(self, entity_type: str) -> List[str]:
        if not self._config.get_cache_templates:
            return []
        templates = self._config.get_cache_templates() or {}
        return list(dict.fromkeys(templates.get(entity_type, [])))

    def _has_changed(self, previous: Any, record: Any) -> bool:
        old_data = to_entity(previous, self._translation_attribute).as_dict()
        new_data = to_entity(record, self._translation_attribute).as_dict()
        return DeepDiff(old_data, new_data, ignore_order=True) != {}

    def _remove_cache_key(self, cache_key: str) -> Any:
        remover = retry(
            stop=stop_after_attempt(self._retry_attempts),
            wait=wait_exponential(multiplier=self._retry_wait, max=10),
            reraise=True,
        )(self._config.remove_cache_key)
        return remover(cache_key)


__all__ = [
    "CacheTemplateResolvers",
    "TemplateCachePurger",
]
