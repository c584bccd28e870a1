#!/usr/bin/python
# -*- coding: utf-8 -*-
from __future__ import annotations

__author__ = "bibow"

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from .entity import Entity, RelationType

logger = logging.getLogger(__name__)

WILDCARD = "*"


def _has_value(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (list, tuple, set, dict)):
        return bool(value)
    return True


@dataclass(frozen=True)
class Value:
    value: str


@dataclass(frozen=True)
class Absent:
    pass


@dataclass(frozen=True)
class AccessFailed:
    error: Exception


FieldResult = Union[Value, Absent, AccessFailed]


def read_field(entity: Entity, name: str) -> FieldResult:
    """Read a field from a snapshot of ``entity``.

    The read happens on a copy so that side effects of the backend's
    attribute access never reach the record being resolved. Any failure,
    including the copy itself and the string conversion, is returned as
    :class:`AccessFailed`.
    """
    try:
        value = entity.copy().get_field(name)
        if value is None:
            return Absent()
        return Value(str(value))
    except Exception as exc:
        return AccessFailed(exc)


class ValueResolver:
    """Resolve the candidate values of a placeholder path for a root entity."""

    def __init__(self, wildcard: str = WILDCARD) -> None:
        self.wildcard = wildcard

    def locate(
        self, root: Entity, path: str
    ) -> Tuple[Optional[Entity], str]:
        """
        Walk the relation hops of ``path`` and return the (entity, field) pair
        owning the value.

        The last segment is always a field name. Traversal stops early on a
        segment that is not a relation, or on a to-many relation, in which
        case that segment becomes the field read on the current entity.
        The entity is ``None`` when a to-one link is unset.
        """
        segments = path.split(".")
        current = root

        for segment in segments[:-1]:
            if not current.has_relation(segment):
                return current, segment

            if current.relation_type(segment) is RelationType.MANY:
                logger.debug(
                    "Stop at to-many relation '%s' of placeholder '%s'.",
                    segment,
                    path,
                )
                return current, segment

            related = current.get_related(segment)
            if related is None:
                return None, segments[-1]
            current = related

        return current, segments[-1]

    def resolve(
        self, root: Entity, path: str, culture: Optional[str] = None
    ) -> List[str]:
        entity, field = self.locate(root, path)
        if entity is None:
            logger.debug("Placeholder '%s' crosses an unset relation.", path)
            return []
        return self.fetch_related_values(entity, field, culture)

    def fetch_related_values(
        self, entity: Entity, field: str, culture: Optional[str] = None
    ) -> List[str]:
        if entity.is_identifier(field):
            value = entity.get_field(field)
            return [str(value)] if _has_value(value) else []

        values: List[str] = []
        skip_direct_get = False

        if entity.has_translation_relation():
            if entity.has_translation(culture):
                translations = [entity.get_translation(culture)]
                skip_direct_get = True
            else:
                translations = entity.translations()

            for translation in translations:
                if _has_value(translation.get(field)):
                    values.append(str(translation[field]))

        if not skip_direct_get:
            result = read_field(entity, field)
            if isinstance(result, AccessFailed):
                logger.debug(
                    "Use wildcard for field '%s' of %r: %s",
                    field,
                    entity,
                    result.error,
                )
                values.append(self.wildcard)
            elif isinstance(result, Value):
                if result.value:
                    values.append(result.value)

        return list(dict.fromkeys(values))
