#!/usr/bin/python
# -*- coding: utf-8 -*-
"""
Entity capability interface consumed by the cache URI resolver.

The resolver never talks to a storage backend directly. It reads fields,
relation metadata and translations through :class:`Entity`, so any record
store can take part by providing an adapter.

Example:
    >>> from silvaengine_cache_invalidator import MappingEntity
    >>>
    >>> category = MappingEntity({"id": 7, "slug": "tech"})
    >>> article = MappingEntity(
    ...     {"id": 1, "slug": "intro"},
    ...     relations={"category": category},
    ...     translations={"fr": {"title": "Bonjour"}},
    ... )
"""

from __future__ import annotations

__author__ = "bibow"

import copy
import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from .exceptions import FieldAccessError


class RelationType(enum.Enum):
    ONE = "one"
    MANY = "many"


@dataclass(frozen=True)
class Relation:
    """Declared relation of a stored record.

    ``loader`` receives the owning record and returns the related record
    (``ONE``) or an iterable of records (``MANY``).
    """

    type: RelationType
    loader: Optional[Callable[[Any], Any]] = None


class Entity(ABC):
    """Read-only view of a record and the records reachable from it."""

    @abstractmethod
    def get_field(self, name: str) -> Any:
        """Return the field value, ``None`` when absent.

        Raises:
            FieldAccessError: If the field cannot be read at all.
        """

    @abstractmethod
    def has_relation(self, name: str) -> bool:
        pass

    @abstractmethod
    def relation_type(self, name: str) -> RelationType:
        pass

    @abstractmethod
    def get_related(self, name: str) -> Optional["Entity"]:
        """Return the single record behind a ``ONE`` relation, if any."""

    @abstractmethod
    def is_identifier(self, name: str) -> bool:
        pass

    @abstractmethod
    def has_translation_relation(self) -> bool:
        pass

    @abstractmethod
    def get_translation(self, culture: str) -> Optional[Mapping[str, Any]]:
        pass

    @abstractmethod
    def translations(self) -> List[Mapping[str, Any]]:
        pass

    @abstractmethod
    def copy(self) -> "Entity":
        pass

    @abstractmethod
    def as_dict(self) -> Dict[str, Any]:
        """Plain snapshot of the record's own fields, used for change detection."""

    def has_translation(self, culture: Optional[str]) -> bool:
        return (
            culture is not None
            and self.has_translation_relation()
            and self.get_translation(culture) is not None
        )


class MappingEntity(Entity):
    """In-memory entity backed by plain dictionaries.

    Relations map a name either to another :class:`MappingEntity` (to-one,
    ``None`` for an unset link) or to a list/tuple of them (to-many).
    ``translations`` is ``{culture: {field: value}}``; leave it ``None`` when
    the record has no translation relation.
    """

    def __init__(
        self,
        fields: Optional[Mapping[str, Any]] = None,
        relations: Optional[Mapping[str, Any]] = None,
        translations: Optional[Mapping[str, Mapping[str, Any]]] = None,
        identifiers: Iterable[str] = ("id",),
    ) -> None:
        self.fields: Dict[str, Any] = dict(fields or {})
        self.relations: Dict[str, Any] = dict(relations or {})
        self.translation_map: Optional[Dict[str, Dict[str, Any]]] = (
            None
            if translations is None
            else {culture: dict(values) for culture, values in translations.items()}
        )
        self.identifiers = frozenset(identifiers)

    def get_field(self, name: str) -> Any:
        if name in self.relations:
            raise FieldAccessError(name, "it is a relation, not a field")
        if name not in self.fields:
            raise FieldAccessError(name, "unknown field")
        return self.fields[name]

    def has_relation(self, name: str) -> bool:
        return name in self.relations

    def relation_type(self, name: str) -> RelationType:
        if isinstance(self.relations[name], (list, tuple)):
            return RelationType.MANY
        return RelationType.ONE

    def get_related(self, name: str) -> Optional[Entity]:
        return self.relations[name]

    def is_identifier(self, name: str) -> bool:
        return name in self.identifiers

    def has_translation_relation(self) -> bool:
        return self.translation_map is not None

    def get_translation(self, culture: str) -> Optional[Mapping[str, Any]]:
        return (self.translation_map or {}).get(culture)

    def translations(self) -> List[Mapping[str, Any]]:
        return list((self.translation_map or {}).values())

    def copy(self) -> "MappingEntity":
        return MappingEntity(
            fields=copy.deepcopy(self.fields),
            relations=self.relations,
            translations=copy.deepcopy(self.translation_map),
            identifiers=self.identifiers,
        )

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.fields)

    def __repr__(self) -> str:
        return f"MappingEntity({self.fields!r})"
