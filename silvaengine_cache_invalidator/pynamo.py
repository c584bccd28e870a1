#!/usr/bin/python
# -*- coding: utf-8 -*-
"""
PynamoDB adapter for the entity capability interface.

Relations are read from the model definition:

* a typed ``MapAttribute`` subclass attribute is a to-one relation
  (embedded document);
* a ``ListAttribute(of=<MapAttribute subclass>)`` is a to-many relation;
* ``cache_relations`` on the model class declares links to other tables,
  resolved through the relation's ``loader``.

Hash and range key attributes are identifier fields. Translations live in
a map attribute (``translation`` by default) shaped as
``{culture: {field: value}}``.
"""

from __future__ import annotations

__author__ = "bibow"

import copy
from collections.abc import Mapping as MappingABC
from typing import Any, Dict, List, Mapping, Optional

from pynamodb.attributes import Attribute, ListAttribute, MapAttribute
from pynamodb.models import Model

from .entity import Entity, Relation, RelationType
from .exceptions import FieldAccessError, InvalidEntityError

DEFAULT_TRANSLATION_ATTRIBUTE = "translation"


def _as_plain(value: Any) -> Any:
    if isinstance(value, MapAttribute):
        value = value.as_dict()
    if isinstance(value, MappingABC):
        return {key: _as_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_as_plain(item) for item in value]
    return value


def is_attribute_container(record: Any) -> bool:
    return isinstance(record, (Model, MapAttribute))


def to_entity(
    record: Any,
    translation_attribute: str = DEFAULT_TRANSLATION_ATTRIBUTE,
) -> Entity:
    """Wrap a record into an :class:`Entity`, passing entities through."""
    if record is None:
        raise InvalidEntityError("A record is required to resolve cache URIs.")
    if isinstance(record, Entity):
        return record
    if is_attribute_container(record):
        return PynamoEntity(record, translation_attribute=translation_attribute)
    raise InvalidEntityError(
        f"Unsupported record type {type(record).__name__}; "
        "expected an Entity or a PynamoDB model."
    )


class PynamoEntity(Entity):
    def __init__(
        self,
        record: Any,
        translation_attribute: str = DEFAULT_TRANSLATION_ATTRIBUTE,
    ) -> None:
        self.record = record
        self.translation_attribute = translation_attribute

    @property
    def attributes(self) -> Dict[str, Attribute]:
        return type(self.record).get_attributes()

    @property
    def declared_relations(self) -> Dict[str, Relation]:
        return getattr(type(self.record), "cache_relations", None) or {}

    def _attribute_relation_type(self, name: str) -> Optional[RelationType]:
        if name == self.translation_attribute:
            return None

        attribute = self.attributes.get(name)
        if isinstance(attribute, ListAttribute):
            element_type = getattr(attribute, "element_type", None)
            if isinstance(element_type, type) and issubclass(
                element_type, MapAttribute
            ):
                return RelationType.MANY
            return None
        if isinstance(attribute, MapAttribute) and type(attribute) is not MapAttribute:
            return RelationType.ONE
        return None

    def get_field(self, name: str) -> Any:
        if name not in self.attributes:
            raise FieldAccessError(
                name, f"{type(self.record).__name__} has no such attribute"
            )
        if self.has_relation(name):
            raise FieldAccessError(name, "it is a relation, not a field")
        return getattr(self.record, name)

    def has_relation(self, name: str) -> bool:
        return (
            name in self.declared_relations
            or self._attribute_relation_type(name) is not None
        )

    def relation_type(self, name: str) -> RelationType:
        if name in self.declared_relations:
            return self.declared_relations[name].type
        return self._attribute_relation_type(name)

    def get_related(self, name: str) -> Optional[Entity]:
        relation = self.declared_relations.get(name)
        if relation is not None and relation.loader is not None:
            related = relation.loader(self.record)
        else:
            related = getattr(self.record, name, None)

        if related is None:
            return None
        return to_entity(related, translation_attribute=self.translation_attribute)

    def is_identifier(self, name: str) -> bool:
        attribute = self.attributes.get(name)
        if attribute is None:
            return False
        return bool(attribute.is_hash_key or attribute.is_range_key)

    def has_translation_relation(self) -> bool:
        return self.translation_attribute in self.attributes

    def _translation_map(self) -> Dict[str, Any]:
        return _as_plain(getattr(self.record, self.translation_attribute, None)) or {}

    def get_translation(self, culture: str) -> Optional[Mapping[str, Any]]:
        translation = self._translation_map().get(culture)
        if isinstance(translation, MappingABC):
            return translation
        return None

    def translations(self) -> List[Mapping[str, Any]]:
        return [
            translation
            for translation in self._translation_map().values()
            if isinstance(translation, MappingABC)
        ]

    def copy(self) -> "PynamoEntity":
        return PynamoEntity(
            copy.deepcopy(self.record),
            translation_attribute=self.translation_attribute,
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            name: _as_plain(getattr(self.record, name, None))
            for name in self.attributes
        }

    def __repr__(self) -> str:
        return f"PynamoEntity({type(self.record).__name__})"
