#!/usr/bin/python
# -*- coding: utf-8 -*-
__author__ = "bibow"

__all__ = [
    "main",
    "models",
    "parser",
    "resolver",
    "expander",
    "purger",
    "BaseModel",
    "CacheUriResolver",
    "CacheTemplateResolvers",
    "TemplateCachePurger",
    "SilvaEngineCacheInvalidator",
    "Entity",
    "MappingEntity",
    "PynamoEntity",
    "Relation",
    "RelationType",
    "ValueResolver",
    "compute_cache_uris",
    "monitor_decorator",
    "CacheInvalidatorError",
    "ExpansionLimitError",
    "FieldAccessError",
    "InvalidEntityError",
]
from .cache_uri_resolver import CacheUriResolver, compute_cache_uris
from .decorators import monitor_decorator
from .entity import Entity, MappingEntity, Relation, RelationType
from .exceptions import (
    CacheInvalidatorError,
    ExpansionLimitError,
    FieldAccessError,
    InvalidEntityError,
)
from .main import SilvaEngineCacheInvalidator
from .models import BaseModel
from .purger import CacheTemplateResolvers, TemplateCachePurger
from .pynamo import PynamoEntity
from .resolver import ValueResolver
