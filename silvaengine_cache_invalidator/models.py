#!/usr/bin/python
# -*- coding: utf-8 -*-
"""
Base model class for PynamoDB records taking part in cache invalidation.

Example:
    >>> from pynamodb.attributes import MapAttribute, UnicodeAttribute
    >>> from silvaengine_cache_invalidator import BaseModel
    >>>
    >>> class ArticleModel(BaseModel):
    ...     class Meta(BaseModel.Meta):
    ...         table_name = "article"
    ...     id = UnicodeAttribute(hash_key=True)
    ...     slug = UnicodeAttribute(null=True)
    ...     translation = MapAttribute(null=True)
"""

__author__ = "bibow"

import os
from typing import Optional

from pynamodb.models import Model


class BaseModel(Model):
    """
    Base model class for DynamoDB models.

    This class extends Pynamodb's Model class with custom Meta configuration.
    Subclasses may declare a ``cache_relations`` mapping of
    :class:`~silvaengine_cache_invalidator.entity.Relation` objects for links
    to records stored in other tables.
    """

    class Meta:
        region: Optional[str] = os.getenv("REGIONNAME")
        billing_mode: str = "PAY_PER_REQUEST"
