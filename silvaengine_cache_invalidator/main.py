#!/usr/bin/python
# -*- coding: utf-8 -*-
__author__ = "bibow"

from typing import Any, Callable, Dict, List, Optional

from .cache_uri_resolver import CacheUriResolver
from .models import BaseModel
from .purger import CacheTemplateResolvers, TemplateCachePurger
from .pynamo import DEFAULT_TRANSLATION_ATTRIBUTE
from .resolver import WILDCARD, ValueResolver


class SilvaEngineCacheInvalidator(object):
    def __init__(self, logger, **setting):
        self.logger = logger
        self.setting = setting

        if (
            setting.get("region_name")
            and setting.get("aws_access_key_id")
            and setting.get("aws_secret_access_key")
        ):
            BaseModel.Meta.region = setting.get("region_name")
            BaseModel.Meta.aws_access_key_id = setting.get("aws_access_key_id")
            BaseModel.Meta.aws_secret_access_key = setting.get("aws_secret_access_key")

        self.value_resolver = ValueResolver(wildcard=setting.get("wildcard", WILDCARD))
        self.translation_attribute = setting.get(
            "translation_attribute", DEFAULT_TRANSLATION_ATTRIBUTE
        )
        self.max_combinations = setting.get("max_combinations")

    def compute_cache_uris(self, record: Any, cache_uri: str) -> List[str]:
        uris = CacheUriResolver(
            record,
            cache_uri,
            value_resolver=self.value_resolver,
            max_combinations=self.max_combinations,
            translation_attribute=self.translation_attribute,
        ).compute_uris()
        self.logger.debug(f"Resolved {cache_uri} into {len(uris)} cache URIs.")
        return uris

    def get_cache_templates(self) -> Dict[str, List[str]]:
        return self.setting.get("cache_templates", {})

    def get_purger(
        self,
        remove_cache_key: Callable[[str], Any],
        get_cache_templates: Optional[Callable[[], Dict[str, List[str]]]] = None,
    ) -> TemplateCachePurger:
        if get_cache_templates is None:
            get_cache_templates = self.get_cache_templates

        return TemplateCachePurger(
            CacheTemplateResolvers(
                remove_cache_key=remove_cache_key,
                get_cache_templates=get_cache_templates,
            ),
            retry_attempts=int(self.setting.get("retry_attempts", 3)),
            retry_wait=float(self.setting.get("retry_wait", 0.5)),
            max_combinations=self.max_combinations,
            value_resolver=self.value_resolver,
            translation_attribute=self.translation_attribute,
        )

    def purge(
        self,
        entity_type: str,
        record: Any,
        remove_cache_key: Callable[[str], Any],
        previous: Any = None,
    ) -> Dict[str, Any]:
        return self.get_purger(remove_cache_key).purge_entity_cache(
            self.logger, entity_type, record, previous=previous
        )
