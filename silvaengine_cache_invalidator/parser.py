#!/usr/bin/python
# -*- coding: utf-8 -*-
from __future__ import annotations

__author__ = "bibow"

import re
from typing import List, Optional, Tuple

CULTURE_PATTERN = re.compile(r"sf_culture=([a-z_]{2,5})", re.IGNORECASE)
PLACEHOLDER_PATTERN = re.compile(r"%([a-z0-9._]+)%", re.IGNORECASE | re.DOTALL)


def placeholder_token(path: str) -> str:
    return f"%{path}%"


def check_culture(cache_uri: str) -> Optional[str]:
    """Return the culture hinted by the first ``sf_culture=`` fragment."""
    match = CULTURE_PATTERN.search(cache_uri)
    if match:
        return match.group(1)
    return None


def check_placeholders(cache_uri: str) -> List[str]:
    """Return the distinct placeholder paths in order of first appearance."""
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(cache_uri)))


def parse(cache_uri: str) -> Tuple[Optional[str], List[str]]:
    return check_culture(cache_uri), check_placeholders(cache_uri)
