#!/usr/bin/python
# -*- coding: utf-8 -*-
from __future__ import annotations

__author__ = "bibow"

import functools
from typing import Dict, List, Sequence, Tuple

from .parser import PLACEHOLDER_PATTERN

Combination = Tuple[str, ...]


def expand_combinations(
    combinations: List[Combination], values: Sequence[str]
) -> List[Combination]:
    """Add one level of depth: every combination extended by every value."""
    return [combination + (value,) for combination in combinations for value in values]


def cartesian_product(value_sets: Sequence[Sequence[str]]) -> List[Combination]:
    return functools.reduce(expand_combinations, value_sets, [()])


def count_combinations(value_sets: Sequence[Sequence[str]]) -> int:
    return functools.reduce(lambda total, values: total * len(values), value_sets, 1)


def substitute(template: str, replacements: Dict[str, str]) -> str:
    """Replace every placeholder token in one pass.

    Substituted values are never scanned again, so a value holding ``%``
    stays literal.
    """
    return PLACEHOLDER_PATTERN.sub(
        lambda match: replacements.get(match.group(0), match.group(0)), template
    )


def expand(
    template: str,
    tokens: Sequence[str],
    value_sets: Sequence[Sequence[str]],
) -> List[str]:
    if not tokens:
        return [template]

    uris = [
        substitute(template, dict(zip(tokens, combination)))
        for combination in cartesian_product(value_sets)
    ]
    return list(dict.fromkeys(uris))
