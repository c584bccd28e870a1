#!/usr/bin/python
# -*- coding: utf-8 -*-
__author__ = "bibow"


class CacheInvalidatorError(Exception):
    """Base class for cache invalidator errors."""


class InvalidEntityError(CacheInvalidatorError, TypeError):
    """The root record handed to the resolver is missing or unsupported."""


class FieldAccessError(CacheInvalidatorError):
    """An entity backend could not read a field."""

    def __init__(self, field: str, reason: str = "") -> None:
        self.field = field
        self.reason = reason
        message = f"Cannot read field '{field}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ExpansionLimitError(CacheInvalidatorError):
    """The number of combinations exceeds the configured limit."""

    def __init__(self, combinations: int, limit: int) -> None:
        self.combinations = combinations
        self.limit = limit
        super().__init__(
            f"Template expands to {combinations} combinations (limit {limit})."
        )
