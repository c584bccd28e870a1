#!/usr/bin/python
# -*- coding: utf-8 -*-
__author__ = "bibow"

import functools
import inspect
import time


def monitor_decorator(original_function):
    signature = inspect.signature(original_function)

    @functools.wraps(original_function)
    def wrapper_function(*args, **kwargs):
        logger = signature.bind_partial(*args, **kwargs).arguments.get("logger")

        start = time.perf_counter()
        result = original_function(*args, **kwargs)
        if logger is not None:
            logger.info(
                f"Execute function: {original_function.__name__} spent {time.perf_counter() - start}s!"
            )
        return result

    return wrapper_function
