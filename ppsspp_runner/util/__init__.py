"""Misc common functions"""

from functools import wraps


def cache_single(function):
    """A simple replacement for lru_cache, with no LRU behavior. This caches
    a single result from a function that has no arguments at all. Exceptions
    are not cached; there's a 'clear_cache()' function on the wrapper like with
    lru_cache to explicitly clear the cache."""
    is_cached = False
    cached_item = None

    @wraps(function)
    def wrapper(*args, **kwargs):
        nonlocal is_cached, cached_item
        if args or kwargs:
            return function(*args, **kwargs)

        if not is_cached:
            cached_item = function()
            is_cached = True

        return cached_item

    def cache_clear():
        nonlocal is_cached, cached_item
        is_cached = False
        cached_item = None

    wrapper.cache_clear = cache_clear
    return wrapper
