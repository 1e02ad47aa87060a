from typing import Any, Iterable


def exclude_keys(data: Any, keys: Iterable[str]) -> Any:
    """Drop server-generated keys from a response body, recursing into lists"""
    keys = set(keys)
    if isinstance(data, list):
        return [exclude_keys(item, keys) for item in data]
    if isinstance(data, dict):
        return {k: v for k, v in data.items() if k not in keys}
    return data
