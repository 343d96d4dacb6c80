"""Identifier derivation from URL path templates."""

import re

API_PREFIX = re.compile(r"^/api/")


def path_fragment(path: str) -> str:
    """Turn a path template into a PascalCase fragment.

    ``/api/users/{id}`` -> ``UsersId``. Only the first character of each
    segment is upper-cased; the rest is kept as written, so
    ``/api/users/{postId}`` gives ``UsersPostId``.
    """
    stripped = API_PREFIX.sub("", path)
    joined = stripped.replace("/", "_").replace("{", "").replace("}", "")
    return "".join(part[:1].upper() + part[1:] for part in joined.split("_"))


def type_name(path: str, suffix: str) -> str:
    """Name of the request or response type for a path, e.g. ``UsersIdResponse``."""
    return f"{path_fragment(path)}{suffix}"


def function_name(method: str, path: str) -> str:
    """Name of the endpoint-map entry for a route, e.g. ``getUsersId``."""
    return f"{method.lower()}{path_fragment(path)}"
