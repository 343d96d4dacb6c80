"""Mock Service Worker handler generation.

Each supported endpoint becomes one ``http.<method>(...)`` handler that
returns the sample response. The output is a scaffold meant to be edited
by hand; path params are passed to resolvers but not used.
"""

import json
import re
from typing import Any, Callable

from api_mock_gen.generator.naming import type_name
from api_mock_gen.parser.base import Endpoint

PATH_PARAM = re.compile(r"\{(\w+)\}")

IMPORTS = "import { http, HttpResponse } from 'msw'\n"
BANNER = "// Auto-generated handlers from API specification\n"

# Type names that would shadow DOM/Fetch globals when imported.
TS_GLOBALS = frozenset({"Request", "Response"})


def to_msw_path(path: str) -> str:
    """Rewrite ``{id}`` placeholders to MSW's ``:id`` form."""
    return PATH_PARAM.sub(r":\1", path)


def has_path_params(path: str) -> bool:
    return "{" in path or ":" in path


def _ts_string(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _json(value: Any, indent: str) -> str:
    """Pretty-print a sample value, continuation lines indented to ``indent``."""
    # YAML samples may hold dates or sets; embed them as strings.
    text = json.dumps(value, indent=2, ensure_ascii=False, default=str)
    return text.replace("\n", "\n" + indent)


def _render_get(endpoint: Endpoint, request_type: str | None) -> str:
    if has_path_params(endpoint.path):
        route, resolver = to_msw_path(endpoint.path), "({ params })"
    else:
        route, resolver = endpoint.path, "()"
    return (
        f"  http.get({_ts_string(route)}, {resolver} => {{\n"
        f"    return HttpResponse.json({_json(endpoint.response, '    ')})\n"
        f"  }})"
    )


def _render_with_body(endpoint: Endpoint, request_type: str | None) -> str:
    method = endpoint.method.lower()
    lines = [f"  http.{method}({_ts_string(to_msw_path(endpoint.path))}, async ({{ params, request }}) => {{"]
    if endpoint.has_request_body:
        cast = f" as {request_type}" if request_type else ""
        lines.append(f"    const body = await request.json(){cast}")
    lines.extend(_status_response(endpoint))
    lines.append("  })")
    return "\n".join(lines)


def _render_delete(endpoint: Endpoint, request_type: str | None) -> str:
    lines = [f"  http.delete({_ts_string(to_msw_path(endpoint.path))}, ({{ params }}) => {{"]
    lines.extend(_status_response(endpoint))
    lines.append("  })")
    return "\n".join(lines)


def _status_response(endpoint: Endpoint) -> list[str]:
    return [
        "    return HttpResponse.json(",
        f"      {_json(endpoint.response, '      ')},",
        f"      {{ status: {endpoint.status_code} }}",
        "    )",
    ]


RENDERERS: dict[str, Callable[[Endpoint, str | None], str]] = {
    "GET": _render_get,
    "POST": _render_with_body,
    "PUT": _render_with_body,
    "PATCH": _render_with_body,
    "DELETE": _render_delete,
}


def render_handler(endpoint: Endpoint, request_type: str | None = None) -> str | None:
    """Render one handler, or None for methods MSW handlers are not generated for."""
    renderer = RENDERERS.get(endpoint.method)
    if renderer is None:
        return None
    return f"  // {endpoint.method} {endpoint.path}\n" + renderer(endpoint, request_type)


def render_handlers(endpoints: list[Endpoint], types_module: str | None = None) -> str:
    """Render the full handlers module."""
    handlers = []
    imports: list[str] = []
    for endpoint in endpoints:
        request_type = None
        if endpoint.has_request_body and endpoint.accepts_body:
            request_type = type_name(endpoint.path, "Request")
        local_name = request_type
        if types_module and request_type in TS_GLOBALS:
            local_name = f"Api{request_type}"
        handler = render_handler(endpoint, local_name)
        if handler is None:
            continue
        handlers.append(handler)
        if request_type:
            specifier = request_type if local_name == request_type else f"{request_type} as {local_name}"
            if specifier not in imports:
                imports.append(specifier)

    header = IMPORTS
    if types_module and imports:
        header += f"import type {{ {', '.join(imports)} }} from {_ts_string(types_module)}\n"

    body = ",\n\n".join(handlers)
    return f"{header}\n{BANNER}export const handlers = [\n{body}\n]\n"
