"""Specification loader.

Reads an API specification from a URL, a JSON file, or a YAML file and
validates it into an ApiSpec.
"""

import json
from pathlib import Path
from typing import Any

import requests
import yaml
from pydantic import ValidationError

from .base import ApiSpec
from .detect import detect_source


class SpecError(Exception):
    """The specification could not be fetched, read, parsed, or validated."""


def load_spec(source: str, timeout: float | None = None) -> ApiSpec:
    """Load and validate the specification named by ``source``."""
    kind = detect_source(source)
    if kind == "url":
        data = _fetch_json(source, timeout)
    else:
        text = _read_text(Path(source))
        data = _decode(text, kind, source)
    return parse_spec(data)


def parse_spec(data: Any) -> ApiSpec:
    """Validate an already-decoded specification object."""
    if not isinstance(data, dict) or not isinstance(data.get("apis"), list):
        raise SpecError('Invalid API specification format. Expected { "apis": [...] }')
    try:
        return ApiSpec.model_validate(data)
    except ValidationError as e:
        raise SpecError(f"Invalid API specification: {_first_error(e)}") from e


def _fetch_json(url: str, timeout: float | None) -> Any:
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise SpecError(f"Failed to fetch {url}: {e}") from e
    try:
        return resp.json()
    except ValueError as e:
        raise SpecError(f"Response from {url} is not valid JSON: {e}") from e


def _read_text(file_path: Path) -> str:
    # Relative paths resolve against the working directory.
    try:
        return file_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SpecError(f"Specification file not found: {file_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SpecError(f"Failed to read {file_path}: {e}") from e


def _decode(text: str, kind: str, source: str) -> Any:
    if kind == "yaml":
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise SpecError(f"Invalid YAML in {source}: {e}") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SpecError(f"Invalid JSON in {source}: {e.msg} (line {e.lineno})") from e


def _first_error(error: ValidationError) -> str:
    """Flatten the first pydantic error into one line like 'apis.0.response: Field required'."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}"
