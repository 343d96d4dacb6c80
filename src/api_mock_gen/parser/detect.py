"""Auto-detect the kind of specification source."""

from pathlib import Path

YAML_SUFFIXES = (".yaml", ".yml")


def detect_source(source: str) -> str:
    """Detect how a specification source should be read.

    Returns: 'url', 'yaml', or 'json'.
    """
    if source.startswith(("http://", "https://")):
        return "url"

    if Path(source).suffix.lower() in YAML_SUFFIXES:
        return "yaml"

    return "json"
