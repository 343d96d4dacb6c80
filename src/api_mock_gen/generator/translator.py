"""Spec-to-artifact translation: builds the type table and both documents."""

import os
from dataclasses import dataclass
from pathlib import Path, PurePath

from api_mock_gen.config import GeneratorConfig
from api_mock_gen.generator.declarations import TypeTable, render_declarations
from api_mock_gen.generator.handlers import render_handlers
from api_mock_gen.generator.inference import infer_type
from api_mock_gen.generator.naming import type_name
from api_mock_gen.parser.base import ApiSpec

TS_SUFFIXES = (".d.ts", ".ts")


@dataclass
class Artifacts:
    """The generated documents plus the type table they were rendered from."""

    handlers: str
    types: str
    table: TypeTable


class Translator:
    """Drives naming and inference across every endpoint of a specification."""

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config or GeneratorConfig()

    def build_table(self, spec: ApiSpec) -> TypeTable:
        """Register request and response types in endpoint order."""
        table = TypeTable(self.config.collision_policy)
        strategy = self.config.array_strategy
        for endpoint in spec.apis:
            if endpoint.accepts_body and endpoint.has_request_body:
                table.register(
                    type_name(endpoint.path, "Request"),
                    infer_type(endpoint.request_body, strategy=strategy),
                )
            table.register(
                type_name(endpoint.path, "Response"),
                infer_type(endpoint.response, strategy=strategy),
            )
        return table

    def translate(self, spec: ApiSpec) -> Artifacts:
        table = self.build_table(spec)
        return Artifacts(
            handlers=render_handlers(spec.apis, types_module=self.types_module()),
            types=render_declarations(table, spec.apis),
            table=table,
        )

    def types_module(self) -> str:
        """Import specifier of the types file as seen from the handlers file."""
        types_path = self.config.types_path
        stem = str(types_path)
        for suffix in TS_SUFFIXES:
            if stem.endswith(suffix):
                stem = stem[: -len(suffix)]
                break
        relative = os.path.relpath(stem, start=self.config.mocks_path.parent)
        specifier = PurePath(relative).as_posix()
        if not specifier.startswith("."):
            specifier = f"./{specifier}"
        return specifier


def write_artifacts(artifacts: Artifacts, config: GeneratorConfig) -> list[Path]:
    """Write both documents, creating directories and overwriting existing files."""
    written = []
    for path, content in ((config.mocks_path, artifacts.handlers), (config.types_path, artifacts.types)):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        written.append(path)
    return written
