"""CLI entry point for api-mock-gen."""

from pathlib import Path

import click

from api_mock_gen.config import DEFAULT_MOCKS_PATH, DEFAULT_TYPES_PATH, GeneratorConfig
from api_mock_gen.generator.declarations import CollisionPolicy
from api_mock_gen.generator.inference import ArrayStrategy
from api_mock_gen.generator.translator import Translator, write_artifacts
from api_mock_gen.parser.spec import SpecError, load_spec


@click.command(context_settings={"auto_envvar_prefix": "API_MOCK_GEN"})
@click.argument("source")
@click.option("--mocks-out", default=DEFAULT_MOCKS_PATH, show_default=True, type=click.Path(dir_okay=False, path_type=Path), help="Output file for the MSW handlers.")
@click.option("--types-out", default=DEFAULT_TYPES_PATH, show_default=True, type=click.Path(dir_okay=False, path_type=Path), help="Output file for the TypeScript declarations.")
@click.option("--collision", default=CollisionPolicy.FIRST_WINS.value, show_default=True, type=click.Choice([p.value for p in CollisionPolicy]), help="Which endpoint keeps a type name derived more than once.")
@click.option("--array-strategy", default=ArrayStrategy.FIRST_ELEMENT.value, show_default=True, type=click.Choice([s.value for s in ArrayStrategy]), help="How array element types are inferred.")
@click.option("--timeout", default=None, type=float, help="Seconds to wait when fetching a URL source (default: no limit).")
def main(source: str, mocks_out: Path, types_out: Path, collision: str, array_strategy: str, timeout: float | None):
    """Generate MSW mock handlers and TypeScript types from an API spec.

    SOURCE is a URL serving the specification as JSON, or a path to a JSON
    or YAML file of the form {"apis": [...]}.
    """
    config = GeneratorConfig(
        mocks_path=mocks_out,
        types_path=types_out,
        collision_policy=CollisionPolicy(collision),
        array_strategy=ArrayStrategy(array_strategy),
        timeout=timeout,
    )

    click.echo(f"Reading specification from {source}...")
    try:
        spec = load_spec(source, timeout=config.timeout)
    except SpecError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Found {len(spec.apis)} endpoints.")

    artifacts = Translator(config).translate(spec)

    try:
        written = write_artifacts(artifacts, config)
    except OSError as e:
        raise click.ClickException(f"Failed to write output: {e}") from e
    for path in written:
        click.echo(f"  Generated {path}")

    click.echo(f"Done! Generated {len(artifacts.table)} types and {len(written)} files.")
