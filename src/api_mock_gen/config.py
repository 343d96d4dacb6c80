"""Generator configuration."""

from pathlib import Path

from pydantic import BaseModel

from api_mock_gen.generator.declarations import CollisionPolicy
from api_mock_gen.generator.inference import ArrayStrategy

DEFAULT_MOCKS_PATH = Path("frontend/src/mocks/handlers.ts")
DEFAULT_TYPES_PATH = Path("frontend/src/api.d.ts")


class GeneratorConfig(BaseModel):
    """Where the two artifacts go and which inference policies apply."""

    mocks_path: Path = DEFAULT_MOCKS_PATH
    types_path: Path = DEFAULT_TYPES_PATH
    collision_policy: CollisionPolicy = CollisionPolicy.FIRST_WINS
    array_strategy: ArrayStrategy = ArrayStrategy.FIRST_ELEMENT
    timeout: float | None = None  # seconds; None waits forever
