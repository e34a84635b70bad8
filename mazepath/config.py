"""Validated configuration models for maze generation and search."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .search import TieBreak

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .rng import MazeRandomness


class SearchSettings(BaseModel):
    """Knobs passed through to :class:`~mazepath.search.AStarSearch`."""

    model_config = ConfigDict(extra="forbid")

    tie_break: TieBreak = Field(default=TieBreak.HEURISTIC)
    max_expansions: int | None = Field(default=None, ge=1)
    check_edge_costs: bool = Field(default=True)


class MazeSettings(BaseModel):
    """Shape and density of generated mazes."""

    model_config = ConfigDict(extra="forbid")

    rows: int = Field(default=20, ge=1)
    cols: int = Field(default=20, ge=1)
    blocked_probability: float = Field(default=0.2, ge=0.0, le=1.0)
    diagonal: bool = Field(default=False)

    @field_validator("blocked_probability")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols


class RandomnessSettings(BaseModel):
    """Configuration for deterministic RNG streams."""

    model_config = ConfigDict(extra="forbid")

    seed: int = Field(default=0, ge=0)
    salt: str = Field(default="maze")

    def factory(self) -> MazeRandomness:
        """Instantiate a :class:`~mazepath.rng.MazeRandomness` helper."""

        from .rng import MazeRandomness

        return MazeRandomness(seed=self.seed, salt=self.salt)


class MazepathConfig(BaseModel):
    """Top-level configuration payload."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="mazepath")
    maze: MazeSettings = Field(default_factory=MazeSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    randomness: RandomnessSettings = Field(default_factory=RandomnessSettings)

    @property
    def seed(self) -> int:
        return self.randomness.seed


def load_config(path: str | Path | None = None) -> MazepathConfig:
    """Read a JSON config file; a missing path or file yields the defaults."""

    if path is None:
        return MazepathConfig()
    path = Path(path)
    if not path.exists():
        return MazepathConfig()
    return MazepathConfig.model_validate_json(path.read_text(encoding="utf-8"))


__all__ = [
    "MazeSettings",
    "MazepathConfig",
    "RandomnessSettings",
    "SearchSettings",
    "load_config",
]
