"""Reproducible random source for maze generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from numpy.random import Generator, SeedSequence, default_rng


@dataclass
class MazeRandomness:
    """A seeded ``numpy`` generator shared by everything that builds one maze.

    ``salt`` is mixed into the seed so two mazes built from the same seed
    but different salts do not share walls.
    """

    seed: int
    salt: str = "maze"
    _rng: Generator | None = field(default=None, init=False, repr=False)

    def seed_sequence(self) -> SeedSequence:
        return SeedSequence([self.seed, *self.salt.encode("utf-8")])

    def generator(self) -> Generator:
        if self._rng is None:
            self._rng = default_rng(self.seed_sequence())
        return self._rng

    def reset(self) -> None:
        """Rewind so the next draw repeats the first one."""

        self._rng = None


__all__ = ["MazeRandomness"]
