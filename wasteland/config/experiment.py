"""Puzzle configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class GraphConfig:
    """Node selection rules for the two puzzle parts."""

    start_suffix: str = "A"  # part 2: every label ending here starts a walker
    terminal_suffix: str = "Z"  # part 2: arrival criterion
    single_start: str = "AAA"  # part 1 start label
    single_goal: str = "ZZZ"  # part 1 goal label


@dataclass(frozen=True, slots=True)
class TraversalConfig:
    """Traversal engine parameters."""

    max_steps: int | None = None  # explicit bound; None -> bound_factor rule
    bound_factor: int = 10  # bound = factor * len(instructions) * len(graph)
    vectorized: bool = False  # use the numpy arena engine
    shuffle_walkers: bool = False  # randomise per-round walker order (seeded)
    verify_periodicity: bool = False  # check the LCM assumption after a run
    validate_graph: bool = True  # structural pre-checks before a run


@dataclass(frozen=True, slots=True)
class PuzzleConfig:
    """Top-level configuration composing all sub-configs.

    Cross-parameter validation runs in __post_init__ to reject invalid
    configurations early.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    traversal: TraversalConfig = field(default_factory=TraversalConfig)
    part: int = 2
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.part not in (1, 2):
            raise ValueError(f"part must be 1 or 2, got {self.part}")
        if not self.graph.start_suffix or not self.graph.terminal_suffix:
            raise ValueError("start_suffix and terminal_suffix must be non-empty")
        if self.graph.start_suffix == self.graph.terminal_suffix:
            raise ValueError(
                f"start_suffix and terminal_suffix must differ, both are "
                f"{self.graph.start_suffix!r}"
            )
        if self.traversal.bound_factor < 1:
            raise ValueError(
                f"bound_factor must be >= 1, got {self.traversal.bound_factor}"
            )
        if self.traversal.max_steps is not None and self.traversal.max_steps < 1:
            raise ValueError(
                f"max_steps must be >= 1, got {self.traversal.max_steps}"
            )
        if self.traversal.vectorized and self.traversal.shuffle_walkers:
            raise ValueError(
                "shuffle_walkers has no effect with the vectorized engine"
            )
