import re
from dataclasses import dataclass, field

from .sudoku_logic import MAX_CLUES, MIN_CLUES, InvalidParameter

__all__ = [
    "DEFAULT_DIFFICULTY_CONFIG",
    "DifficultyConfig",
    "InvalidParameter",
    "resolve_target",
]


def _default_tiers():
    return {
        "easy": (36, 45),
        "medium": (30, 35),
        "hard": (25, 29),
        "expert": (22, 24),
    }


@dataclass
class DifficultyConfig:
    """Clue-count range (inclusive) for every named difficulty tier."""

    tiers: dict = field(default_factory=_default_tiers)

    def __post_init__(self):
        normalized = {}
        for name, bounds in self.tiers.items():
            low, high = bounds
            if low > high:
                raise InvalidParameter(f"Tier `{name}` has an empty range: {low} > {high}")
            if low < MIN_CLUES or high > MAX_CLUES:
                raise InvalidParameter(
                    f"Tier `{name}` range ({low}, {high}) is outside [{MIN_CLUES}, {MAX_CLUES}]"
                )
            normalized[name.strip().lower()] = (low, high)
        self.tiers = normalized


DEFAULT_DIFFICULTY_CONFIG = DifficultyConfig()

_CLUE_COUNT = re.compile(r"[+-]?[0-9]+")


def _check_bounds(count):
    if not MIN_CLUES <= count <= MAX_CLUES:
        raise InvalidParameter(f"Clue count {count} is outside [{MIN_CLUES}, {MAX_CLUES}]")
    return count


def resolve_target(value, rng=None, config=None):
    """
    Turn a tier name or an explicit clue count into the carver's target.

    A tier resolves to a count inside its range: drawn with ``rng`` when one
    is given, otherwise the range's lower bound. Digit strings are read as
    explicit counts.
    """
    config = config or DEFAULT_DIFFICULTY_CONFIG

    if isinstance(value, bool):
        raise InvalidParameter(f"Invalid difficulty: {value!r}")
    if isinstance(value, int):
        return _check_bounds(value)
    if isinstance(value, str):
        key = value.strip().lower()
        if _CLUE_COUNT.fullmatch(key):
            return _check_bounds(int(key))
        if key not in config.tiers:
            raise InvalidParameter(
                f"Unknown difficulty `{value}`, expected one of {sorted(config.tiers)} or a clue count"
            )
        low, high = config.tiers[key]
        count = rng.randint(low, high) if rng is not None else low
        return _check_bounds(count)
    raise InvalidParameter(f"Invalid difficulty: {value!r}")
