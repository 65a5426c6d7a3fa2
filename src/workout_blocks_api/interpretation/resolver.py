"""
Value Resolver

"First present candidate wins." Every extractor expresses field precedence
purely through candidate order; there is no implicit priority.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Tuple

from workout_blocks_api.utils import to_number

SourceBags = Mapping[str, Mapping[str, Any]]


def is_present(value: Any) -> bool:
    """Not None and, for strings, not blank."""
    if value is None:
        return False
    if isinstance(value, str):
        return len(value.strip()) > 0
    return True


def pick_value(*candidates: Any) -> Any:
    """Return the first present candidate, or None."""
    for value in candidates:
        if is_present(value):
            return value
    return None


def coerce_numeric(value: Any) -> Any:
    """Numeric strings become numbers; everything else passes through."""
    if isinstance(value, str):
        number = to_number(value)
        return value if number is None else number
    return value


def pick_numeric(*candidates: Any) -> Any:
    """pick_value, then coerce a numeric string winner to a number."""
    return coerce_numeric(pick_value(*candidates))


@dataclass(frozen=True)
class Candidate:
    """
    One optional lookup in a precedence chain.

    `source` names a bag ("exercise", "meta", "parameters", "block_raw", ...)
    supplied by the extractor at resolution time; `key` is looked up in it.
    `transform` formats the raw value before the presence test, so a chain can
    say "this legacy numeric field counts, rendered in kg".
    """
    source: str
    key: str
    transform: Optional[Callable[[Any], Any]] = None

    @property
    def name(self) -> str:
        return f"{self.source}.{self.key}"

    def lookup(self, sources: SourceBags) -> Any:
        bag = sources.get(self.source)
        if not isinstance(bag, Mapping):
            return None
        value = bag.get(self.key)
        if self.transform is not None and value is not None:
            value = self.transform(value)
        return value


Chain = Sequence[Candidate]


def chain(*entries: Any) -> Tuple[Candidate, ...]:
    """Build a chain from "source.key" strings and/or Candidate objects."""
    built = []
    for entry in entries:
        if isinstance(entry, Candidate):
            built.append(entry)
        else:
            source, key = entry.split(".", 1)
            built.append(Candidate(source, key))
    return tuple(built)


def resolve(candidates: Chain, sources: SourceBags) -> Any:
    """Resolve a chain against the given source bags."""
    return pick_value(*(c.lookup(sources) for c in candidates))


def resolve_numeric(candidates: Chain, sources: SourceBags) -> Any:
    return coerce_numeric(resolve(candidates, sources))


def chain_trace(candidates: Chain, sources: SourceBags) -> Optional[str]:
    """Name of the candidate that wins, for debug logging."""
    for candidate in candidates:
        if is_present(candidate.lookup(sources)):
            return candidate.name
    return None


def first_non_empty_list(values: Iterable[Any]) -> list:
    """First value that is a non-empty list, else []."""
    for value in values:
        if isinstance(value, (list, tuple)) and len(value) > 0:
            return list(value)
    return []
