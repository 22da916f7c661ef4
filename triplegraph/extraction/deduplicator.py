"""
Triple deduplication.

Triples are keyed by their exact serialization. Near-duplicates that differ
in casing, whitespace or wording ("capital_of" vs "capital of") are kept
apart; no normalization is applied.
"""

from typing import Iterable, Iterator

from ..schema.triples import Triple


class TripleSet:
    """Set of triples keyed by Triple.key()."""

    def __init__(self, triples: Iterable[Triple] = ()) -> None:
        self._triples: dict[str, Triple] = {}
        for triple in triples:
            self.add(triple)

    def add(self, triple: Triple) -> bool:
        """
        Add a triple.

        Returns:
            True if the triple was new, False if an identical one was present
        """
        key = triple.key()
        if key in self._triples:
            return False
        self._triples[key] = triple
        return True

    def triples(self) -> list[Triple]:
        """Return the distinct triples. Order is not part of the contract."""
        return list(self._triples.values())

    def __contains__(self, triple: object) -> bool:
        return isinstance(triple, Triple) and triple.key() in self._triples

    def __iter__(self) -> Iterator[Triple]:
        return iter(list(self._triples.values()))

    def __len__(self) -> int:
        return len(self._triples)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TripleSet):
            return NotImplemented
        return set(self._triples) == set(other._triples)


def deduplicate(triples: Iterable[Triple]) -> TripleSet:
    """Collapse structurally identical triples."""
    return TripleSet(triples)
