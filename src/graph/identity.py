# src/graph/identity.py - v1
"""Bidirectional login <-> vertex index mapping.

Indices follow the lexicographic order of the distinct logins, so the same
set of logins always produces the same numbering.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class IdentityMap:
    """Immutable bijection between logins and indices 0..N-1."""

    def __init__(self, logins: Iterable[str]) -> None:
        self._logins: list[str] = sorted(set(logins))
        self._index: dict[str, int] = {
            login: i for i, login in enumerate(self._logins)
        }

    def __len__(self) -> int:
        return len(self._logins)

    def __contains__(self, login: object) -> bool:
        return login in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._logins)

    def __repr__(self) -> str:
        return f"IdentityMap(size={len(self._logins)})"

    def index_of(self, login: str) -> int:
        """Vertex index of a login. Raises KeyError for unknown logins."""
        try:
            return self._index[login]
        except KeyError:
            raise KeyError(f"Unknown login: {login!r}") from None

    def login_of(self, index: int) -> str:
        """Login of a vertex index. Raises KeyError for out-of-range indices."""
        if index < 0 or index >= len(self._logins):
            raise KeyError(f"Unknown vertex index: {index}")
        return self._logins[index]

    def logins(self, indices: Iterable[int]) -> list[str]:
        return [self.login_of(i) for i in indices]

    def as_dict(self) -> dict[str, int]:
        return dict(self._index)
