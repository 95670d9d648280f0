"""
Type Dictionary - the registry of chord and scale types.

A TypeDictionary maps canonical names and aliases to immutable entries
(a name plus its intervals from the tonic) and keeps a chroma index for
reverse lookup by pitch-class set.

The registry is append-only: entries are added one at a time and can only
be removed all at once.
"""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from typing import Iterable, Iterator

from chuk_mcp_music_theory.constants import ErrorMessages
from chuk_mcp_music_theory.core.interval import Interval, parse_interval
from chuk_mcp_music_theory.core.pcset import Chroma, PcsetLike, chroma
from chuk_mcp_music_theory.core.pitch import parse_note

logger = logging.getLogger(__name__)

# A tonic glued to the type name, e.g. 'Cmaj7' or 'Bbm7'
_GLUED_TONIC_REGEX = re.compile(r"^([A-Ga-g](?:#+|b+|x+)?)(.*)$")


class NameCollisionError(ValueError):
    """A name or alias is already registered in the dictionary."""

    def __init__(self, name: str, dictionary: str) -> None:
        super().__init__(ErrorMessages.NAME_COLLISION.format(name=name, dictionary=dictionary))
        self.name = name
        self.dictionary = dictionary


class InconsistentChromaError(ValueError):
    """An entry's chroma does not match its intervals."""


@dataclass(frozen=True)
class DictionaryEntry:
    """
    A named chord or scale type.

    The chroma is always the pitch-class set of the intervals; an entry
    with any other chroma cannot be constructed.

    Immutable and hashable.
    """

    name: str
    intervals: tuple[Interval, ...]
    chroma: Chroma
    aliases: tuple[str, ...] = ()
    full_name: str = ""

    def __post_init__(self) -> None:
        expected = chroma(self.intervals)
        if expected != self.chroma:
            raise InconsistentChromaError(
                f"Entry '{self.name}' has chroma {self.chroma} but its intervals give {expected}"
            )

    @classmethod
    def create(
        cls,
        name: str,
        intervals: Iterable[str | Interval],
        aliases: Iterable[str] = (),
        full_name: str = "",
    ) -> DictionaryEntry:
        """
        Build an entry from interval names, computing its chroma.

        Raises:
            ValueError: If the name is empty or an interval does not parse
        """
        if not name:
            raise ValueError("Type name cannot be empty")

        parsed: list[Interval] = []
        for item in intervals:
            ivl = parse_interval(item)
            if ivl is None:
                raise ValueError(ErrorMessages.INVALID_INTERVAL.format(interval=item))
            parsed.append(ivl)
        if not parsed:
            raise ValueError(f"Type '{name}' has no intervals")

        return cls(
            name=name,
            intervals=tuple(parsed),
            chroma=chroma(parsed),
            aliases=(aliases,) if isinstance(aliases, str) else tuple(aliases),
            full_name=full_name,
        )

    @property
    def names(self) -> tuple[str, ...]:
        """The canonical name followed by every alias."""
        return (self.name, *self.aliases)

    @property
    def interval_names(self) -> list[str]:
        return [i.name for i in self.intervals]


def split_tonic(name: str) -> tuple[str | None, str]:
    """
    Split a leading tonic from a type name.

    'C major' -> ('C', 'major'), 'Bbm7' -> ('Bb', 'm7'),
    'melodic minor' -> (None, 'melodic minor').

    This is purely syntactic; TypeDictionary.tokenize checks known names first.
    """
    name = name.strip()
    head, sep, rest = name.partition(" ")
    if sep:
        pitch = parse_note(head)
        if pitch is not None:
            return pitch.name, rest.strip()
        return None, name

    match = _GLUED_TONIC_REGEX.match(name)
    if match:
        pitch = parse_note(match.group(1))
        if pitch is not None:
            return pitch.name, match.group(2)
    return None, name


class TypeDictionary:
    """
    Registry of named interval sets.

    Names are unique across canonical names and aliases. The chroma index
    is built on the first reverse lookup and dropped whenever the registry
    changes. Mutations and index rebuilds hold a single lock.
    """

    def __init__(self, name: str = "types"):
        """
        Initialize an empty dictionary.

        Args:
            name: Dictionary name used in messages (e.g. 'chord')
        """
        self.name = name
        self._entries: list[DictionaryEntry] = []
        self._by_name: dict[str, DictionaryEntry] = {}
        self._index: dict[Chroma, list[DictionaryEntry]] | None = None
        self._lock = threading.RLock()

    def add(
        self,
        name: str,
        intervals: Iterable[str | Interval],
        aliases: Iterable[str] = (),
        full_name: str = "",
    ) -> DictionaryEntry:
        """
        Register a new type.

        Args:
            name: Canonical name
            intervals: Intervals from the tonic
            aliases: Alternative names for the same type. A single
                string is one alias
            full_name: Descriptive name, not used for lookup

        Returns:
            The new entry

        Raises:
            NameCollisionError: If the name or an alias is already registered
            ValueError: If an interval is invalid
        """
        if isinstance(aliases, str):
            aliases = [aliases]
        unique_aliases = [a for a in dict.fromkeys(aliases) if a and a != name]
        entry = DictionaryEntry.create(name, intervals, unique_aliases, full_name)

        with self._lock:
            for candidate in entry.names:
                if candidate in self._by_name:
                    raise NameCollisionError(candidate, self.name)

            self._entries.append(entry)
            for candidate in entry.names:
                self._by_name[candidate] = entry
            self._index = None

        logger.debug(f"Added {self.name} type '{name}' ({entry.chroma})")
        return entry

    def get(self, name: str) -> DictionaryEntry | None:
        """
        Look up a type by name or alias.

        A leading tonic is ignored, so 'C major' and 'major' find the same
        entry. Returns None for unknown names.
        """
        if not isinstance(name, str):
            return None
        _, type_name = self.tokenize(name)
        return self._by_name.get(type_name)

    def lookup(self, name: str) -> DictionaryEntry | None:
        """Look up an exact name or alias, without splitting off a tonic."""
        if not isinstance(name, str):
            return None
        return self._by_name.get(name.strip())

    def tokenize(self, name: str) -> tuple[str | None, str]:
        """
        Split a name into (tonic, type name).

        Known type names are never split, so 'dim' stays a type rather
        than becoming D + 'im'.
        """
        name = name.strip()
        if name in self._by_name:
            return None, name
        return split_tonic(name)

    def find(self, items: PcsetLike) -> list[DictionaryEntry]:
        """All entries whose chroma equals the given set, in insertion order."""
        return list(self._chroma_index().get(chroma(items), []))

    def all(self) -> list[DictionaryEntry]:
        """All entries in insertion order."""
        return list(self._entries)

    def names(self, aliases: bool = False) -> list[str]:
        """
        Registered names in insertion order.

        Args:
            aliases: Include aliases after each canonical name
        """
        if aliases:
            return [n for entry in self._entries for n in entry.names]
        return [entry.name for entry in self._entries]

    def remove_all(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()
            self._by_name.clear()
            self._index = None
        logger.debug(f"Cleared {self.name} dictionary")

    def _chroma_index(self) -> dict[Chroma, list[DictionaryEntry]]:
        with self._lock:
            if self._index is None:
                index: dict[Chroma, list[DictionaryEntry]] = {}
                for entry in self._entries:
                    index.setdefault(entry.chroma, []).append(entry)
                self._index = index
            return self._index

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[DictionaryEntry]:
        return iter(self.all())

    def __repr__(self) -> str:
        return f"TypeDictionary({self.name!r}, {len(self._entries)} entries)"
