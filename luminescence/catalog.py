"""
Attract-mode effect catalog.

Loads the effect list once at construction and answers read-only lookups by
position or by name. Load failures never reach the caller: the error is logged
and the catalog comes up empty, while the fixed mode commands stay available.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

from luminescence.loader import (
    CatalogError,
    CommandRecord,
    Source,
    bundled_resource,
    load_records,
)
from luminescence.protocol import ModeCommand, encode_command

if TYPE_CHECKING:
    from luminescence.config import CatalogConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandEntry:
    """
    One selectable lighting effect.

    Attributes:
        code: Command byte that activates the effect.
        name: Effect display name.
    """

    code: int
    name: str

    @classmethod
    def from_record(cls, record: CommandRecord) -> "CommandEntry":
        return cls(code=record.command, name=record.effect_name)


def as_payload(code: Optional[int]) -> Optional[bytes]:
    """
    Serialize a looked-up command code as a one-byte payload.

    Args:
        code: Command code, or None for a lookup miss.

    Returns:
        Single-byte payload, or None if code is None.
    """
    if code is None:
        return None
    return encode_command(code)


class CommandCatalog:
    """
    Ordered, immutable catalog of attract-mode effects.

    Lookups report a miss as None rather than raising.
    """

    def __init__(self, source: Optional[Source] = None):
        """
        Load the catalog.

        Args:
            source: Resource path or traversable. If None, uses the bundled
                effect list.
        """
        if source is None:
            source = bundled_resource()

        try:
            records = load_records(source)
        except CatalogError as e:
            logger.error(f"Failed to load command catalog from {source}: {e}", exc_info=True)
            records = []
        else:
            logger.info(f"Loaded {len(records)} effects from {source}")

        self._set_entries(CommandEntry.from_record(r) for r in records)

    def _set_entries(self, entries: Iterable[CommandEntry]) -> None:
        self._entries: Tuple[CommandEntry, ...] = tuple(entries)
        self._names: Tuple[str, ...] = tuple(entry.name for entry in self._entries)

    @classmethod
    def from_entries(cls, entries: Iterable[CommandEntry]) -> "CommandCatalog":
        """Build a catalog from already decoded entries, without any I/O."""
        catalog = cls.__new__(cls)
        catalog._set_entries(entries)
        return catalog

    @classmethod
    def from_config(cls, config: "CatalogConfig") -> "CommandCatalog":
        """
        Build a catalog from configuration.

        An explicit path takes precedence over the bundled resource name.
        """
        return cls(config.resolve_source())

    @property
    def count(self) -> int:
        """Number of loaded effects."""
        return len(self._entries)

    @property
    def entries(self) -> Tuple[CommandEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"CommandCatalog(count={self.count})"

    def _entry_at(self, index: int) -> Optional[CommandEntry]:
        # Negative indices are misses, not wrap-around
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def _entry_named(self, name: str) -> Optional[CommandEntry]:
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def all_names(self) -> List[str]:
        """All effect names in load order."""
        return list(self._names)

    def name_at(self, index: int) -> Optional[str]:
        """
        Get effect name by position.

        Args:
            index: Position in the catalog.

        Returns:
            Effect name, or None if index is outside [0, count).
        """
        entry = self._entry_at(index)
        return entry.name if entry is not None else None

    def code_at(self, index: int) -> Optional[int]:
        """
        Get command code by position.

        Args:
            index: Position in the catalog.

        Returns:
            Command code, or None if index is outside [0, count).
        """
        entry = self._entry_at(index)
        return entry.code if entry is not None else None

    def code_for_name(self, name: str) -> Optional[int]:
        """
        Get command code for an effect name.

        Matching is exact. With duplicate names the first entry wins.

        Args:
            name: Effect name.

        Returns:
            Command code, or None if no effect has that name.
        """
        entry = self._entry_named(name)
        return entry.code if entry is not None else None

    def code_at_as_bytes(self, index: int) -> Optional[bytes]:
        return as_payload(self.code_at(index))

    def code_for_name_as_bytes(self, name: str) -> Optional[bytes]:
        return as_payload(self.code_for_name(name))

    # Fixed mode commands, available regardless of catalog contents

    def flash_on_command(self) -> int:
        """White LEDs on as a camera flash, held until the next command."""
        return ModeCommand.FLASH_ON

    def start_interact_command(self) -> int:
        """Interact mode, used before a picture is taken."""
        return ModeCommand.START_INTERACT

    def start_data_collect_command(self) -> int:
        """Data-collect mode, used after a picture is taken."""
        return ModeCommand.START_DATA_COLLECT

    def flash_on_command_bytes(self) -> bytes:
        return encode_command(ModeCommand.FLASH_ON)

    def start_interact_command_bytes(self) -> bytes:
        return encode_command(ModeCommand.START_INTERACT)

    def start_data_collect_command_bytes(self) -> bytes:
        return encode_command(ModeCommand.START_DATA_COLLECT)
