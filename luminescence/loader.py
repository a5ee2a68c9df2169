"""
Command resource loading and decoding.

The effect list ships as a property list holding an ordered array of
``{command, effectName}`` records. JSON files with the same shape are also
accepted so lists can be edited without plist tooling.
"""

import json
import logging
import plistlib
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import List, Union
from xml.parsers.expat import ExpatError

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from luminescence.protocol import COMMAND_MAX, COMMAND_MIN

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_NAME = "luminescenceAttractCommands"
RESOURCE_EXTENSION = ".plist"

Source = Union[str, Path, Traversable]


class CatalogError(Exception):
    """Base error for command resource problems."""


class CatalogLoadError(CatalogError):
    """Command resource missing or unreadable."""


class CatalogDecodeError(CatalogError):
    """Command resource present but malformed."""


class CommandRecord(BaseModel):
    """One record of the command resource."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    command: int = Field(ge=COMMAND_MIN, le=COMMAND_MAX, description="Command byte")
    effect_name: str = Field(alias="effectName", description="Display name of the effect")


def bundled_resource(name: str = DEFAULT_RESOURCE_NAME) -> Traversable:
    """
    Resolve a command resource bundled in the package data directory.

    Args:
        name: Logical resource name, without extension.

    Returns:
        Traversable pointing at the resource (may not exist).
    """
    return resources.files("luminescence").joinpath("data", name + RESOURCE_EXTENSION)


def read_resource(source: Source) -> bytes:
    """
    Read raw bytes of a command resource.

    Raises:
        CatalogLoadError: If the resource is missing or unreadable.
    """
    logger.debug(f"Reading command resource: {source}")
    if isinstance(source, str):
        source = Path(source)
    try:
        return source.read_bytes()
    except OSError as e:
        raise CatalogLoadError(f"Cannot read command resource {source}: {e}") from e


def _parse(raw: bytes, suffix: str) -> object:
    if suffix == ".json":
        try:
            return json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise CatalogDecodeError(f"Invalid JSON: {e}") from e
    try:
        return plistlib.loads(raw)
    except (
        plistlib.InvalidFileException,
        ExpatError,
        ValueError,
        TypeError,
        AttributeError,  # unparseable <date> values
        KeyError,
        RecursionError,
    ) as e:
        raise CatalogDecodeError(f"Invalid property list: {e}") from e


def decode_records(raw: bytes, suffix: str = RESOURCE_EXTENSION) -> List[CommandRecord]:
    """
    Decode a command resource into records, preserving order.

    Args:
        raw: Resource contents.
        suffix: File suffix selecting the format (".json", otherwise plist).

    Returns:
        Records in source order.

    Raises:
        CatalogDecodeError: If the data is malformed or a record has the wrong shape.
    """
    data = _parse(raw, suffix.lower())
    if not isinstance(data, list):
        raise CatalogDecodeError(
            f"Command resource must be an array of records, got {type(data).__name__}"
        )

    records = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise CatalogDecodeError(f"Record {i} is not a dictionary")
        try:
            records.append(CommandRecord.model_validate(item))
        except ValidationError as e:
            raise CatalogDecodeError(f"Record {i} invalid: {e}") from e
    return records


def load_records(source: Source) -> List[CommandRecord]:
    """
    Read and decode a command resource.

    Raises:
        CatalogLoadError: If the resource cannot be read.
        CatalogDecodeError: If the resource cannot be decoded.
    """
    raw = read_resource(source)
    return decode_records(raw, Path(str(source)).suffix or RESOURCE_EXTENSION)
