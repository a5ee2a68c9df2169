"""
Device protocol constants for the Luminescence light unit.

Every unit exposes the same GATT service and write characteristic; only the
advertised name differs between physical units. Commands are single unsigned
bytes written verbatim to the characteristic. The device holds the last
command's lighting behavior until a new command is received.
"""

from enum import IntEnum

# GATT service controlling the device
SERVICE_UUID = "6475221b-de88-46ed-9cbf-565f42149168"

# Characteristic to write command bytes to
CHARACTERISTIC_UUID = "24517ce4-2dc1-6489-39a4-672bbe4344df"

COMMAND_MIN = 0x00
COMMAND_MAX = 0xFF


class ModeCommand(IntEnum):
    """
    Fixed device-mode command codes.

    These are independent of the attract effect list and are always available.
    """

    START_INTERACT = 0xD0  # Interact mode, before a picture is taken
    START_DATA_COLLECT = 0xD1  # Data-collect mode, after a picture is taken
    FLASH_ON = 0xF0  # White LEDs held on as a camera flash


def encode_command(code: int) -> bytes:
    """
    Encode a command code as a one-byte payload.

    Args:
        code: Command code (0-255).

    Returns:
        Single-byte payload.

    Raises:
        ValueError: If code does not fit in one unsigned byte.
    """
    if not COMMAND_MIN <= code <= COMMAND_MAX:
        raise ValueError(f"Command code out of range: {code}")
    return bytes([code])


def decode_command(data: bytes) -> int:
    """
    Decode a one-byte payload back to its command code.

    Args:
        data: Payload bytes.

    Returns:
        Command code.

    Raises:
        ValueError: If payload is not exactly one byte.
    """
    if len(data) != 1:
        raise ValueError(f"Command payload must be 1 byte, got {len(data)}")
    return data[0]
