"""
Luminescence - command catalog for the Luminescence Bluetooth light unit.

Loads the bundled attract-mode effect list and exposes the one-byte command
codes a Bluetooth transport writes to the device, including the fixed flash,
interact and data-collect mode commands.
"""

__version__ = "0.1.0"
__author__ = "Luminescence Project Contributors"

from luminescence.catalog import CommandCatalog, CommandEntry
from luminescence.protocol import CHARACTERISTIC_UUID, SERVICE_UUID, ModeCommand

__all__ = [
    "CHARACTERISTIC_UUID",
    "SERVICE_UUID",
    "CommandCatalog",
    "CommandEntry",
    "ModeCommand",
    "__version__",
]
