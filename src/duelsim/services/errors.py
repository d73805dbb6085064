"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class InventoryError(Exception):
    """Raised when an inventory operation cannot be applied."""


class EventLogError(Exception):
    """Raised when the combat event log cannot be opened or written."""


class SaveLoadError(Exception):
    """Raised when save or load operations fail."""


class SaveWriteError(SaveLoadError):
    """Raised when the player cannot be written to the save file."""


class SaveReadError(SaveLoadError):
    """Raised when the save file cannot be read or parsed."""
