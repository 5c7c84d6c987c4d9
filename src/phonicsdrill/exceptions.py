"""Exceptions raised by the drill services."""


class PhonicsDrillError(Exception):
    """Base class for drill errors."""


class CatalogLoadError(PhonicsDrillError):
    """The word catalog could not be read or parsed."""


class StorageError(PhonicsDrillError):
    """The durable progress storage failed to read or write."""
