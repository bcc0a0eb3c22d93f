"""Address book with navigation, search, binary save files, vCard export and a car model."""

__version__ = "0.1.0"

__all__ = ["app", "book", "car", "cli", "datastream", "search", "vcard"]