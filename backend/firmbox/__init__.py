"""FirmBox API — business idea to business plan generation service."""

__version__ = "1.0.0"
