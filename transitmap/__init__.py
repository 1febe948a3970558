"""String helpers, DSV and XML readers and writers, and street map and bus system models."""

__version__ = "0.1.0"