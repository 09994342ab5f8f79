"""idspace - REST API for selecting and ordering ids from a virtual id space."""

__version__ = "0.1.0"
