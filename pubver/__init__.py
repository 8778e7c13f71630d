"""pubver: decide which version a CI run should publish."""

__version__ = "0.1.0"
