"""centsible - budget arithmetic in integer cents."""

__version__ = "0.1.0"
