"""lift-log: personal workout logging with editable programs."""

__version__ = "0.1.0"
