"""Dark Timer: stop the clock at exactly 10.00 seconds."""

__version__ = "0.3.0"
