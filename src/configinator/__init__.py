"""configinator — discover and load Lift analysis configuration."""

__version__ = '0.1.0'
