"""Action Launcher — bootstrap and dispatch a prebuilt CI action binary."""

__version__ = "0.1.0"
