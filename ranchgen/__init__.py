"""ranchgen -- project generator for ranch-based Elixir network services."""

__version__ = "0.1.0"
