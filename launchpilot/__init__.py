"""LaunchPilot: compose landing page blueprints from a product brief and export them as HTML."""

__version__ = "0.1.0"
