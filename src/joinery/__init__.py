"""Pane layout engine for windows, doors and screens.

Splits frame openings into glass panes around mullions and transoms,
subdivides sash glass between glazing bars, and lays out the full front
elevation of a quote item for renderers.
"""

__version__ = "0.1.0"
