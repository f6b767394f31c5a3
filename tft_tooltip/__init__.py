"""TFT ability tooltip engine.

Resolves templated Community Dragon ability descriptions against a unit's
star level and items into display-ready tooltips.
"""

__version__ = "1.0.0"
