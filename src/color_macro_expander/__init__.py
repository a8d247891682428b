"""
color_macro_expander
====================

Does: Root package initializer for the color macro expander project.
Returns: Exposes the `expansion` subpackage and the top-level `expand` helpers.
Used by: All higher-level imports starting from `color_macro_expander.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
