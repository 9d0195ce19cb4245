"""Theming: semantic colors and generated stylesheets."""

from .color_scheme import ColorScheme
from .style_generator import StyleSheetGenerator

__all__ = ["ColorScheme", "StyleSheetGenerator"]
