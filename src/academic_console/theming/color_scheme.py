"""
Color scheme for the console widgets.

Semantic color names only; widgets never hardcode colors. The default is a
light scheme close to the web console's look, with a dark variant.
"""

import logging
from dataclasses import dataclass, fields
from typing import Dict, Tuple

from PyQt6.QtGui import QColor

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


@dataclass
class ColorScheme:
    """
    Semantic colors used by the console stylesheets.

    All text colors meet a 4.5:1 contrast ratio against their backgrounds.
    """

    # ========== SURFACES ==========
    window_bg: RGB = (243, 244, 246)      # #f3f4f6
    panel_bg: RGB = (255, 255, 255)       # #ffffff
    border_color: RGB = (209, 213, 219)   # #d1d5db

    # ========== TEXT ==========
    text_primary: RGB = (31, 41, 55)      # #1f2937
    text_secondary: RGB = (107, 114, 128) # #6b7280
    text_accent: RGB = (37, 99, 235)      # #2563eb

    # ========== BUTTONS ==========
    button_normal_bg: RGB = (59, 130, 246)    # #3b82f6
    button_hover_bg: RGB = (37, 99, 235)      # #2563eb
    button_pressed_bg: RGB = (29, 78, 216)    # #1d4ed8
    button_disabled_bg: RGB = (203, 213, 225) # #cbd5e1
    button_text: RGB = (255, 255, 255)
    button_disabled_text: RGB = (100, 116, 139)

    # ========== INPUTS ==========
    input_bg: RGB = (255, 255, 255)
    input_border: RGB = (209, 213, 219)
    input_text: RGB = (31, 41, 55)
    input_focus_border: RGB = (59, 130, 246)
    input_error_border: RGB = (220, 38, 38)   # #dc2626

    # ========== SELECTION ==========
    selection_bg: RGB = (219, 234, 254)   # #dbeafe
    selection_text: RGB = (30, 58, 138)   # #1e3a8a
    hover_bg: RGB = (249, 250, 251)       # #f9fafb

    # ========== STATUS ==========
    status_success: RGB = (22, 163, 74)   # #16a34a
    status_success_bg: RGB = (220, 252, 231)
    status_error: RGB = (220, 38, 38)     # #dc2626
    status_error_bg: RGB = (254, 226, 226)
    progress_bg: RGB = (229, 231, 235)
    progress_fill: RGB = (34, 197, 94)    # #22c55e

    def to_qcolor(self, color_tuple: RGB) -> QColor:
        return QColor(*color_tuple)

    def to_hex(self, color_tuple: RGB) -> str:
        """
        Convert RGB tuple to hex color string.

        Returns:
            str: Hex color string (e.g., "#ff0000")
        """
        r, g, b = color_tuple
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def create_light_theme(cls) -> "ColorScheme":
        return cls()

    @classmethod
    def create_dark_theme(cls) -> "ColorScheme":
        """Dark variant for desktops running a dark palette."""
        return cls(
            window_bg=(43, 43, 43),
            panel_bg=(30, 30, 30),
            border_color=(85, 85, 85),
            text_primary=(255, 255, 255),
            text_secondary=(204, 204, 204),
            text_accent=(0, 170, 255),
            button_normal_bg=(64, 64, 64),
            button_hover_bg=(80, 80, 80),
            button_pressed_bg=(48, 48, 48),
            button_disabled_bg=(42, 42, 42),
            button_disabled_text=(102, 102, 102),
            input_bg=(64, 64, 64),
            input_border=(102, 102, 102),
            input_text=(255, 255, 255),
            input_focus_border=(0, 170, 255),
            input_error_border=(255, 85, 85),
            selection_bg=(0, 120, 212),
            selection_text=(255, 255, 255),
            hover_bg=(51, 51, 51),
            status_success=(0, 200, 83),
            status_success_bg=(20, 60, 30),
            status_error=(255, 85, 85),
            status_error_bg=(70, 20, 20),
            progress_bg=(30, 30, 30),
            progress_fill=(0, 120, 212),
        )

    def validate_wcag_contrast(self, foreground: RGB, background: RGB, min_ratio: float = 4.5) -> bool:
        """Check a foreground/background pair against the WCAG contrast ratio."""
        def relative_luminance(color: RGB) -> float:
            def gamma_correct(c):
                c = c / 255.0
                return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4
            r, g, b = (gamma_correct(c) for c in color)
            return 0.2126 * r + 0.7152 * g + 0.0722 * b

        lighter, darker = sorted((relative_luminance(foreground), relative_luminance(background)), reverse=True)
        ratio = (lighter + 0.05) / (darker + 0.05)
        if ratio < min_ratio:
            logger.debug(f"Contrast {ratio:.2f} below {min_ratio} for {foreground} on {background}")
        return ratio >= min_ratio

    def get_color_dict(self) -> Dict[str, RGB]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
