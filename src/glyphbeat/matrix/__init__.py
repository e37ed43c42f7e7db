"""Glyph Matrix geometry: shape table, format conversion, drawing primitives and font."""

from .brightness import (
    apply_theme_brightness,
    brightness_to_multiplier,
    calculate_final_brightness,
    calculate_preview_alpha,
    multiplier_to_brightness,
)
from .font import (
    CHAR_HEIGHT,
    CHAR_SPACING,
    CHAR_WIDTH,
    Glyph,
    calculate_text_width,
    get_character,
    has_character,
)
from .mapper import (
    FlatBuffer,
    ShapedGrid,
    apply_shape_mask,
    as_matrix,
    clamp_brightness,
    create_empty_flat,
    create_empty_shaped,
    flat_array_to_pixel_string,
    flat_to_shaped,
    parse_pixel_string,
    shaped_to_flat,
)
from .rasterizer import draw_circle, draw_dot, draw_line, fill_grid, round_half_up
from .shape import (
    CENTER_X,
    CENTER_Y,
    FLAT_ARRAY_SIZE,
    GLYPH_SHAPE,
    MAX_BRIGHTNESS,
    MAX_COLUMNS,
    MIN_BRIGHTNESS,
    ROW_OFFSETS,
    TOTAL_ROWS,
    get_row_offset,
    get_row_width,
    in_bounds,
    is_lit_cell,
    shape_mask,
)

__all__ = [
    # Shape table
    "CENTER_X",
    "CENTER_Y",
    "FLAT_ARRAY_SIZE",
    "GLYPH_SHAPE",
    "MAX_BRIGHTNESS",
    "MAX_COLUMNS",
    "MIN_BRIGHTNESS",
    "ROW_OFFSETS",
    "TOTAL_ROWS",
    "get_row_offset",
    "get_row_width",
    "in_bounds",
    "is_lit_cell",
    "shape_mask",
    # Mapper
    "FlatBuffer",
    "ShapedGrid",
    "apply_shape_mask",
    "as_matrix",
    "clamp_brightness",
    "create_empty_flat",
    "create_empty_shaped",
    "flat_array_to_pixel_string",
    "flat_to_shaped",
    "parse_pixel_string",
    "shaped_to_flat",
    # Rasterizer
    "draw_circle",
    "draw_dot",
    "draw_line",
    "fill_grid",
    "round_half_up",
    # Brightness
    "apply_theme_brightness",
    "brightness_to_multiplier",
    "calculate_final_brightness",
    "calculate_preview_alpha",
    "multiplier_to_brightness",
    # Font
    "CHAR_HEIGHT",
    "CHAR_SPACING",
    "CHAR_WIDTH",
    "Glyph",
    "calculate_text_width",
    "get_character",
    "has_character",
]
