"""
Theme Configuration

The colour scheme is derived once from a seed colour at startup and then
passed explicitly to whatever renders the page. There is no process-wide
theme object.

Derivation works in HLS space: containers are light tints of the seed hue,
"on" colours are dark shades of it. Secondary colours use the same hue with
reduced saturation.
"""

import colorsys

from pydantic import BaseModel, ConfigDict, Field

from expense_tracker.config.settings import ThemeSettings


CONTAINER_LIGHTNESS = 0.90
ON_CONTAINER_LIGHTNESS = 0.12
SECONDARY_SATURATION_FACTOR = 0.35


def hex_to_rgb(value: str) -> tuple[float, float, float]:
    """'#RRGGBB' -> (r, g, b) with channels in 0..1."""
    value = value.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a 6 digit hex colour, got {value!r}")
    return tuple(int(value[i:i + 2], 16) / 255 for i in (0, 2, 4))


def rgb_to_hex(rgb: tuple[float, float, float]) -> str:
    return "#" + "".join(f"{round(max(0.0, min(1.0, c)) * 255):02X}" for c in rgb)


def _tone(hue: float, lightness: float, saturation: float) -> str:
    return rgb_to_hex(colorsys.hls_to_rgb(hue, lightness, saturation))


class ColorScheme(BaseModel):
    """The handful of roles the page actually uses."""
    model_config = ConfigDict(frozen=True)

    primary: str
    primary_container: str
    on_primary_container: str
    secondary_container: str
    on_secondary_container: str

    @classmethod
    def from_seed(cls, seed: str) -> "ColorScheme":
        """Derive a scheme from a '#RRGGBB' seed colour."""
        hue, _, saturation = colorsys.rgb_to_hls(*hex_to_rgb(seed))
        secondary_saturation = saturation * SECONDARY_SATURATION_FACTOR
        return cls(
            primary=rgb_to_hex(hex_to_rgb(seed)),
            primary_container=_tone(hue, CONTAINER_LIGHTNESS, saturation),
            on_primary_container=_tone(hue, ON_CONTAINER_LIGHTNESS, saturation),
            secondary_container=_tone(hue, CONTAINER_LIGHTNESS, secondary_saturation),
            on_secondary_container=_tone(hue, ON_CONTAINER_LIGHTNESS, secondary_saturation),
        )


class ThemeConfig(BaseModel):
    """
    Everything the page needs to style itself.

    Built at startup and injected; the app bar uses the inverted primary
    container pair, cards the secondary container.
    """
    model_config = ConfigDict(frozen=True)

    color_scheme: ColorScheme
    card_margin_horizontal: int = Field(default=16, ge=0)
    card_margin_vertical: int = Field(default=8, ge=0)
    title_font_size: int = Field(default=16, ge=8)

    @classmethod
    def from_settings(cls, settings: ThemeSettings) -> "ThemeConfig":
        return cls(color_scheme=ColorScheme.from_seed(settings.seed_color))

    @property
    def app_bar_background(self) -> str:
        return self.color_scheme.on_primary_container

    @property
    def app_bar_foreground(self) -> str:
        return self.color_scheme.primary_container

    def to_css(self) -> str:
        """Render the theme as a <style> block."""
        scheme = self.color_scheme
        return f"""
<style>
    .app-bar {{
        padding: 12px 20px;
        border-radius: 10px;
        background-color: {self.app_bar_background};
        color: {self.app_bar_foreground};
        margin-bottom: 10px;
    }}
    .expense-card {{
        padding: 12px 16px;
        border-radius: 10px;
        background-color: {scheme.secondary_container};
        margin: {self.card_margin_vertical}px {self.card_margin_horizontal}px;
    }}
    .expense-title {{
        font-weight: bold;
        font-size: {self.title_font_size}px;
        color: {scheme.on_secondary_container};
    }}
    .stButton>button[kind="primary"] {{
        background-color: {scheme.primary_container};
        color: {scheme.on_primary_container};
        border: none;
    }}
</style>
"""
