"""Render parsed templates into display paragraphs."""

from enum import StrEnum
from typing import Callable, Iterable, Mapping, Optional

from tft_tooltip.data.models.numeric import format_number, round_half_up
from .template_parser import (
    PlaceholderSegment,
    Segment,
    TextSegment,
    ParsedTemplate,
    normalize_whitespace,
)
from .variable_scaler import ScaledValues


class RenderStyle(StrEnum):
    """How a resolved variable is written into the description."""
    CURRENT = "current"        # 140
    FULL_RANGE = "full_range"  # 80/120/180
    WITH_BONUS = "with_bonus"  # 140 (+20)
    BREAKDOWN = "breakdown"    # 140 [80/120/180]


def _scaled(value: float, multiplier: float) -> str:
    return format_number(round_half_up(value * multiplier))


def format_value(
    values: ScaledValues,
    style: RenderStyle = RenderStyle.CURRENT,
    multiplier: float = 1.0,
    star_level: int = 1,
) -> str:
    """
    Format one scaled variable in a render style.

    Args:
        values: Output of VariableScaler.scale.
        style: Render style.
        multiplier: Display multiplier from ``@Key*100@`` placeholders.
        star_level: Current star level, 1-3.

    Returns:
        Display string.
    """
    if multiplier == 1.0:
        finals = [format_number(v) for v in values.final_values]
        current = format_number(values.current_value)
        bonus = values.bonus
    else:
        # Scale before rounding so 0.25 * 100 shows as 25, not 0
        raw = values.raw_values or [float(v) for v in values.final_values]
        finals = [_scaled(v, multiplier) for v in raw]
        current = finals[star_level - 1]
        bonus = round_half_up(raw[star_level - 1] * multiplier) - round_half_up(
            values.base_values[star_level - 1] * multiplier
        )

    style = RenderStyle(style)
    if style == RenderStyle.FULL_RANGE:
        return "/".join(finals)
    if style == RenderStyle.WITH_BONUS:
        if bonus > 0:
            return f"{current} (+{format_number(bonus)})"
        return current
    if style == RenderStyle.BREAKDOWN:
        bases = "/".join(_scaled(v, multiplier) for v in values.base_values)
        return f"{current} [{bases}]"
    return current


class DescriptionRenderer:
    """
    Substitute placeholders in a parsed template with resolved values.

    Usage:
        renderer = DescriptionRenderer(style=RenderStyle.WITH_BONUS)
        paragraphs = renderer.render(parsed, scaled_by_key, star_level=2)
    """

    def __init__(
        self,
        style: RenderStyle = RenderStyle.CURRENT,
        translator: Optional[Callable[[str], str]] = None,
    ):
        """
        Initialize the renderer.

        Args:
            style: Render style for placeholder values.
            translator: Optional keyword translation applied to literal text
                only, never to substituted numbers.
        """
        self.style = RenderStyle(style)
        self.translator = translator

    def render(
        self,
        parsed: ParsedTemplate,
        values: Mapping[str, ScaledValues],
        star_level: int = 1,
    ) -> list[str]:
        """Render every visible paragraph of a parsed template."""
        lookup = _KeyLookup(values)
        rendered = []
        for paragraph in parsed.paragraphs:
            text = self.render_segments(paragraph.segments, lookup, star_level)
            if text:
                rendered.append(text)
        return rendered

    def render_segments(
        self,
        segments: Iterable[Segment],
        values: Mapping[str, ScaledValues],
        star_level: int = 1,
    ) -> str:
        """Render a run of segments into one normalized line."""
        lookup = values if isinstance(values, _KeyLookup) else _KeyLookup(values)
        parts = []
        for segment in segments:
            if isinstance(segment, TextSegment):
                parts.append(self.translator(segment.text) if self.translator else segment.text)
            elif isinstance(segment, PlaceholderSegment):
                parts.append(self._render_placeholder(segment, lookup, star_level))
        return normalize_whitespace("".join(parts))

    def _render_placeholder(
        self,
        segment: PlaceholderSegment,
        lookup: "_KeyLookup",
        star_level: int,
    ) -> str:
        scaled = lookup.get(segment.key)
        if scaled is None:
            return f"[{segment.key}]"
        return format_value(scaled, self.style, segment.multiplier, star_level)


class _KeyLookup(Mapping):
    """Read-only view matching keys exactly, then case-insensitively."""

    def __init__(self, values: Mapping[str, ScaledValues]):
        self._values = dict(values)
        self._lowered = {k.lower(): v for k, v in self._values.items()}

    def __getitem__(self, key: str) -> ScaledValues:
        if key in self._values:
            return self._values[key]
        return self._lowered[key.lower()]

    def __iter__(self):
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)
