"""Render adapters. SVG is the bundled one."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from chordwheel.engine.scene import PathKind, SceneOptions, ScenePath
from chordwheel.engine.sentiment import SENTIMENT_COLORS

_STOP_OFFSETS = ("0%", "50%", "100%")


class RenderAdapter(Protocol):
    """Anything that can draw scene paths in the order given."""

    def render(self, paths: Sequence[ScenePath], options: SceneOptions) -> str: ...


class SvgRenderer:
    """Standalone SVG document: band gradients in <defs>, then paths in scene order."""

    def __init__(self, title: str = "", use_gradients: bool = True) -> None:
        self.title = title
        self.use_gradients = use_gradients

    def render(self, paths: Sequence[ScenePath], options: SceneOptions) -> str:
        half = options.size / 2
        lines = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<svg viewBox="{-half} {-half} {options.size} {options.size}"'
            f' xmlns="http://www.w3.org/2000/svg" role="img">',
        ]

        if self.title:
            lines.append(f"  <title>{self.title}</title>")

        if self.use_gradients:
            lines.append("  <defs>")
            for identity in SENTIMENT_COLORS.values():
                lines.append(
                    f'    <linearGradient id="{identity.gradient_id}" x1="0%" y1="0%" x2="100%" y2="100%">'
                )
                for offset, color in zip(_STOP_OFFSETS, identity.gradient):
                    lines.append(f'      <stop offset="{offset}" stop-color="{color}" />')
                lines.append("    </linearGradient>")
            lines.append("  </defs>")

        lines.append(f'  <g transform="rotate({options.rotation_deg})">')
        for sp in paths:
            attrs = self._attrs(sp)
            attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
            lines.append(f"    <path {attr_str} />")
        lines.append("  </g>")

        lines.append("</svg>")
        return "\n".join(lines)

    def _attrs(self, sp: ScenePath) -> dict[str, str]:
        paint = f"url(#{sp.gradient_id})" if self.use_gradients else sp.fill
        attrs = {"d": sp.d, "data-band": sp.band.value}
        if sp.kind is PathKind.RIBBON:
            attrs["class"] = "chord-ribbon"
            attrs["fill"] = paint
            attrs["opacity"] = f"{sp.opacity:.4f}"
        else:
            attrs["class"] = "chord-arc"
            attrs["fill"] = "none"
            attrs["stroke"] = paint
            attrs["stroke-width"] = f"{sp.stroke_width:.3f}"
            attrs["stroke-linecap"] = "round"
        return attrs
