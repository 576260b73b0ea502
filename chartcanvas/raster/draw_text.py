from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from chartcanvas.raster.canvas import blend_coverage
from chartcanvas.surface import RGBA, FontSpec, TextAlign


SANS_FONT_FALLBACK_PATTERNS = (
    "arial",
    "helvetica",
    "dejavusans",
    "dejavu sans",
    "liberationsans",
    "liberation sans",
    "freesans",
)
GENERIC_FAMILIES = {"sans-serif", "sans serif", "sans", "serif", "monospace"}

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


def text_width(text: str, font: FontSpec) -> float:
    if not text:
        return 0.0
    return float(_load_font(font.family, font.size_px).getlength(text))


def draw_text(
    dst: np.ndarray,
    x: float,
    y: float,
    text: str,
    color: RGBA,
    *,
    font: FontSpec,
    align: TextAlign = "left",
    rotate_deg: int = 0,
) -> None:
    """Blend `text` with its alphabetic baseline on `y`.

    `align` positions the run relative to `x` along the reading direction; for
    rotated text the reading direction is rotated with it.
    """
    if not text:
        return
    loaded = _load_font(font.family, font.size_px)
    mask, left, top = _render_mask(text, loaded)
    ascent = _ascent(loaded)
    advance = float(loaded.getlength(text))
    if align == "center":
        start = -advance * 0.5
    elif align == "right":
        start = -advance
    else:
        start = 0.0

    # Offsets of the mask's top-left corner from the anchor, in reading frame.
    along = start + left
    across = top - ascent
    turns = _normalize_quarter_turns(rotate_deg)
    h, w = mask.shape
    if turns == 0:
        ox, oy = along, across
    elif turns == 1:
        # Counter-clockwise: text reads bottom-to-top.
        ox, oy = across, -(along + w)
    elif turns == 2:
        ox, oy = -(along + w), -(across + h)
    else:
        ox, oy = -(across + h), along
    mask = np.rot90(mask, k=turns) if turns else mask
    _blend_mask(dst, int(round(x + ox)), int(round(y + oy)), mask, color)


def _blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    h, w = mask.shape
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return
    cov = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / 255.0
    blend_coverage(dst[y0:y1, x0:x1], cov * (color[3] / 255.0), color)


@lru_cache(maxsize=256)
def _render_mask(text: str, font: Font) -> tuple[np.ndarray, int, int]:
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8), int(left), int(top)


def _ascent(font: Font) -> float:
    if isinstance(font, ImageFont.FreeTypeFont):
        return float(font.getmetrics()[0])
    return float(font.getbbox("A")[3])


@lru_cache(maxsize=64)
def _load_font(family: str, size_px: float) -> Font:
    size = max(1, int(round(size_px)))
    font_path = _resolve_font_path(family)
    if font_path is not None:
        try:
            return ImageFont.truetype(str(font_path), size=size)
        except OSError:
            pass
    return ImageFont.load_default(size=size)


def _resolve_font_path(family: str) -> Path | None:
    wanted = family.strip().lower()
    patterns = SANS_FONT_FALLBACK_PATTERNS
    if wanted and wanted not in GENERIC_FAMILIES:
        patterns = (wanted,) + patterns

    font_dirs = [
        Path.home() / "Library" / "Fonts",
        Path("/Library/Fonts"),
        Path("/System/Library/Fonts"),
        Path("/System/Library/Fonts/Supplemental"),
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
        Path("C:/Windows/Fonts"),
    ]
    candidates = _font_candidates(tuple(font_dirs))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            stem = path.stem.lower().replace(" ", "")
            if stem == p or stem.startswith(p):
                return path
    return None


@lru_cache(maxsize=1)
def _font_candidates(font_dirs: tuple[Path, ...]) -> tuple[Path, ...]:
    found: list[Path] = []
    for base in font_dirs:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf", "*.ttc"):
            found.extend(sorted(base.rglob(ext)))
    return tuple(found)


def _normalize_quarter_turns(rotate_deg: int) -> int:
    if rotate_deg % 90 != 0:
        raise ValueError("rotate_deg must be a multiple of 90")
    return (rotate_deg // 90) % 4
