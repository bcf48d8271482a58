"""Palette and color helpers shared by the game windows."""


class DeckColors:
    """Light palette for the number board and the ladder."""

    BG = "#e0f7fa"
    PANEL = "#f8fcfd"

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"
    PRIMARY_DARK = "#005662"

    CELL_EMPTY = "#ffffff"
    CELL_FILLED = "#b2ebf2"
    CELL_OPEN = "#69f0ae"
    CELL_BLOCKED = "#eceff1"

    LOCKED = "#b0bec5"
    WEAK = "#ff8a65"
    STRONG = "#69f0ae"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_MUTED = "#78909c"


def _rgb(color: str) -> tuple[int, int, int]:
    color = color.strip()
    if not (color.startswith("#") and len(color) == 7):
        raise ValueError(f"Expected #RRGGBB, got {color!r}")
    return int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)


def blend_hex(a: str, b: str, t: float) -> str:
    """Mix two #RRGGBB colors; t=0 gives a, t=1 gives b. Malformed input returns a."""
    try:
        start, end = _rgb(a), _rgb(b)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    mixed = (int(s + (e - s) * t) for s, e in zip(start, end))
    return "#" + "".join(f"{channel:02X}" for channel in mixed)


def mastery_color(percent: float) -> str:
    """Color for a mastery percentage, from WEAK at 0% to STRONG at 100%."""
    return blend_hex(DeckColors.WEAK, DeckColors.STRONG, percent / 100.0)
