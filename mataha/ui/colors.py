"""Game palette and color utilities for the UI."""


class GameColors:
    """Palette of the board and the window around it."""

    PLAYER = "#007BFF"
    EXIT = "#8B4513"
    WALL = "#4CAF50"
    STAR = "#FFD700"

    BOARD_BG = "#FFFFFF"
    WINDOW_BG = "#F1F8E9"

    TEXT_PRIMARY = "#1B5E20"
    TEXT_SECONDARY = "#558B2F"

    BUTTON_BG = "#4CAF50"
    BUTTON_PRESSED = "#388E3C"

    CONFETTI = (
        "#f44336", "#e91e63", "#9c27b0", "#673ab7",
        "#3f51b5", "#2196f3", "#03a9f4", "#00bcd4",
        "#009688", "#4caf50", "#8bc34a", "#cddc39",
        "#ffeb3b", "#ffc107", "#ff9800", "#ff5722",
    )


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except ValueError:
        return a
