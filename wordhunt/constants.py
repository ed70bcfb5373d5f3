from __future__ import annotations

# --- Palette ----------------------------------------------------------------
BG = (8, 10, 12)                 # window background
PANEL_BG = (17, 24, 20)          # grid panel ("terminal") background
INK = (235, 235, 235)            # primary text colour
MUTED = (150, 160, 155)          # secondary text (size / speed labels)
ACCENT = (255, 210, 90)          # accent colour for highlights

GRID_INK = (74, 222, 128)        # letters inside the grid
CELL_HOVER = (55, 65, 60)
CURSOR_FILL = (37, 99, 235)
CURSOR_BORDER = (96, 165, 250)
CURSOR_BLINK_FILL = (147, 197, 253)

LETTER_FOUND = (74, 222, 128)    # already found letters of the target word
LETTER_PENDING = (250, 204, 21)  # letters still to be found

NOTICE_COLORS = {
    "WRONG_LETTER": (59, 130, 246),
    "WORD_FOUND": (22, 163, 74),
    "LETTER_UNREACHABLE": (220, 38, 38),
}

# --- Layout ----------------------------------------------------------------
PADDING = 0.05                   # fraction of the window kept free at the edges
HEADER_H_FACTOR = 0.26           # share of the window height used by the HUD
CELL_MAX_PX = 56
CELL_MIN_PX = 8
UI_RADIUS = 8
TITLE_FONT_SIZE = 44
HUD_FONT_SIZE = 30
SMALL_FONT_SIZE = 22
WINDOWED_DEFAULT_SIZE = (720, 900)

# --- Shuffle speed display: (base - interval) / divisor ------------------
SHUFFLE_SPEED_BASE_MS = 10000
SHUFFLE_SPEED_DIVISOR = 50

# --- Text -------------------------------------------------------------------
TITLE = "WORD HUNT TERMINAL"
MSG_WRONG_LETTER = "Wrong letter! Look for '{letter}'."
MSG_WORD_FOUND = "Word found! Next word..."
MSG_LETTER_UNREACHABLE = "Game over! The letter '{letter}' could not be found."
CAPTION = "Word Hunt"

# --- Fonts ------------------------------------------------------------------
FONT_NAMES = "dejavusansmono,couriernew,consolas,monospace"
TEXT_SHADOW_OFFSET = (2, 2)
