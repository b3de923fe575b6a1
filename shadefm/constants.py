"""Constants and configuration for ShadeFM."""

APP_NAME = "ShadeFM"

# Box drawing characters (Unicode).
SB_TL = "┌"
SB_TR = "┐"
SB_BL = "└"
SB_BR = "┘"
SB_H = "─"
SB_V = "│"

# ASCII fallbacks for terminals without Unicode support.
ASCII_TL = "+"
ASCII_TR = "+"
ASCII_BL = "+"
ASCII_BR = "+"
ASCII_H = "-"
ASCII_V = "|"

# Control key codes as delivered by get_wch()/getch().
KEY_ESC = 27
KEY_CTRL_E = 5
KEY_CTRL_S = 19

# Color pair IDs.
C_SESSION = 1
C_BORDER = 2
C_BODY = 3
C_FM_FILE = 4
C_FM_DIR = 5
C_FM_ACTION = 6
C_FM_SELECTED = 7
C_VIEW_TEXT = 8
C_VIEW_DECRYPTED = 9
C_VIEW_BINARY = 10
C_EDITOR = 11
C_HELP = 12
C_ERROR = 13

# Layout constants
SESSION_BAR_HEIGHT = 1       # Row 0 shows the session bar
STATUS_HEIGHT = 4            # Bottom box with help or error text
MANAGER_WIDTH_PERCENT = 25   # Manager list share of the body width
ESC_DELAY_MS = 25            # How long curses waits to tell Esc from a key sequence

HELP_MANAGER = (
    "Esc: Quit, end the session",
    "Down: Select next item",
    "Up: Select previous item",
    "Enter: Action on the selected item",
    "E: Open the editor",
    "N: Create a new editor instance",
    "D: Delete the selected item",
)

HELP_VIEWER = (
    "Esc: Quit",
    "Down, Up: Scroll the viewer",
)

HELP_EDITOR = (
    "Esc: Quit",
    "Ctrl + S: Save the text file",
    "Ctrl + E: Encrypt, and save the encrypted file",
    "Ctrl + K: Cut to end of line",
    "Ctrl + Y: Paste",
)
