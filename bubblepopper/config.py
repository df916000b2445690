"""Canvas and window dimensions used throughout the game."""

CANVAS_WIDTH = 1000
CANVAS_HEIGHT = 500

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 600