"""Game constants."""

GRID_SIZE = 20
INITIAL_LENGTH = 3
START_INSET = 2
FOOD_SCORE = 10
LEVEL_THRESHOLD = 5
SPEED_STEP = 5
MIN_TICK_INTERVAL = 60
FRAME_RATE = 60

DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
OPPOSITES = {"up": "down", "down": "up", "left": "right", "right": "left"}

# ms per tick at the start of a run
SPEED_PROFILES = {
    "slow": 180,
    "normal": 150,
    "fast": 110,
}
SPEED_LABELS = {"slow": "Easy", "normal": "Normal", "fast": "Hard"}

FOODS = {
    "apple": ("🍎",),
    "orange": ("🍊",),
    "banana": ("🍌",),
    "strawberry": ("🍓",),
    "grapes": ("🍇",),
}
FOODS["mixed"] = tuple(emoji for kinds in FOODS.values() for emoji in kinds)
