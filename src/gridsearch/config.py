"""
gridsearch — Global Configuration
"""

# --- Costs ---
DEFAULT_NODE_COST: float = 1.0      # Entry cost of an ordinary open cell
START_NODE_COST: float = 0.0        # Entry cost given to the start cell by layouts

# --- Layout Glyphs ---
WALL_GLYPH: str = "#"
START_GLYPH: str = "S"
FINISH_GLYPH: str = "F"
OPEN_GLYPH: str = "."

# --- Report Glyphs ---
PATH_GLYPH: str = "*"
VISITED_GLYPH: str = "o"

# --- Generator ---
GRID_ROWS: int = 20
GRID_COLS: int = 40
RANDOM_SEED: int = 753
NOISE_SCALE: float = 0.12           # Sample step through the noise field per cell
NOISE_OCTAVES: int = 4
WALL_DENSITY: float = 0.15          # Fraction of cells turned into walls by scatter_walls

# Terrain bands: upper elevation bound -> terrain label, checked in order.
ELEVATION_BANDS = (
    (-0.30, "water"),
    (0.05, "grass"),
    (0.20, "forest"),
    (0.35, "hill"),
    (1.01, "mountain"),
)

# Terrain type definitions with entry costs
TERRAIN_TYPES = {
    "road":     {"cost": 1.0, "wall": False},
    "grass":    {"cost": 2.0, "wall": False},
    "forest":   {"cost": 4.0, "wall": False},
    "hill":     {"cost": 6.0, "wall": False},
    "mountain": {"cost": 999, "wall": True},
    "water":    {"cost": 999, "wall": True},
}

# --- Logging ---
LOGGER_NAME: str = "gridsearch"
LOG_DIR: str = "logs"
LOG_LEVEL: str = "INFO"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(message)s"
