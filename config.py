"""
Simulation tuning knobs.
"""

# Window / host
SCREEN_W, SCREEN_H = 1280, 720
FPS = 60

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

# Population controls
START_FISH = 15
START_CRABS = 3
START_BUBBLES = 30
GOD_RAY_SPACING = 200.0  # one light shaft per this many pixels of width
GOD_RAY_COUNT_RANGE = (3, 20)

# Seafloor profile
FLOOR_BASE = 0.9  # fraction of basin height
FLOOR_SAMPLE_STEP = 10.0

# Castle anchor
CASTLE_BASE = 0.95  # fraction of basin height
CASTLE_CENTER = 0.5  # fraction of basin width

# Fish steering
EDGE_MARGIN = 60.0
EAT_PADDING = 3.0
WANDER_JITTER = 0.3
WANDER_CIRCLE_DIST = 50.0
WANDER_CIRCLE_RADIUS = 25.0
WANDER_FORCE_SCALE = 0.2
HUNGRY_SPEED_BONUS = 0.5

# Food
FOOD_SINK_ACCEL = 0.007
FOOD_DRAG = 0.99
FOOD_RADIUS = 3.0
