"""
aquarium_sim module: render/colors.py

Central color palette.
"""

WATER_TOP = (0, 92, 151)
WATER_BOTTOM = (6, 34, 59)
SAND = (194, 178, 128)

RAY = (210, 230, 255)

BUBBLE_FILL = (220, 235, 255, 153)
BUBBLE_RIM = (255, 255, 255, 204)

CRAB = (209, 65, 36)
FOOD = (240, 230, 140)

EYE_WHITE = (255, 255, 255)
EYE_PUPIL = (0, 0, 0)

STONE_OUTLINE = (33, 37, 41)


def hex_to_rgb(token: str) -> tuple[int, int, int]:
    token = token.lstrip("#")
    return (int(token[0:2], 16), int(token[2:4], 16), int(token[4:6], 16))
