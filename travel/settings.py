# Settings for the traveler

# Action points available at the start of every turn
MAX_AP = 3

# Hex radius revealed around the traveler after each move
VISION_RADIUS = 5

# Path previews only search tiles the player has already seen
PREVIEW_ONLY_EXPLORED = True
