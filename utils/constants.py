"""Shared constants: compression sweep, edge kernel, colors."""

# Target compression levels for the sweep (leaf count / pixel count)
COMPRESSION_LEVELS = (0.002, 0.004, 0.01, 0.033, 0.077, 0.2, 0.5, 0.75)

DETAIL_THRESHOLD = 5.0
FINE_REGION_MAX_HEIGHT = 20
EDGE_MAGNITUDE_THRESHOLD = 300

# Laplacian: 8 x center minus the 8 neighbors
EDGE_DETECT_KERNEL = (-1, -1, -1,
                      -1,  8, -1,
                      -1, -1, -1)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)

PPM_EXTENSION = '.ppm'
