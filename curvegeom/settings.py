# curvegeom global settings

# Directions must have unit length within this absolute tolerance
DIRECTION_TOLERANCE = 1e-12

# Gram-Schmidt residuals shorter than this fraction of the input vector are
# treated as zero (input linearly dependent on earlier directions)
ORTHONORMALIZE_TOLERANCE = 1e-10

# Arc-length tables never use fewer segments than this
MIN_ARC_LENGTH_SEGMENTS = 8

# Default maximum arc-length error, in model units (mm)
DEFAULT_ARC_LENGTH_ERROR = 1e-3
