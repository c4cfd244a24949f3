# bezierlab global settings

# Lookup table resolution: number of parameter intervals, so a LUT holds
# LUT_STEPS + 1 points. Cost is linear in steps, quadratic in curve degree.
LUT_STEPS = 100

# Pick radius for control point queries (canvas units)
NEAR_DISTANCE = 5.0

# Closest-point projection
PROJECT_REFINE_STEPS = 10
PROJECT_MAX_ITER = 20

# Comparison tolerance for point equality
EPSILON = 1e-9

# Rendering defaults
CURVE_COLOR = "#333"
SKELETON_COLOR = "#555"
STRUT_COLOR = "black"
BBOX_COLOR = "black"
LABEL_COLOR = "black"
POINT_COLORS = ("red", "green", "blue", "yellow")
POINT_RADIUS = 5
POINT_OUTLINE = "#999"

# Default figures, in canvas coordinates
DEFAULT_QUADRATIC = ((70.0, 250.0), (20.0, 110.0), (220.0, 60.0))
DEFAULT_CUBIC = ((110.0, 150.0), (25.0, 190.0), (210.0, 250.0), (210.0, 30.0))

# Canvas size used by the command line renderer
CANVAS_WIDTH = 550
CANVAS_HEIGHT = 275
