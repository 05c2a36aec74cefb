"""Application-wide constants for ZoomPanViewer.

This module contains the designer-tunable framing constants shared by the
transform math, the configuration layer and the viewer window.
"""

# Zoom scale limits
MIN_SCALE = 0.2
MAX_SCALE = 1.5

# Initial framing: multiplier applied on top of the contain-fit scale
START_ZOOM = 2.2

# Pixel nudges applied after centering
START_OFFSET_X = 0  # + moves image right, - moves left
START_OFFSET_Y = 270  # + moves image down, - moves up

# Multiplicative zoom steps
WHEEL_ZOOM_STEP = 1.12
BUTTON_ZOOM_STEP = 1.2
