"""Configuration and constants for the sign chooser."""

from dataclasses import dataclass
from typing import Optional

# Selection
DISTANCE_EPSILON = 1e-6  # a candidate must beat the best distance by more than this

# Auto sign color (golden ratio split)
GOLDEN_LOW = 0.3820
GOLDEN_HIGH = 0.6180

# Placement
CORNERS = ['top-left', 'top-right', 'bottom-left', 'bottom-right', 'center']
DEFAULT_CORNER = 'bottom-right'
DEFAULT_MARGIN = 0.02  # fraction of the photo's shorter edge
DEFAULT_SCALE_RATE = 1.0

# Output
OUTPUT_PREFIX = "SIGN_"
OUTPUT_QUALITY = 100  # JPEG "superb"
PNG_COMPRESSION = 3


@dataclass
class SignConfig:
    """Placement options plus the compositing flags for one sign_photo call."""
    corner: str = DEFAULT_CORNER
    margin: float = DEFAULT_MARGIN
    scale_rate: float = DEFAULT_SCALE_RATE
    scale_to_width: Optional[float] = None  # fraction of photo width, overrides scale_rate
    auto_sign_color: bool = False
    auto_sign_scale: bool = False
    
    def __post_init__(self):
        if self.corner not in CORNERS:
            raise ValueError(f"Unknown corner '{self.corner}'. Valid: {', '.join(CORNERS)}")
        if self.margin < 0:
            raise ValueError(f"Margin must be non-negative, got {self.margin}")
        if self.scale_to_width is not None and self.scale_to_width <= 0:
            raise ValueError(f"scale_to_width must be positive, got {self.scale_to_width}")
