"""
Window, physics and drawing defaults.

The module-level constants are the knobs; ``Settings`` bundles them up
for one run so nothing else has to read globals.
"""

from dataclasses import dataclass, field, replace

# =========================
# CONFIG
# =========================

WIDTH, HEIGHT = 900, 600
FPS = 60
CAPTION = "Bezier Rope"

# Distance of the fixed endpoints from the left/right window edge
ENDPOINT_MARGIN = 100

# Drag mode: how close the mouse must be to grab P1 / P2
GRAB_RADIUS = 15

CURVE_SAMPLES = 101     # t = 0, 0.01, ... 1
TANGENT_SAMPLES = 11    # t = 0, 0.1, ... 1

INPUT_MODES = ("mirror", "drag")


# =========================
# PHYSICS
# =========================

@dataclass(frozen=True)
class SpringParams:
    stiffness: float = 0.02
    damping: float = 0.85

    def is_stable(self):
        return 0.0 < self.damping < 1.0 and self.stiffness > 0.0


# =========================
# STYLE
# =========================

@dataclass(frozen=True)
class RenderStyle:
    background: tuple = (15, 15, 25)

    curve_color: tuple = (0, 255, 170)
    curve_width: int = 3

    tangent_color: tuple = (250, 246, 247)
    tangent_width: int = 1
    tangent_length: float = 160.0

    point_radius: int = 6
    endpoint_color: tuple = (255, 255, 255)
    interior_color: tuple = (255, 170, 0)
    outline_color: tuple = None

    curve_samples: int = CURVE_SAMPLES
    tangent_samples: int = TANGENT_SAMPLES


# Plain script look: thin green rope over a dark room, long tangent whiskers
CLASSIC = {
    "spring": SpringParams(stiffness=0.02, damping=0.85),
    "style": RenderStyle(),
    "input_mode": "mirror",
}

# Card look: thick brown rope on white, short blue tangents, outlined points
COMPONENT = {
    "spring": SpringParams(stiffness=0.1, damping=0.8),
    "style": RenderStyle(
        background=(255, 255, 255),
        curve_color=(139, 69, 19),
        curve_width=6,
        tangent_color=(0, 0, 255),
        tangent_width=2,
        tangent_length=20.0,
        point_radius=10,
        endpoint_color=(136, 136, 136),
        interior_color=(255, 255, 255),
        outline_color=(0, 0, 0),
    ),
    "input_mode": "drag",
}

PRESETS = {
    "classic": CLASSIC,
    "component": COMPONENT,
}


# =========================
# SETTINGS
# =========================

@dataclass
class Settings:
    width: int = WIDTH
    height: int = HEIGHT
    fps: int = FPS
    preset: str = "classic"
    spring: SpringParams = field(default_factory=SpringParams)
    style: RenderStyle = field(default_factory=RenderStyle)
    input_mode: str = "mirror"
    reflow_on_resize: bool = False
    margin: float = ENDPOINT_MARGIN
    grab_radius: float = GRAB_RADIUS

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"window size must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.input_mode not in INPUT_MODES:
            raise ValueError(f"unknown input mode {self.input_mode!r}")

    @classmethod
    def from_preset(cls, name="classic", stiffness=None, damping=None, **overrides):
        """Build settings from a named preset, then apply overrides.

        ``stiffness`` / ``damping`` replace just that half of the preset's
        spring constants. ``None`` values in ``overrides`` are ignored so
        argparse defaults can be passed straight through.
        """
        if name not in PRESETS:
            raise ValueError(f"unknown preset {name!r}, expected one of {sorted(PRESETS)}")

        preset = PRESETS[name]

        spring = preset["spring"]
        if stiffness is not None:
            spring = replace(spring, stiffness=stiffness)
        if damping is not None:
            spring = replace(spring, damping=damping)

        values = {
            "preset": name,
            "spring": spring,
            "style": preset["style"],
            "input_mode": preset["input_mode"],
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        return cls(**values)
