"""Spring-driven cubic Bezier rope for pygame."""

from bezierrope.bezier import bezier_point, bezier_tangent, sample_curve, sample_parameters
from bezierrope.config import RenderStyle, Settings, SpringParams
from bezierrope.driver import DriverState, FrameClock, FrameDriver
from bezierrope.pointer import PointerController
from bezierrope.render import Renderer
from bezierrope.spring import MovablePoint, update_spring
from bezierrope.state import SimulationState

__all__ = [
    "bezier_point",
    "bezier_tangent",
    "sample_curve",
    "sample_parameters",
    "RenderStyle",
    "Settings",
    "SpringParams",
    "DriverState",
    "FrameClock",
    "FrameDriver",
    "PointerController",
    "Renderer",
    "MovablePoint",
    "update_spring",
    "SimulationState",
]
