"""
Run the rope in a pygame window.

    python -m bezierrope --preset component
"""

import argparse
import logging
import sys

import pygame

from bezierrope.config import CAPTION, INPUT_MODES, PRESETS, Settings
from bezierrope.driver import FrameClock, FrameDriver
from bezierrope.logging_config import setup_logging
from bezierrope.pointer import PointerController
from bezierrope.render import Renderer
from bezierrope.state import SimulationState

logger = logging.getLogger(__name__)


class StartupError(RuntimeError):
    """The window (drawing surface) could not be created."""


# =========================
# SETUP
# =========================

def build_parser():
    ap = argparse.ArgumentParser(prog="bezier-rope", description="Spring-driven cubic Bezier rope")
    ap.add_argument("--width", type=int, default=None, help="Window width in pixels")
    ap.add_argument("--height", type=int, default=None, help="Window height in pixels")
    ap.add_argument("--fps", type=int, default=None, help="Frames per second")
    ap.add_argument("--preset", choices=sorted(PRESETS), default="classic", help="Physics + look preset")
    ap.add_argument("--stiffness", type=float, default=None, help="Spring constant K")
    ap.add_argument("--damping", type=float, default=None, help="Velocity damping D, 0 < D < 1")
    ap.add_argument("--input", dest="input_mode", choices=INPUT_MODES, default=None,
                    help="mirror: follow the mouse; drag: grab P1/P2")
    ap.add_argument("--reflow-on-resize", action="store_true", default=None,
                    help="Move the fixed endpoints when the window is resized")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--log-file", default=None, help="Also write the log to this file")
    return ap


def settings_from_args(args):
    return Settings.from_preset(
        args.preset,
        stiffness=args.stiffness,
        damping=args.damping,
        width=args.width,
        height=args.height,
        fps=args.fps,
        input_mode=args.input_mode,
        reflow_on_resize=args.reflow_on_resize,
    )


def open_window(width, height):
    try:
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    except pygame.error as exc:
        raise StartupError(f"cannot open a {width}x{height} window: {exc}") from exc

    pygame.display.set_caption(CAPTION)
    return screen


def build_driver(settings, screen):
    state = SimulationState.from_viewport(
        settings.width,
        settings.height,
        params=settings.spring,
        margin=settings.margin,
        reflow_on_resize=settings.reflow_on_resize,
    )
    pointer = PointerController(state, settings.input_mode, settings.grab_radius)

    return FrameDriver(
        state,
        Renderer(settings.style),
        screen,
        pointer,
        clock=FrameClock(settings.fps),
        on_resize=open_window,
    )


# =========================
# MAIN
# =========================

def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    settings = settings_from_args(args)
    logger.info(
        "Preset %s, %dx%d @ %d fps, K=%g D=%g, input=%s, reflow_on_resize=%s",
        settings.preset, settings.width, settings.height, settings.fps,
        settings.spring.stiffness, settings.spring.damping,
        settings.input_mode, settings.reflow_on_resize,
    )
    if not settings.spring.is_stable():
        logger.warning("Spring constants K=%g D=%g may not settle",
                       settings.spring.stiffness, settings.spring.damping)

    pygame.init()
    try:
        screen = open_window(settings.width, settings.height)
    except StartupError as exc:
        logger.error("%s", exc)
        pygame.quit()
        return 1

    driver = build_driver(settings, screen)
    driver.run()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
