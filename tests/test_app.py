"""Tests for the command line entry point."""
import logging

import pygame
import pytest

from bezierrope import app
from bezierrope.driver import FrameDriver
from bezierrope.logging_config import setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger("bezierrope")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_parse_defaults():
    args = app.build_parser().parse_args([])
    settings = app.settings_from_args(args)
    assert settings.preset == "classic"
    assert settings.width == 900
    assert not settings.reflow_on_resize


def test_parse_flags():
    args = app.build_parser().parse_args([
        "--preset", "component",
        "--width", "640",
        "--height", "480",
        "--damping", "0.9",
        "--input", "mirror",
        "--reflow-on-resize",
    ])
    settings = app.settings_from_args(args)
    assert (settings.width, settings.height) == (640, 480)
    assert settings.spring.stiffness == 0.1
    assert settings.spring.damping == 0.9
    assert settings.input_mode == "mirror"
    assert settings.reflow_on_resize


def test_bad_preset_rejected():
    with pytest.raises(SystemExit):
        app.build_parser().parse_args(["--preset", "nope"])


def test_build_driver():
    args = app.build_parser().parse_args(["--preset", "component", "--width", "400", "--height", "300"])
    settings = app.settings_from_args(args)
    screen = pygame.Surface((400, 300))

    driver = app.build_driver(settings, screen)

    assert isinstance(driver, FrameDriver)
    assert driver.surface is screen
    assert driver.pointer.mode == "drag"
    assert driver.state.params == settings.spring
    assert driver.renderer.style == settings.style
    assert driver.clock.fps == 60


def test_open_window_failure(monkeypatch):
    def broken(*args, **kwargs):
        raise pygame.error("no video device")

    monkeypatch.setattr(pygame.display, "set_mode", broken)
    with pytest.raises(app.StartupError):
        app.open_window(100, 100)


def test_main_reports_startup_failure(monkeypatch):
    def broken(*args, **kwargs):
        raise pygame.error("no video device")

    monkeypatch.setattr(pygame.display, "set_mode", broken)
    assert app.main(["--log-level", "ERROR"]) == 1


def test_main_runs_until_stopped(monkeypatch):
    ran = []

    def fake_run(self, max_frames=None):
        ran.append(self)
        return 0

    monkeypatch.setattr(FrameDriver, "run", fake_run)
    assert app.main(["--width", "320", "--height", "200", "--log-level", "ERROR"]) == 0
    assert len(ran) == 1
    assert ran[0].state.width == 320


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "rope.log"
    setup_logging(logging.INFO)
    logger = setup_logging(logging.DEBUG, str(log_file))

    assert len(logger.handlers) == 2
    logger.debug("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

