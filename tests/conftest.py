"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Everything runs against in-memory fakes (SimulatedViewport, ManualFrameClock)
- Frames advance only when a test calls clock.advance()
- Config tests run from an empty tmp dir with TOPGAMES_* env vars cleared
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path so tests can import topgames package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from topgames.components.layout.viewport_comp import SimulatedViewport  # noqa: E402
from topgames.components.scheduling.frame_scheduler_comp import ManualFrameClock  # noqa: E402
from topgames.helpers.dto.section_dto import Section, SectionType  # noqa: E402
from topgames.helpers.logging_helper import clear_log_context  # noqa: E402


@pytest.fixture
def clock() -> ManualFrameClock:
    """Frame clock that only ticks on advance()."""
    return ManualFrameClock()


@pytest.fixture
def viewport() -> SimulatedViewport:
    """Viewport starting in the LARGE tier."""
    return SimulatedViewport(1024)


@pytest.fixture
def labelled_catalog() -> tuple[Section, ...]:
    """Reference-shaped catalog where every entry carries a distinct label."""
    return (
        Section(SectionType.RECENTLY_PLAYED, data={"label": "rp"}),
        Section(SectionType.GAMES, data={"label": "g1"}),
        Section(SectionType.GAMES, data={"label": "g2"}),
        Section(SectionType.GAMES, data={"label": "g3"}),
        Section(SectionType.GAMES, data={"label": "g4"}),
        Section(SectionType.GAMES, data={"label": "g5"}),
        Section(SectionType.BANNER, data={"label": "banner"}),
        Section(SectionType.JACKPOT, data={"label": "j1"}),
        Section(SectionType.JACKPOT, data={"label": "j2"}),
        Section(SectionType.APPS, data={"label": "apps"}),
    )


@pytest.fixture
def isolated_config_env(tmp_path, monkeypatch):
    """Run from an empty directory with no TOPGAMES_* environment overrides."""
    for key in list(os.environ):
        if key.startswith("TOPGAMES_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_log_context():
    yield
    clear_log_context()


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast isolated unit test")
