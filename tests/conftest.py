"""Pytest configuration and shared fixtures for the linemark test suite."""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep CLI tests away from the developer's config files and env vars."""
    for key in list(os.environ):
        if key.startswith("LINEMARK_"):
            monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler and level changes made by configure_logging during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    watchdog_level = logging.getLogger("watchdog").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("watchdog").setLevel(watchdog_level)


@pytest.fixture
def sample_markup() -> str:
    """Provide a document exercising every line category.

    Returns
    -------
    str
        Markup with headings, a rule, paragraphs and an empty line.

    """
    return "# Title\nIntro text\n## Section\n### Detail\n---\n\n##NoSpace\n#"


@pytest.fixture
def sample_html() -> str:
    """Expected rendering of :func:`sample_markup`."""
    return (
        "<h1>Title</h1>"
        "<p>Intro text</p>"
        "<h2>Section</h2>"
        "<h3>Detail</h3>"
        "<hr></hr>"
        "<p></p>"
        "<p>##NoSpace</p>"
        "<p>#</p>"
    )
