"""
Test fixtures shared across all AccessWAI tests.
"""

import asyncio

import pytest

from accesswai.models.scan_models import SourceFile


@pytest.fixture
def accessible_html():
    """Markup that triggers none of the catalog rules."""
    return """<!DOCTYPE html>
<html lang="en">
<head><title>Home</title></head>
<body>
  <h1>Welcome</h1>
  <img src="logo.png" alt="Company logo">
  <label for="email">Email</label>
  <input id="email" type="email">
  <button type="submit">Send</button>
  <a href="/guide">Read the accessibility guide</a>
</body>
</html>
"""


@pytest.fixture
def inaccessible_html():
    """Markup with one issue of most types, one per line."""
    return """<html>
<body>
  <h3>Latest news</h3>
  <img src="hero.png">
  <button></button>
  <input type="text" name="q">
  <p style="color: #777">Muted text</p>
  <div onclick="openMenu()">Menu</div>
  <a href="/news">click here</a>
</body>
</html>
"""


@pytest.fixture
def make_file():
    def _make(content, name="index.html"):
        return SourceFile(name=name, content=content)

    return _make


@pytest.fixture
def echo_generator():
    """Text generator stub that always answers."""
    calls = []

    async def _generate(prompt: str) -> str:
        calls.append(prompt)
        return "AI narrative"

    _generate.calls = calls
    return _generate


@pytest.fixture
def failing_generator():
    async def _generate(prompt: str) -> str:
        raise ConnectionError("service unreachable")

    return _generate


@pytest.fixture
def slow_generator():
    async def _generate(prompt: str) -> str:
        await asyncio.sleep(5)
        return "too late"

    return _generate
