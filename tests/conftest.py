"""
Pytest configuration and shared fixtures for ssmlsan tests.
"""

import tempfile
from pathlib import Path

import pytest

from ssmlsan.registry import PatternRegistry, PatternRule


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that's cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def break_registry():
    """Registry preserving only <break/> tags."""
    return PatternRegistry([PatternRule("break", r"<break[^>]*/>")])


@pytest.fixture
def ssml_registry():
    """Registry preserving a typical set of SSML tags."""
    return PatternRegistry(
        [
            PatternRule("break", r"<break[^>]*/>"),
            PatternRule("prosody", r"</?prosody[^>]*>"),
            PatternRule("emphasis", r"</?emphasis[^>]*>"),
        ]
    )


@pytest.fixture
def sample_config(temp_dir):
    """Create a sample config YAML for testing."""
    content = """
server:
  port: 9090
  base_path: /api

tts:
  region: westeurope
  default_voice: en-US-JennyNeural
  voice_mapping:
    alloy: en-US-JennyNeural

ssml:
  preserve_tags:
    - name: break
      pattern: '<break[^>]*/>'
    - name: prosody
      pattern: '</?prosody[^>]*>'
"""
    filepath = temp_dir / "config.yaml"
    filepath.write_text(content)
    return filepath


@pytest.fixture
def bad_pattern_config(temp_dir):
    """Create a config whose preserve tag pattern does not compile."""
    content = """
ssml:
  preserve_tags:
    - name: broken
      pattern: '('
"""
    filepath = temp_dir / "bad_pattern.yaml"
    filepath.write_text(content)
    return filepath
