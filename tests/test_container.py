"""
Tests for the DependencyContainer.
"""

from unittest.mock import MagicMock

import pytest

from file_agent.adapters.console.rich_console_adapter import RichConsoleAdapter
from file_agent.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_agent.config.settings import Settings
from file_agent.container import DependencyContainer
from file_agent.exceptions import ConfigurationError
from file_agent.use_cases.agent_loop import AgentLoop


def _settings(root, seed=None) -> Settings:
    settings = MagicMock(spec=Settings)
    settings.root_dir = str(root)
    settings.random_seed = seed
    settings.log_level = 30
    return settings


class TestDependencyContainer:
    """Test cases for the DependencyContainer."""

    def test_wires_agent_loop(self, tmp_path, console):
        """Test that the container builds a complete agent loop."""
        container = DependencyContainer(_settings(tmp_path / "testDir"), console)

        loop = container.get_agent_loop()

        assert isinstance(loop, AgentLoop)
        assert (tmp_path / "testDir").is_dir()
        assert container.get_session().root == (tmp_path / "testDir").resolve()
        assert container.get_agent_loop() is loop

    def test_default_adapters(self, tmp_path):
        """Test the default console and file system adapters."""
        container = DependencyContainer(_settings(tmp_path))

        assert isinstance(container.get_console(), RichConsoleAdapter)
        assert isinstance(container.get_file_system(), LocalFileSystemAdapter)

    def test_seeded_random_is_reproducible(self, tmp_path):
        """Test that a seed makes the random source reproducible."""
        first = DependencyContainer(_settings(tmp_path, seed=3)).get_random()
        second = DependencyContainer(_settings(tmp_path, seed=3)).get_random()

        assert [first.random() for _ in range(3)] == [second.random() for _ in range(3)]

    def test_random_source_is_shared(self, tmp_path, console):
        """Test that the loop and the executor share one random source."""
        container = DependencyContainer(_settings(tmp_path), console)

        assert container.get_random() is container.get_random()

    def test_unusable_root(self, tmp_path, console):
        """Test that an unusable root raises a configuration error."""
        container = DependencyContainer(_settings(tmp_path / "missing" / "root"), console)

        with pytest.raises(ConfigurationError):
            container.get_agent_loop()

    def test_reset(self, tmp_path, console):
        """Test that reset drops cached instances."""
        container = DependencyContainer(_settings(tmp_path), console)
        session = container.get_session()

        container.reset()

        assert "session" not in container._instances
        assert session.root == tmp_path.resolve()
