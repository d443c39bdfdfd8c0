"""Tests for library configuration."""

import subprocess
import sys

import pytest

from pyclosure import ClosureConfig, config_context, get_config, set_config


class TestClosureConfig:
    def test_defaults(self):
        config = ClosureConfig()

        assert config.on_unsupported == "warn"
        assert config.parallel_threshold == 500

    def test_invalid_policy(self):
        with pytest.raises(ValueError, match="on_unsupported"):
            ClosureConfig(on_unsupported="sometimes")

    @pytest.mark.parametrize("threshold", [0, -5, 2.5, True])
    def test_invalid_threshold(self, threshold):
        with pytest.raises(ValueError, match="parallel_threshold"):
            ClosureConfig(parallel_threshold=threshold)

    def test_fresh_import_uses_defaults(self):
        """The module-level default config is built when the package is imported."""
        code = (
            "import pyclosure; c = pyclosure.get_config(); "
            "print(c.on_unsupported, c.parallel_threshold)"
        )
        proc = subprocess.run(
            [sys.executable, "-c", code], capture_output=True, text=True, check=False
        )

        assert proc.returncode == 0, proc.stderr
        assert proc.stdout.split() == ["warn", "500"]

    def test_frozen(self):
        with pytest.raises(AttributeError):
            get_config().on_unsupported = "raise"


class TestSetConfig:
    def test_returns_previous(self):
        previous = set_config(on_unsupported="raise")

        assert previous.on_unsupported == "warn"
        assert get_config().on_unsupported == "raise"

    def test_unknown_field(self):
        with pytest.raises(ValueError, match="Unknown configuration field"):
            set_config(verbose=True)

    def test_invalid_value_keeps_old_config(self):
        before = get_config()
        with pytest.raises(ValueError):
            set_config(parallel_threshold=0)
        assert get_config() is before


class TestConfigContext:
    def test_restores_on_exit(self):
        with config_context(parallel_threshold=10) as config:
            assert config.parallel_threshold == 10
            assert get_config().parallel_threshold == 10
        assert get_config().parallel_threshold == 500

    def test_restores_on_error(self):
        with pytest.raises(RuntimeError):
            with config_context(on_unsupported="ignore"):
                raise RuntimeError("boom")
        assert get_config().on_unsupported == "warn"
