"""Tests for ringbuf.config — JSON loading and defaults."""

from __future__ import annotations

import json

import pytest

from ringbuf.config import RingbufConfig, TailConfig, load_config
from ringbuf.constants import DEFAULT_CAPACITY


class TestTailConfig:
    def test_defaults(self) -> None:
        tail = TailConfig()
        assert tail.capacity == DEFAULT_CAPACITY
        assert tail.reverse is False
        assert tail.drain is False

    def test_rejects_zero_capacity(self) -> None:
        with pytest.raises(ValueError):
            TailConfig(capacity=0)

    def test_frozen(self) -> None:
        tail = TailConfig()
        with pytest.raises(AttributeError):
            tail.capacity = 3


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, config_dir) -> None:
        assert load_config() == RingbufConfig()

    def test_reads_default_location(self, config_dir) -> None:
        (config_dir / "config.json").write_text(
            json.dumps({"tail": {"capacity": 4, "reverse": True}})
        )
        config = load_config()
        assert config.tail.capacity == 4
        assert config.tail.reverse is True
        assert config.tail.drain is False

    def test_explicit_path(self, tmp_path) -> None:
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"tail": {"drain": True}}))
        config = load_config(str(path))
        assert config.tail.drain is True
        assert config.tail.capacity == DEFAULT_CAPACITY

    def test_non_object_gives_defaults(self, config_dir) -> None:
        (config_dir / "config.json").write_text("[1, 2, 3]")
        assert load_config() == RingbufConfig()

    def test_invalid_capacity_raises(self, config_dir) -> None:
        (config_dir / "config.json").write_text(json.dumps({"tail": {"capacity": 0}}))
        with pytest.raises(ValueError):
            load_config()

    @pytest.mark.parametrize("tail", [None, [1], "lines", 3])
    def test_non_object_tail_gives_defaults(self, config_dir, tail) -> None:
        (config_dir / "config.json").write_text(json.dumps({"tail": tail}))
        assert load_config() == RingbufConfig()

    @pytest.mark.parametrize("capacity", [None, "ten", 2.5, True])
    def test_non_integer_capacity_raises(self, config_dir, capacity) -> None:
        (config_dir / "config.json").write_text(
            json.dumps({"tail": {"capacity": capacity}})
        )
        with pytest.raises(ValueError):
            load_config()

    @pytest.mark.parametrize("flag", ["reverse", "drain"])
    def test_string_flag_raises(self, config_dir, flag) -> None:
        (config_dir / "config.json").write_text(json.dumps({"tail": {flag: "false"}}))
        with pytest.raises(ValueError):
            load_config()
