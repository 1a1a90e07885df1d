"""Tests for the generation CLI."""

import sys

import pytest
import structlog

from voxelworld.generation import generator
from voxelworld.generation.cli import RANDOM_SEED_MAX, main, render_ascii
from voxelworld.generation.generator import generate


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


class TestRenderAscii:
    """Tests for render_ascii."""

    def test_dimensions(self, small_city_config) -> None:
        text = render_ascii(generate(small_city_config))
        lines = text.splitlines()
        assert len(lines) == 10
        assert all(len(line) == 10 for line in lines)

    def test_city_glyphs(self, small_city_config) -> None:
        lines = render_ascii(generate(small_city_config)).splitlines()
        # Row z=4 is printed fifth from the bottom; x=3..6 is road
        assert lines[10 - 1 - 4][3:7] == "####"

    def test_terrain_glyphs_only(self, terrain_config) -> None:
        text = render_ascii(generate(terrain_config))
        assert set(text) <= set("~.,^\n")


class TestMain:
    """Tests for the CLI entry point."""

    def test_ascii_output(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(
            sys,
            "argv",
            ["voxelworld-generate", "--width", "12", "--depth", "8", "--ascii"],
        )
        main()
        lines = [line for line in capsys.readouterr().out.splitlines() if line]
        grid = [line for line in lines if len(line) == 12 and " " not in line]
        assert len(grid) == 8

    def test_named_config(self, monkeypatch) -> None:
        monkeypatch.setattr(
            sys, "argv", ["voxelworld-generate", "--config", "village", "--seed", "3"]
        )
        main()

    def test_random_seed(self, monkeypatch) -> None:
        seeds = []

        def recording_generate(config):
            seeds.append(config.seed)
            return generate(config)

        monkeypatch.setattr(generator, "generate", recording_generate)
        monkeypatch.setattr(
            sys,
            "argv",
            ["voxelworld-generate", "--random-seed", "--width", "10", "--depth", "10"],
        )
        main()
        assert len(seeds) == 1
        assert isinstance(seeds[0], int)
        assert 0 <= seeds[0] < RANDOM_SEED_MAX

    def test_unknown_config_exits(self, monkeypatch) -> None:
        monkeypatch.setattr(
            sys, "argv", ["voxelworld-generate", "--config", "no_such_world"]
        )
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 2

    def test_missing_config_path_exits(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setattr(
            sys,
            "argv",
            ["voxelworld-generate", "--config", str(tmp_path / "gone.toml")],
        )
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 2

    def test_city_size_override(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(
            sys,
            "argv",
            [
                "voxelworld-generate",
                "--width",
                "10",
                "--depth",
                "10",
                "--city-size",
                "0",
                "--ascii",
            ],
        )
        main()
        out = capsys.readouterr().out
        grid = [line for line in out.splitlines() if len(line) == 10 and " " not in line]
        assert len(grid) == 10
        assert not any("#" in line for line in grid)
