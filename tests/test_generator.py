import random

import pytest

pytest.importorskip("noise")

from gridsearch.config import TERRAIN_TYPES
from gridsearch.core.logger import SearchLogger
from gridsearch.main import main
from gridsearch.search.dijkstra import find_path
from gridsearch.world.generator import GridGenerator


def test_generate_shape_and_terrain():
    grid = GridGenerator.generate(8, 12, seed=3)
    assert (grid.height, grid.width) == (8, 12)
    for node in grid.nodes():
        kind = TERRAIN_TYPES[node.terrain]
        assert node.cost == kind["cost"]
        assert node.is_wall == kind["wall"]


def test_generate_is_deterministic_per_seed():
    a = GridGenerator.generate(6, 6, seed=11)
    b = GridGenerator.generate(6, 6, seed=11)
    assert [n.terrain for n in a.nodes()] == [n.terrain for n in b.nodes()]


def test_terrain_bands():
    assert GridGenerator.terrain_for(-0.6) == "water"
    assert GridGenerator.terrain_for(0.0) == "grass"
    assert GridGenerator.terrain_for(0.1) == "forest"
    assert GridGenerator.terrain_for(0.3) == "hill"
    assert GridGenerator.terrain_for(0.9) == "mountain"


def test_scatter_walls_respects_keep():
    grid = GridGenerator.generate(5, 5, seed=1)
    placed = GridGenerator.scatter_walls(grid, density=1.0, rng=random.Random(0),
                                         keep=[(0, 0), (4, 4)])
    assert not grid.get_node(0, 0).is_wall
    assert not grid.get_node(4, 4).is_wall
    assert all(n.is_wall for n in grid.nodes() if n.coord not in {(0, 0), (4, 4)})
    assert placed <= 23


def test_scatter_walls_zero_density_places_nothing():
    grid = GridGenerator.generate(5, 5, seed=1)
    before = [n.is_wall for n in grid.nodes()]
    assert GridGenerator.scatter_walls(grid, density=0.0) == 0
    assert [n.is_wall for n in grid.nodes()] == before


def test_carved_road_is_searchable():
    grid = GridGenerator.generate(6, 10, seed=7)
    GridGenerator.carve_road(grid, (0, 0), (5, 9))
    start, finish = grid.get_node(0, 0), grid.get_node(5, 9)
    result = find_path(grid, start, finish)
    assert result.found
    # Road cells cost 1 each; the L-shaped road spans 14 entered cells
    assert result.cost <= 14


def test_main_runs_demo(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    code = main(["--rows", "6", "--cols", "12", "--seed", "5", "--walls", "0.1"])
    out = capsys.readouterr().out
    assert code in (0, 2)
    assert "S" in out and "F" in out
    assert (tmp_path / "logs").is_dir()


def test_main_leaves_no_echo_or_log_file_behind(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(["--rows", "5", "--cols", "8", "--seed", "2"])
    capsys.readouterr()
    assert SearchLogger().log_file is None

    grid = GridGenerator.generate(4, 4, seed=2)
    GridGenerator.carve_road(grid, (0, 0), (3, 3))
    find_path(grid, grid.get_node(0, 0), grid.get_node(3, 3))
    assert capsys.readouterr().out == ""
