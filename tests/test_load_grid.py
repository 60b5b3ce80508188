from pathlib import Path

import numpy as np
import pytest

from occupancy_grids import (
    INCLUDED_GRIDS,
    ConfigError,
    FormatError,
    GridInfo,
    IncludedGrid,
    load_grid,
    load_grid_info,
    save_pgm,
)
from occupancy_grids.loading.info import load_grid_data

GRID_INFO = """\
file_type: {file_type}
grid_file: grid.pgm
resolution: 0.1
origin: [1.0, 2.0, 0.0]
negate: {negate}
occupied_threshold: 0.65
free_threshold: 0.35
"""


def make_map_dir(tmp_path: Path, raster: np.ndarray, *, file_type: str = "pgm", negate: bool = False) -> Path:
    directory = tmp_path / "map"
    save_pgm(directory / "grid.pgm", raster)
    text = GRID_INFO.format(file_type=file_type, negate=str(negate).lower())
    (directory / "grid_info.yaml").write_text(text)
    return directory


def test_load_from_directory(tmp_path) -> None:
    raster = np.ones((4, 6))
    raster[1, 2] = 0.0
    grid = load_grid(make_map_dir(tmp_path, raster))
    assert grid.shape == (4, 6)
    assert grid.physical_size() == pytest.approx((0.6, 0.4))
    assert grid.is_occupied(0.25, 0.15)
    assert not grid.is_occupied(0.05, 0.15)


def test_grid_info_fields(tmp_path) -> None:
    info = load_grid_info(make_map_dir(tmp_path, np.ones((2, 2))))
    assert info == GridInfo(
        file_type="pgm",
        grid_file="grid.pgm",
        resolution=0.1,
        origin=(1.0, 2.0, 0.0),
        negate=False,
        occupied_threshold=0.65,
        free_threshold=0.35,
    )


def test_grid_info_defaults(tmp_path) -> None:
    (tmp_path / "grid_info.yaml").write_text("file_type: pgm\n")
    info = load_grid_info(tmp_path)
    assert info == GridInfo()
    assert info.resolution == 0.1
    assert info.grid_file == "grid.pgm"
    assert info.origin == (0.0, 0.0, 0.0)
    assert (info.occupied_threshold, info.free_threshold) == (0.65, 0.35)


def test_unsupported_file_type_raises_config_error(tmp_path) -> None:
    directory = make_map_dir(tmp_path, np.ones((2, 2)), file_type="png")
    with pytest.raises(ConfigError):
        load_grid(directory)
    with pytest.raises(ConfigError):
        load_grid_data(directory, load_grid_info(directory))


def test_malformed_raster_raises_format_error(tmp_path) -> None:
    directory = make_map_dir(tmp_path, np.ones((2, 2)))
    (directory / "grid.pgm").write_bytes(b"P2\n2 2\n255\n0 0 0 0\n")
    with pytest.raises(FormatError):
        load_grid(directory)


@pytest.mark.parametrize(
    "text",
    [
        "resolution: 0.0\n",
        "resolution: -1\n",
        "free_threshold: 0.9\n",
        "occupied_threshold: 1.5\n",
        "origin: [0.0, 0.0]\n",
        "resolution: fine\n",
        "- not\n- a mapping\n",
    ],
)
def test_invalid_grid_info_raises_config_error(tmp_path, text: str) -> None:
    (tmp_path / "grid_info.yaml").write_text(text)
    with pytest.raises(ConfigError):
        load_grid_info(tmp_path)


def test_missing_directory_or_info(tmp_path) -> None:
    with pytest.raises(ConfigError):
        load_grid(tmp_path / "does_not_exist")
    with pytest.raises(ConfigError):
        load_grid_info(tmp_path)


def test_info_and_data_source() -> None:
    raster = np.ones((3, 3))
    raster[0, 0] = 0.0
    grid = load_grid(GridInfo(resolution=0.5), raster, compute_sdf=True)
    assert grid.is_occupied(0.25, 0.25)
    assert grid.sdf(1.25, 1.25) == pytest.approx(2.0)
    with pytest.raises(ConfigError):
        load_grid(GridInfo())


def test_data_rejected_for_directory_sources(tmp_path) -> None:
    directory = make_map_dir(tmp_path, np.ones((2, 2)))
    with pytest.raises(ConfigError):
        load_grid(directory, np.ones((2, 2)))


def test_negate_flag_and_info_skip_inversion(tmp_path) -> None:
    # Raster already stores occupancy: bright = occupied
    raster = np.zeros((3, 3))
    raster[1, 1] = 1.0
    grid = load_grid(GridInfo(), raster, negate=True)
    assert grid.is_occupied(0.15, 0.15)
    assert not grid.is_occupied(0.05, 0.05)

    directory = make_map_dir(tmp_path, raster, negate=True)
    grid = load_grid(directory)
    assert grid.is_occupied(0.15, 0.15)
    assert not grid.is_occupied(0.05, 0.05)


def test_inflation_from_loader(tmp_path) -> None:
    raster = np.ones((9, 9))
    raster[4, 4] = 0.0
    directory = make_map_dir(tmp_path, raster)
    plain = load_grid(directory)
    inflated = load_grid(directory, inflation=0.3)
    assert not plain.is_occupied(0.35, 0.45)
    assert inflated.is_occupied(0.35, 0.45)
    assert inflated.is_occupied(0.55, 0.55)
    assert not inflated.is_occupied(0.25, 0.45)


def test_bundled_simple_room() -> None:
    grid = load_grid(IncludedGrid.SIMPLE_ROOM)
    assert grid.shape == (20, 20)
    assert grid.physical_size() == pytest.approx((2.0, 2.0))
    assert grid.is_occupied(0.05, 0.05)  # wall corner
    assert grid.is_occupied(1.0, 1.95)  # top wall
    assert not grid.is_occupied(0.5, 0.5)
    assert grid.is_occupied(1.35, 0.95)  # box
    assert not grid.is_occupied(1.05, 0.95)


def test_bundled_grid_by_name() -> None:
    by_enum = load_grid(IncludedGrid.CORRIDOR)
    by_value = load_grid("corridor")
    by_name = load_grid("CORRIDOR")
    assert by_enum.shape == by_value.shape == by_name.shape == (12, 40)
    assert np.array_equal(by_enum.data, by_value.data)
    assert by_enum.physical_size() == pytest.approx((4.0, 1.2))


def test_bundled_grid_with_sdf_and_inflation() -> None:
    grid = load_grid(IncludedGrid.SIMPLE_ROOM, inflation=0.2, compute_sdf=True)
    assert grid.sdf(0.05, 0.05) == 0.0
    # Room centre is several cells from any (inflated) wall
    assert grid.sdf(0.55, 0.55) > 0.2


def test_registry_is_read_only_and_complete() -> None:
    assert set(INCLUDED_GRIDS) == set(IncludedGrid)
    for path in INCLUDED_GRIDS.values():
        assert (path / "grid_info.yaml").is_file()
    with pytest.raises(TypeError):
        INCLUDED_GRIDS[IncludedGrid.CORRIDOR] = Path(".")  # type: ignore[index]


def test_custom_registry(tmp_path) -> None:
    raster = np.ones((5, 7))
    directory = make_map_dir(tmp_path, raster)
    grid = load_grid(IncludedGrid.SIMPLE_ROOM, registry={IncludedGrid.SIMPLE_ROOM: directory})
    assert grid.shape == (5, 7)
    with pytest.raises(ConfigError):
        load_grid(IncludedGrid.CORRIDOR, registry={IncludedGrid.SIMPLE_ROOM: directory})
