import logging
from unittest import mock

import geopandas as gpd
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest
from shapely.geometry import box

import fars.maps
from fars.exceptions import InvalidStateError
from fars.maps import check_state, coordinate_range, draw_base_map, main, plot_state, state_points


def sample_accidents() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "STATE": [20, 20, 20, 6],
            "MONTH": [1, 2, 3, 4],
            "LATITUDE": [38.0, 39.0, 99.9999, 34.0],
            "LONGITUD": [-98.5, 999.9999, -95.0, -118.0],
        }
    )


@pytest.fixture
def kansas_2015(write_accidents, tmp_path):
    write_accidents(2015, sample_accidents())
    return tmp_path


def test_state_points_marks_sentinels_missing():
    data = sample_accidents()
    points = state_points(data, 20)

    assert list(points.columns) == ["LONGITUD", "LATITUDE"]
    assert len(points) == 3
    assert np.isnan(points["LONGITUD"].iloc[1])
    assert np.isnan(points["LATITUDE"].iloc[2])
    # the loaded table keeps its original values
    assert data["LONGITUD"].iloc[1] == 999.9999


def test_state_points_keeps_valid_extremes():
    data = pd.DataFrame(
        {"STATE": [1, 1], "MONTH": [1, 1], "LATITUDE": [10.0, 20.0], "LONGITUD": [901.0, 179.9]}
    )
    points = state_points(data, 1)
    assert np.isnan(points["LONGITUD"].iloc[0])
    assert points["LONGITUD"].iloc[1] == 179.9
    assert coordinate_range(points["LONGITUD"]) == (179.9, 179.9)


def test_coordinate_range_all_missing():
    assert coordinate_range(pd.Series([np.nan, np.nan])) is None


def test_plot_state_invalid_state(kansas_2015):
    with pytest.raises(InvalidStateError, match="99"):
        plot_state(99, 2015, kansas_2015)


def test_check_state_accepts_numeric_strings():
    data = pd.DataFrame({"STATE": [20, 6]})
    assert check_state(data, "20") == 20
    assert check_state(data, "20.0") == 20
    assert check_state(data, 6.0) == 6


def test_plot_state_non_numeric_state(kansas_2015):
    with pytest.raises(InvalidStateError, match="KS"):
        plot_state("KS", 2015, kansas_2015)


def test_plot_state_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="accident_2015.csv.bz2"):
        plot_state(20, 2015, tmp_path)


def test_plot_state_calls_collaborators(kansas_2015):
    base_map = mock.Mock(return_value="axes")
    draw_points = mock.Mock()

    result = plot_state("20", 2015, kansas_2015, base_map=base_map, draw_points=draw_points)

    assert result is None
    base_map.assert_called_once_with(None, (-98.5, -95.0), (38.0, 39.0), None)
    (ax, longitudes, latitudes), _ = draw_points.call_args
    assert ax == "axes"
    assert len(longitudes) == 3
    assert np.isnan(longitudes[1])
    assert np.isnan(latitudes[2])


def test_plot_state_no_rows_is_informational(kansas_2015, monkeypatch, caplog):
    monkeypatch.setattr(fars.maps, "check_state", lambda data, state: 30)
    base_map = mock.Mock()
    draw_points = mock.Mock()

    with caplog.at_level(logging.INFO, logger="fars.maps"):
        plot_state(30, 2015, kansas_2015, base_map=base_map, draw_points=draw_points)

    base_map.assert_not_called()
    draw_points.assert_not_called()
    assert "no accidents to plot" in caplog.text
    assert all(r.levelno == logging.INFO for r in caplog.records)


def test_plot_state_renders(kansas_2015):
    fig, ax = plt.subplots()
    try:
        plot_state(20, 2015, kansas_2015, ax=ax)
        assert ax.has_data()
        assert ax.get_xlim() == (-98.5, -95.0)
        assert ax.get_ylim() == (38.0, 39.0)
        assert len(ax.lines[0].get_xdata()) == 3
    finally:
        plt.close(fig)


def test_draw_base_map_with_boundaries():
    boundaries = gpd.GeoDataFrame(geometry=[box(-102.0, 37.0, -94.6, 40.0)], crs=4326)
    ax = draw_base_map(None, (-100.0, -95.0), (37.5, 39.5), boundaries)
    try:
        assert ax.has_data()
        assert ax.get_xlim() == (-100.0, -95.0)
        assert ax.get_xlabel() == "Longitude"
    finally:
        plt.close(ax.figure)


def test_main_saves_png(kansas_2015, tmp_path):
    out = tmp_path / "kansas.png"
    main(["20", "2015", "--data-dir", str(kansas_2015), "--output", str(out)])
    assert out.exists()


def test_main_exits_on_missing_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["20", "1900", "--data-dir", str(tmp_path), "--output", str(tmp_path / "x.png")])
    assert excinfo.value.code == 1
    assert not (tmp_path / "x.png").exists()
