import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402
from pewslib.plot import plot_mmi, sta2pos  # noqa: E402
from pewslib.pews import Station, stationDataDec  # noqa: E402


def test_sta2pos():
    lat, lon = sta2pos([Station(12699, 3755), Station(12000, 3000)])
    assert np.allclose(lat, [37.55, 30.0])
    assert np.allclose(lon, [126.99, 120.0])


def test_plot_mmi(make_data, jeju):
    stations = [Station(12699, 3755), Station(12653, 3348)]
    msg = stationDataDec().decode(make_data(0b10, [3, 6], eq=jeju), 2)
    ax = plot_mmi(stations, msg)
    assert ax.get_xlabel() == 'Longitude [deg]'
    assert ax.get_title().startswith('M4.9')
    plt.close('all')


def test_plot_mismatch(make_data):
    msg = stationDataDec().decode(make_data(0b00, [3]), 1)
    with pytest.raises(ValueError):
        plot_mmi([], msg)
