"""
module for plotting PEWS station intensity
"""

import numpy as np
import matplotlib.pyplot as plt


def sta2pos(stations):
    """ convert station list to latitude/longitude arrays [deg] """
    lat = np.array([sta.latitude for sta in stations], dtype=float)*0.01
    lon = np.array([sta.longitude for sta in stations], dtype=float)*0.01
    return lat, lon


def plot_mmi(stations, msg, ax=None):
    """ plot MMI of each station and the epicenter """
    if len(msg.mmi) != len(stations):
        raise ValueError("number of MMI values does not match stations")
    if ax is None:
        _, ax = plt.subplots(1, 1)

    lat, lon = sta2pos(stations)
    mmi = np.array(msg.mmi, dtype=int)
    sc = ax.scatter(lon, lat, c=mmi, s=12, cmap='jet', vmin=1, vmax=10)
    plt.colorbar(sc, ax=ax, label='MMI')

    if msg.eq is not None:
        ax.plot(msg.eq.longitude*0.01, msg.eq.latitude*0.01, 'r*',
                markersize=15, label='epicenter')
        ax.set_title(f"M{msg.eq.magnitude*0.1:.1f} {msg.eq.epicenter}")
        ax.legend()

    ax.set_xlabel('Longitude [deg]')
    ax.set_ylabel('Latitude [deg]')
    ax.grid()
    ax.set_aspect('equal')
    return ax
