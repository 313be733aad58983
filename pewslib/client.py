"""
client for the KMA PEWS feed

  GET {url}/pews/data/{timestamp}.s           station list
  GET {url}/pews/data/{timestamp}.b           station data
  GET {url}/pews/data/{eq_id}/{timestamp}.s|b simulation of a past event

A response other than 200 means there is no data for this cycle.
Transport errors (requests.RequestException) are passed to the caller.
"""

import requests
from pewslib.clock import kmaClock
from pewslib.pews import stationListDec, stationDataDec, EqMsg

PEWS_URL = 'https://www.weather.go.kr'


class pewsClient():
    """ class to poll the PEWS feed """

    def __init__(self, clock=None, url=PEWS_URL, timeout=10.0,
                 session=None, monlevel=0):
        self.clock = clock if clock is not None else kmaClock()
        self.url = url.rstrip('/')
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.monlevel = monlevel

        self.sta_dec = stationListDec(monlevel)
        self.dat_dec = stationDataDec(monlevel)

        self.stations = []
        self.sta_eq_id = None
        self.msg = None

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        self.session.close()

    def make_url(self, ts, ext, eq_id=None):
        """ build feed url for timestamp ts and extension ('s' or 'b') """
        if eq_id is not None:
            return f"{self.url}/pews/data/{eq_id}/{ts}.{ext}"
        return f"{self.url}/pews/data/{ts}.{ext}"

    def url_station_list(self):
        ts, eq_id = self.clock.snapshot()
        return self.make_url(ts, 's', eq_id)

    def url_station_data(self):
        ts, eq_id = self.clock.snapshot()
        return self.make_url(ts, 'b', eq_id)

    def fetch(self, url):
        """ return response body, or b'' if the status is not 200 """
        resp = self.session.get(url, timeout=self.timeout)
        if resp.status_code != requests.codes.ok:
            if self.monlevel > 0:
                print(f"[PEWS] no data: {url} status={resp.status_code}")
            return b''
        return resp.content

    def fetch_station_list(self, url):
        return self.fetch(url)

    def fetch_station_data(self, url):
        return self.fetch(url)

    def get_station_list(self, snap=None):
        """ fetch and decode station list """
        ts, eq_id = snap if snap is not None else self.clock.snapshot()
        msg = self.fetch_station_list(self.make_url(ts, 's', eq_id))
        self.stations = self.sta_dec.decode(msg)
        # simulation id the station list belongs to, None in real-time
        self.sta_eq_id = eq_id
        return self.stations

    def get_station_data(self, nsta=None, snap=None):
        """ fetch and decode station data for nsta stations """
        if nsta is None:
            nsta = len(self.stations)
        ts, eq_id = snap if snap is not None else self.clock.snapshot()
        msg = self.fetch_station_data(self.make_url(ts, 'b', eq_id))
        if len(msg) == 0:
            return EqMsg()
        return self.dat_dec.decode(msg, nsta, sim=eq_id is not None)

    def start_simulation(self, start_time, eq_id, duration):
        """ replay a past earthquake for duration [s] """
        self.clock.arm(start_time, eq_id, duration)
        self.stations = []

    def update(self):
        """ poll station data once, refreshing station list if needed """
        snap = self.clock.snapshot()
        if len(self.stations) == 0 or snap[1] != self.sta_eq_id or \
                (self.msg is not None and self.msg.station_update_needed):
            self.get_station_list(snap)

        msg = self.get_station_data(len(self.stations), snap)
        if self.monlevel > 0 and self.msg is not None and \
                msg.phase != self.msg.phase:
            print(f"[PEWS] phase {self.msg.phase.name} -> {msg.phase.name}")
        self.msg = msg
        return msg
