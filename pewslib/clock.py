"""
module for the PEWS feed clock

The feed publishes one snapshot per second, so the real-time clock points to
the previous second. When a simulation is armed, the clock replays a past
event: wall time elapsed since arming is added to the event start time.
"""

from threading import Lock
from pewslib.kmatime import gtime_t, timeget, timeadd, timediff, \
    time2kmastr, kmastr2time


class SimData():
    """ class to define a simulation of a past earthquake """

    def __init__(self, start_time=None, eq_id='', duration=0):
        if isinstance(start_time, str):
            start_time = kmastr2time(start_time)
        # when the simulated feed starts (ex. 20211214081904)
        self.start_time = start_time if start_time is not None else gtime_t()
        self.eq_id = eq_id
        # duration [s]
        self.duration = duration
        # when the simulation was armed
        self.call_time = gtime_t()


class kmaClock():
    """ class for the real-time/simulation clock of the PEWS feed """

    def __init__(self, timefunc=timeget):
        self.timefunc = timefunc
        self.sim = None
        self._lock = Lock()

    def _expire(self, now):
        if self.sim is None:
            return
        if int(timediff(now, self.sim.call_time)) > self.sim.duration:
            self.sim = None

    def _timestamp(self, now):
        self._expire(now)
        if self.sim is not None:
            dt = int(timediff(now, self.sim.call_time))
            return time2kmastr(timeadd(self.sim.start_time, dt-1))
        return time2kmastr(timeadd(now, -1))

    def arm(self, start_time, eq_id, duration):
        """ start simulation, replacing any existing one """
        sim = SimData(start_time, eq_id, duration)
        self.start_simulation(sim)

    def start_simulation(self, sim: SimData):
        if sim.duration <= 0:
            raise ValueError("simulation duration must be positive")
        with self._lock:
            sim.call_time = self.timefunc()
            self.sim = sim

    def stop(self):
        """ drop simulation """
        with self._lock:
            self.sim = None

    def timestamp(self):
        """ return feed timestamp YYYYMMDDHHMMSS (UTC) """
        with self._lock:
            return self._timestamp(self.timefunc())

    def is_simulating(self):
        with self._lock:
            self._expire(self.timefunc())
            return self.sim is not None

    def earthquake_id(self):
        """ return earthquake id of the simulation, None in real-time """
        with self._lock:
            self._expire(self.timefunc())
            return self.sim.eq_id if self.sim is not None else None

    def snapshot(self):
        """ return (timestamp, earthquake id or None) read at once """
        with self._lock:
            ts = self._timestamp(self.timefunc())
            eq_id = self.sim.eq_id if self.sim is not None else None
        return ts, eq_id
