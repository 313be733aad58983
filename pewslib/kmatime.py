"""
module for time handling of the KMA PEWS feed

times are kept as gtime_t (seconds since 1970-01-01 UTC and fraction).
"""

from copy import deepcopy
from math import floor
from datetime import datetime, timezone
import numpy as np


class gtime_t():
    """ class to define the time """

    def __init__(self, time=0, sec=0.0):
        self.time = time
        self.sec = sec

    def __eq__(self, other):
        return isinstance(other, gtime_t) and \
            self.time == other.time and self.sec == other.sec

    def __repr__(self):
        return "gtime_t({}, {})".format(self.time, self.sec)


def epoch2time(ep):
    """ calculate time from epoch """
    doy = [1, 32, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335]
    time = gtime_t()
    year = int(ep[0])
    mon = int(ep[1])
    day = int(ep[2])

    if year < 1970 or year > 2099 or mon < 1 or mon > 12:
        return time
    days = (year-1970)*365+(year-1969)//4+doy[mon-1]+day-2
    if year % 4 == 0 and mon >= 3:
        days += 1
    sec = int(ep[5])
    time.time = days*86400+int(ep[3])*3600+int(ep[4])*60+sec
    time.sec = ep[5]-sec
    return time


def time2epoch(t):
    """ convert time to epoch """
    mday = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31, 31, 28, 31, 30, 31,
            30, 31, 31, 30, 31, 30, 31, 31, 29, 31, 30, 31, 30, 31, 31, 30, 31,
            30, 31, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

    days = int(t.time/86400)
    sec = int(t.time-days*86400)
    day = days % 1461
    for mon in range(48):
        if day >= mday[mon]:
            day -= mday[mon]
        else:
            break
    ep = [0, 0, 0, 0, 0, 0]
    ep[0] = 1970+days//1461*4+mon//12
    ep[1] = mon % 12+1
    ep[2] = day+1
    ep[3] = sec//3600
    ep[4] = sec % 3600//60
    ep[5] = sec % 60+t.sec
    return ep


def timeget():
    """ return current time in UTC """
    now = datetime.now(timezone.utc)
    ep = np.array([now.year, now.month, now.day, now.hour, now.minute,
                   now.second])
    return epoch2time(ep)


def timeadd(t: gtime_t, sec: float):
    """ return time added with sec """
    tr = deepcopy(t)
    tr.sec += sec
    tt = floor(tr.sec)
    tr.time += int(tt)
    tr.sec -= tt
    return tr


def timediff(t1: gtime_t, t2: gtime_t):
    """ return time difference """
    dt = t1.time-t2.time
    dt += t1.sec-t2.sec
    return dt


def time2kmastr(t):
    """ convert time to KMA feed timestamp (YYYYMMDDHHMMSS, UTC) """
    e = time2epoch(t)
    return "{:04d}{:02d}{:02d}{:02d}{:02d}{:02d}"\
        .format(e[0], e[1], e[2], e[3], e[4], int(e[5]))


def kmastr2time(s):
    """ convert KMA feed timestamp (YYYYMMDDHHMMSS, UTC) to time """
    if len(s) != 14 or not s.isdigit():
        raise ValueError("invalid KMA timestamp: {}".format(s))
    try:
        dt = datetime.strptime(s, '%Y%m%d%H%M%S')
    except ValueError:
        raise ValueError("invalid KMA timestamp: {}".format(s)) from None
    if dt.year < 1970 or dt.year > 2099:
        raise ValueError("KMA timestamp out of range: {}".format(s))
    return epoch2time([dt.year, dt.month, dt.day, dt.hour, dt.minute,
                       dt.second])
