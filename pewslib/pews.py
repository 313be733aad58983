"""
KMA Public Earthquake Warning System (PEWS) binary feed decoder

  station list (.s): 20-bit groups of (latitude, longitude)
  station data (.b): header, 4-bit MMI per station, and while an
                     earthquake is active, a 600-bit earthquake block and
                     a 60-byte epicenter name at the end of the message
"""

from enum import IntEnum
import json
from typing import NamedTuple
import numpy as np
from pewslib.bitbuf import bitBuf, decode_mask, DecodeError


class rPEWS():
    """ class for constants """
    LAT_BIAS = 3000        # latitude [0.01 deg] offset
    LON_BIAS = 12000       # longitude [0.01 deg] offset
    STA_BITS = 20          # bits per station in station list
    HEAD_BITS = 32         # station data header (real-time)
    HEAD_BITS_SIM = 8      # station data header (simulation)
    EQ_BITS = 600          # earthquake info block
    EPI_BYTES = 60         # epicenter name
    AREA_NONE = 0x1ffff    # 17-bit area mask sentinel
    TIME_OFFSET = 32400    # [s] added to the occurrence time (UTC+9)
    MMI_UNDEF = 1          # MMI for nibble values without table entry


class uPhase(IntEnum):
    """ broadcast phase of the feed """
    NORMAL = 1
    ALERT = 2
    INFO = 3
    UPDATE_INFO = 4


# 2-bit status code to phase, the codes are not in phase order
phase_t = {0b00: uPhase.NORMAL, 0b01: uPhase.UPDATE_INFO,
           0b10: uPhase.ALERT, 0b11: uPhase.INFO}

# 4-bit MMI code to intensity
mmi_t = np.array([1, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 10, 1, 1, 1], dtype=int)

# max intensity area, bit k of the area mask is area_t[k]
area_t = ('서울', '부산', '대구', '인천', '광주', '대전', '울산', '세종',
          '경기', '강원', '충북', '충남', '전북', '전남', '경북', '경남', '제주')


class Station(NamedTuple):
    """ station position in 0.01 deg """
    longitude: int
    latitude: int

    def to_dict(self):
        return {'longitude': self.longitude, 'latitude': self.latitude}


class EqInfo():
    """ class to define earthquake information """

    def __init__(self):
        # divide by 100 before use
        self.longitude = 0
        self.latitude = 0
        self.eq_id = ''
        self.magnitude = 0  # 0.1
        self.depth = 0  # km
        self.time = ''  # epoch in ms
        self.max_intensity = 0
        self.max_intensity_area = []
        self.epicenter = ''

    def to_dict(self):
        return {'longitude': self.longitude,
                'latitude': self.latitude,
                'earthquakeId': self.eq_id,
                'magnitude': self.magnitude,
                'depth': self.depth,
                'time': self.time,
                'maxIntensity': self.max_intensity,
                'maxIntensityArea': list(self.max_intensity_area),
                'epicenter': self.epicenter}


class EqMsg():
    """ class to define earthquake status message """

    def __init__(self):
        self.station_update_needed = False
        self.phase = uPhase.NORMAL
        self.last_eq_id = None
        self.mmi = []
        self.eq = None

    def to_dict(self):
        return {'stationUpdateNeeded': self.station_update_needed,
                'phase': int(self.phase),
                'lastEarthquakeId': self.last_eq_id or '',
                'mmi': list(self.mmi),
                'earthquakeInfo': self.eq.to_dict()
                if self.eq is not None else None}

    def to_json(self, **kwargs):
        return json.dumps(self.to_dict(), ensure_ascii=False, **kwargs)


class pewsDec():
    """ base class of PEWS decoders """

    def __init__(self, monlevel=0, fh=None):
        self.monlevel = monlevel
        self.fh = fh

    def log(self, s):
        if self.monlevel > 0:
            print(s)
        if self.fh is not None:
            self.fh.write(s+"\n")


class stationListDec(pewsDec):
    """ station list (.s) decoder class """

    def decode(self, msg):
        """ decode station list """
        buf = bitBuf(msg)
        nsta = buf.nbit//rPEWS.STA_BITS

        stations = []
        for k in range(nsta):
            lat, lon = buf.unpack('u10u10', k*rPEWS.STA_BITS, 'station')
            stations.append(Station(rPEWS.LON_BIAS+lon, rPEWS.LAT_BIAS+lat))

        self.log(f"[PEWS] station list: {nsta} stations")
        if self.monlevel > 1:
            for k, sta in enumerate(stations):
                self.log(f"{k:4d} lat={sta.latitude*0.01:.2f} " +
                         f"lon={sta.longitude*0.01:.2f}")
        return stations


class stationDataDec(pewsDec):
    """ station data (.b) decoder class """

    def __init__(self, monlevel=0, fh=None):
        super().__init__(monlevel, fh)
        self.msg = None

    def decode_head(self, buf, msg, sim=False):
        """ decode header, return header length in bits """
        nh = rPEWS.HEAD_BITS_SIM if sim else rPEWS.HEAD_BITS
        buf.check(0, nh, 'header')

        upd, code = buf.unpack('u1u2', 0, 'header')
        msg.station_update_needed = upd == 1
        msg.phase = phase_t.get(code, uPhase.NORMAL)

        # last earthquake id is not sent in simulation
        if not sim:
            msg.last_eq_id = "20" + str(buf.getbitu(6, 26, 'last eq id'))
        return nh

    def decode_mmi(self, buf, nsta):
        """ decode MMI of each station """
        if nsta == 0:
            return []
        v = buf.unpack('u4'*nsta, 0, 'mmi')
        return [int(mmi_t[k]) if k < len(mmi_t) else rPEWS.MMI_UNDEF
                for k in v]

    def decode_eq(self, buf):
        """ decode 600-bit earthquake information block """
        eq = EqInfo()
        lat, lon, mag, dep, t, eid, imax, area = \
            buf.unpack('u10u10u7u9u33u26u4u17', 0, 'earthquake info')

        eq.latitude = rPEWS.LAT_BIAS+lat
        eq.longitude = rPEWS.LON_BIAS+lon
        eq.magnitude = mag
        eq.depth = dep
        eq.time = str(t+rPEWS.TIME_OFFSET) + "000"
        eq.eq_id = "20" + str(eid)
        eq.max_intensity = imax

        # all ones: area not applicable
        if area == rPEWS.AREA_NONE:
            eq.max_intensity_area = []
        else:
            eq.max_intensity_area = [area_t[k] for k in decode_mask(area, 17)]
        return eq

    def decode_epicenter(self, msg):
        """ decode epicenter name from the last 60 bytes """
        if len(msg) < rPEWS.EPI_BYTES:
            raise DecodeError('epicenter', 0, rPEWS.EPI_BYTES*8, len(msg)*8)
        s = bytes(msg[-rPEWS.EPI_BYTES:]).decode('utf-8', errors='replace')
        return s.strip('\x00 ')

    def decode(self, msg, nsta, sim=False):
        """ decode station data message for nsta stations """
        if nsta < 0:
            raise ValueError("number of stations must not be negative")
        eqm = EqMsg()
        if len(msg) == 0:
            self.msg = eqm
            return eqm

        buf = bitBuf(msg)
        i = self.decode_head(buf, eqm, sim)
        body = buf.subrange(i, buf.nbit-i, 'body')

        eqm.mmi = self.decode_mmi(body, nsta)

        if eqm.phase in (uPhase.ALERT, uPhase.INFO):
            eq_ = body.subrange(body.nbit-rPEWS.EQ_BITS, rPEWS.EQ_BITS,
                                'earthquake info')
            eqm.eq = self.decode_eq(eq_)
            eqm.eq.epicenter = self.decode_epicenter(msg)

        self.msg = eqm
        self.output(eqm)
        return eqm

    def output(self, eqm):
        if self.monlevel <= 0 and self.fh is None:
            return
        self.log(f"[PEWS] phase={eqm.phase.name} " +
                 f"update={int(eqm.station_update_needed)} " +
                 f"last_id={eqm.last_eq_id} nsta={len(eqm.mmi)}")
        if eqm.eq is not None:
            eq = eqm.eq
            area = " ".join(eq.max_intensity_area)
            self.log(f"id={eq.eq_id} lat={eq.latitude*0.01:.2f} " +
                     f"lon={eq.longitude*0.01:.2f} " +
                     f"mag={eq.magnitude*0.1:.1f} depth={eq.depth}km " +
                     f"max={eq.max_intensity} {area} {eq.epicenter}")
        if self.monlevel > 1:
            self.log("mmi: " + " ".join(str(v) for v in eqm.mmi))
