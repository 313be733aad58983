import bitstruct as bs
import pytest

# Jeju earthquake 2021-12-14
EQ_JEJU = {'lat': 309, 'lon': 616, 'mag': 49, 'dep': 17, 't': 1639469600,
           'eid': 21007178, 'imax': 5, 'area': 0b00000000000000001,
           'name': '제주 서귀포시 서남서쪽 41km 해역'}


def encode_stations(stations):
    """ encode (latitude, longitude) list in 0.01 deg """
    vals = []
    for lat, lon in stations:
        vals += [lat-3000, lon-12000]
    return bs.pack('u10u10'*len(stations), *vals)


def encode_data(code, mmi, upd=0, last_id=0, eq=None, sim=False):
    """ encode station data message, mmi given as 4-bit codes """
    if sim:
        fmt, vals = 'u1u2u5', [upd, code, 0]
    else:
        fmt, vals = 'u1u2u3u26', [upd, code, 0, last_id]
    fmt += 'u4'*len(mmi)
    vals += list(mmi)
    if bs.calcsize(fmt) % 8:
        fmt += 'u4'
        vals.append(0)
    if eq is not None:
        fmt += 'u10u10u7u9u33u26u4u17u4'
        vals += [eq['lat'], eq['lon'], eq['mag'], eq['dep'], eq['t'],
                 eq['eid'], eq['imax'], eq['area'], 0]
    msg = bs.pack(fmt, *vals)
    if eq is not None:
        name = eq['name'].encode('utf-8')
        msg += b' '+name+b'\x00'*(59-len(name))
    return msg


@pytest.fixture
def jeju():
    return dict(EQ_JEJU)


@pytest.fixture
def make_stations():
    return encode_stations


@pytest.fixture
def make_data():
    return encode_data
