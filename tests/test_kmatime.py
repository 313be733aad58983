import pytest
from pewslib.clock import kmaClock
from pewslib.kmatime import epoch2time, time2epoch, timeadd, timediff, \
    time2kmastr, kmastr2time, timeget


def test_kmastr():
    for s in ['20211214081905', '20240229235959', '19700101000000']:
        assert time2kmastr(kmastr2time(s)) == s


@pytest.mark.parametrize('s', ['2021121408190', '2021-12-14 08:1',
                               '20211314081905', '20211200081905',
                               '20230229081905', '20211214241905',
                               '20211214086005', '20211214081960',
                               '19691231235959'])
def test_kmastr_invalid(s):
    with pytest.raises(ValueError):
        kmastr2time(s)


def test_arm_invalid_start():
    clk = kmaClock()
    with pytest.raises(ValueError):
        clk.arm('20211314081905', '2021007178', 10)
    assert not clk.is_simulating()


def test_timeadd():
    t = kmastr2time('20231231235959')
    assert time2kmastr(timeadd(t, 1)) == '20240101000000'
    assert time2kmastr(timeadd(t, -60)) == '20231231235859'
    assert timediff(timeadd(t, 3600), t) == 3600


def test_epoch():
    t = epoch2time([2021, 12, 14, 8, 19, 5])
    assert t.time == 1639469945
    assert time2epoch(t)[:5] == [2021, 12, 14, 8, 19]
    assert time2kmastr(t) == '20211214081905'


def test_timeget():
    t = timeget()
    assert t.time > epoch2time([2020, 1, 1, 0, 0, 0]).time
