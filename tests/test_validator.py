import pytest

from core.lrc import InvalidTimestamp, LrcTimeline, LrcValidator, LyricLine


def _error_types(timeline):
    _ok, errors = LrcValidator().validate(timeline)
    return [(error.line_index, error.error_type) for error in errors]


def test_valid_timeline():
    timeline = LrcTimeline.from_lines([
        LyricLine(text='a', time=1.0),
        LyricLine(text='b', time=1.0),
        LyricLine(text='c'),
    ])
    assert LrcValidator().validate(timeline) == (True, [])


def test_order_and_tail_violations():
    timeline = LrcTimeline.from_lines([
        LyricLine(text='a', time=5.0),
        LyricLine(text='b', time=2.0),
        LyricLine(text='c'),
        LyricLine(text='d', time=9.0),
    ])
    assert _error_types(timeline) == [(1, 'TIME_ORDER'), (3, 'UNSET_BEFORE_TIMED')]


def test_empty_text():
    timeline = LrcTimeline.from_lines([
        LyricLine(text='', time=1.0),
    ])
    assert _error_types(timeline) == [(0, 'EMPTY_TEXT')]


def test_negative_time_rejected_on_construction():
    with pytest.raises(InvalidTimestamp):
        LyricLine(text='a', time=-1.0)
    with pytest.raises(InvalidTimestamp):
        LrcTimeline.from_lines([LyricLine(text='a', time=1.0)]).with_time(0, -0.5)
