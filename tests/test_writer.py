import pytest

from core.lrc import LrcParser, LrcTimeline, LrcWriter, LyricLine


@pytest.fixture
def writer():
    return LrcWriter()


def test_to_string_formats_timed_and_unset_lines(writer):
    timeline = LrcTimeline.from_lines([
        LyricLine(text='  hello ', time=1.5),
        LyricLine(text='not synced yet'),
    ])
    assert writer.to_string(timeline) == '[00:01.50] hello\nnot synced yet'


def test_empty_lines_are_not_written(writer):
    timeline = LrcTimeline.from_lines([
        LyricLine(text='', time=3.0),
        LyricLine(text='   '),
        LyricLine(text='kept', time=4.0),
        LyricLine(text=''),
    ])
    assert writer.to_string(timeline) == '[00:04.00] kept'


def test_output_format_is_fixed(writer):
    timeline = LrcParser().parse_string('[1:02:500] a\n[00:03.125] b')
    assert writer.to_string(timeline) == '[00:03.12] b\n[01:02.50] a'


def test_round_trip_keeps_time_and_text():
    timeline = LrcTimeline.from_lines([
        LyricLine(text='intro', time=0.0),
        LyricLine(text='verse one', time=12.34),
        LyricLine(text='chorus', time=75.5),
        LyricLine(text='late', time=3599.99),
        LyricLine(text='unsynced tail'),
    ])
    reparsed = LrcParser().parse_string(LrcWriter().to_string(timeline), filter_metadata=False)

    assert [line.text for line in reparsed] == [line.text for line in timeline]
    for original, parsed in zip(timeline, reparsed):
        if original.time is None:
            assert parsed.time is None
        else:
            assert parsed.time == pytest.approx(original.time)


def test_write_file_uses_bom(writer, tmp_path):
    path = tmp_path / 'out.lrc'
    writer.write_file(LrcTimeline.from_lines([LyricLine(text='a', time=1.0)]), str(path))
    data = path.read_bytes()
    assert data.startswith(b'\xef\xbb\xbf')
    assert data[3:] == b'[00:01.00] a'
