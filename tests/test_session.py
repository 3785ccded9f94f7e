import pytest

from pipeline import (
    FileLyricsStore,
    LyricsEditingSession,
    LyricsSaveError,
    LyricsTrack,
)


class FailingSaveStore(FileLyricsStore):
    def save_lrc(self, track, content, uploaded=False):
        raise LyricsSaveError('storage offline')


@pytest.fixture
def store(tmp_path):
    return FileLyricsStore(tmp_path)


def test_load_prefers_lrc_file_and_keeps_unknown_tags(store, tmp_path):
    (tmp_path / 't1.lrc').write_text('[ti:Song]\n[au:instrumental]\n[00:01.00] hi', encoding='utf-8')
    session = LyricsEditingSession(store)

    timeline = session.load_track(LyricsTrack(track_id='t1', lrc_file_path='t1.lrc', lyrics_text='ignored'))

    assert timeline.pairs() == ((1.0, 'hi'), (None, '[au:instrumental]'))
    assert not session.has_unsaved_changes()


def test_load_falls_back_to_plain_text(store):
    session = LyricsEditingSession(store)
    track = LyricsTrack(track_id='t2', lrc_file_path='missing.lrc', lyrics_text='[Verse:1]\nline one\nline two')

    timeline = session.load_track(track)

    assert timeline.pairs() == ((None, 'line one'), (None, 'line two'))
    assert session.controller.current_line_index == 0


def test_load_without_any_source_is_empty(store):
    session = LyricsEditingSession(store)
    assert len(session.load_track(LyricsTrack(track_id='t3'))) == 0


def test_edit_and_save_round_trip(store, tmp_path):
    session = LyricsEditingSession(store)
    session.load_track(LyricsTrack(track_id='t4', lyrics_text='first\nsecond'))
    session.controller.sync_current(1.5)
    session.controller.sync_current(3.25)
    assert session.has_unsaved_changes()

    track = session.save()

    assert not session.has_unsaved_changes()
    assert track.lyrics_text == '[00:01.50] first\n[00:03.25] second'
    assert track.lrc_file_path.startswith('t4_')
    saved = (tmp_path / track.lrc_file_path).read_text(encoding='utf-8-sig')
    assert saved == track.lyrics_text

    reloaded = LyricsEditingSession(store).load_track(track)
    assert reloaded.pairs() == ((1.5, 'first'), (3.25, 'second'))


def test_save_failure_keeps_state_editable(tmp_path):
    session = LyricsEditingSession(FailingSaveStore(tmp_path))
    session.load_track(LyricsTrack(track_id='t5', lyrics_text='a\nb'))
    session.controller.edit_text(0, 'A')

    with pytest.raises(LyricsSaveError) as excinfo:
        session.save()

    assert excinfo.value.retryable
    assert session.has_unsaved_changes()
    assert session.timeline[0].text == 'A'
    session.controller.undo()
    assert session.timeline[0].text == 'a'


def test_paste_filters_tags_and_resets_history(store):
    session = LyricsEditingSession(store)
    session.load_track(LyricsTrack(track_id='t6', lyrics_text='old'))
    session.controller.edit_text(0, 'older')

    session.paste_lyrics('[Chorus:x]\n[ar:Someone]\nfresh line')

    assert session.timeline.pairs() == ((None, 'fresh line'),)
    assert len(session.controller.history) == 1


def test_upload_saves_original_content(store, tmp_path):
    session = LyricsEditingSession(store)
    session.load_track(LyricsTrack(track_id='t7'))
    raw = '[ti:Song]\n[00:02.000] b\n[00:01.000] a'

    timeline = session.upload_lrc(raw.encode('utf-8'))
    assert timeline.pairs() == ((1.0, 'a'), (2.0, 'b'))
    assert session.has_unsaved_changes()

    track = session.save()
    assert track.lrc_file_path.endswith('_uploaded.lrc')
    assert track.lyrics_text == raw
    assert not session.has_unsaved_changes()


def test_switch_track_discards_previous_state(store):
    session = LyricsEditingSession(store)
    session.load_track(LyricsTrack(track_id='a', lyrics_text='one'))
    session.controller.edit_text(0, 'edited')

    session.switch_track(LyricsTrack(track_id='b', lyrics_text='two'))

    assert session.track.track_id == 'b'
    assert session.timeline.pairs() == ((None, 'two'),)
    assert len(session.controller.history) == 1
    assert not session.has_unsaved_changes()


def test_active_index_follows_edits(store):
    session = LyricsEditingSession(store)
    session.load_track(LyricsTrack(track_id='t8', lyrics_text='[00:01.00] a\n[00:04.00] b'))
    assert session.active_index(0.5) is None
    assert session.active_index(2.0) == 0
    session.controller.sync_line(1, 1.5)
    assert session.active_index(2.0) == 1


def test_active_index_after_inserting_and_syncing_lines(store):
    session = LyricsEditingSession(store)
    session.load_track(LyricsTrack(track_id='t10', lyrics_text='[00:01.00] a\n[00:02.00] b\n[00:05.00] c'))
    session.controller.add_line(0)
    assert session.active_index(0.5) is None
    assert session.active_index(1.5) == 0
    assert session.active_index(2.0) == 2

    session.load_track(LyricsTrack(track_id='t11', lyrics_text='a\nb\nc\nd'))
    session.controller.sync_line(0, 1.0)
    session.controller.sync_line(2, 3.0)
    assert session.active_index(2.5) == 0
    assert session.active_index(3.5) == 2


def test_closed_session_rejects_operations(store):
    session = LyricsEditingSession(store)
    with pytest.raises(RuntimeError):
        session.save()
    with pytest.raises(RuntimeError):
        session.paste_lyrics('x')
    assert not session.has_unsaved_changes()


def test_track_json_round_trip(tmp_path):
    track = LyricsTrack(track_id='t9', title='Song', lyrics_text='a').with_saved_lyrics('t9_1.lrc', '[00:01.00] a')
    path = tmp_path / 'track.json'
    track.save_to_json(str(path))
    assert LyricsTrack.load_from_json(str(path)) == track
