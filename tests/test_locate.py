import datetime
import os
import re
import time

import pytest

from tbsessions import locate


class _Context:

    def __init__(self, selection):
        self.selection = selection
        self.calls = []

    def select(self, options, prompt):
        self.calls.append((options, prompt))
        return self.selection


def _touch(path, mtime=None):
    path.write_text('', encoding='utf-8')
    if mtime is not None:
        os.utime(str(path), (mtime, mtime))


def test_latest_prefers_recovery(tmp_path):
    now = time.time()
    _touch(tmp_path / 'recovery.jsonlz4', mtime=now - 3600)
    _touch(tmp_path / 'previous.jsonlz4', mtime=now)
    assert locate.latest_session_file(str(tmp_path)) == \
        str(tmp_path / 'recovery.jsonlz4')


def test_latest_falls_back_to_previous(tmp_path):
    _touch(tmp_path / 'previous.jsonlz4')
    assert locate.latest_session_file(str(tmp_path)) == \
        str(tmp_path / 'previous.jsonlz4')


def test_latest_without_any_session(tmp_path):
    assert locate.latest_session_file(str(tmp_path)) == \
        str(tmp_path / 'previous.jsonlz4')


def test_collect_files(tmp_path):
    for name in ['b.org', 'a.org', 'notes.txt', 'session.org~']:
        _touch(tmp_path / name)
    (tmp_path / 'dir.org').mkdir()
    assert locate.collect_files(str(tmp_path), [r'org$']) == ['a.org',
                                                              'b.org']
    assert locate.collect_files(str(tmp_path)) == [
        'a.org', 'b.org', 'notes.txt', 'session.org~',
    ]
    assert locate.collect_files(str(tmp_path), [r'txt$'], full_path=True) == [
        str(tmp_path / 'notes.txt'),
    ]


def test_collect_files_missing_root(tmp_path):
    with pytest.raises(FileNotFoundError):
        locate.collect_files(str(tmp_path / 'missing'))


def test_select_session(tmp_path):
    for name in ['one.org', 'two.org', 'three.json']:
        _touch(tmp_path / name)
    context = _Context('two.org')
    assert locate.select_session(context, str(tmp_path), 'edit',
                                 [r'org$']) == 'two.org'
    assert context.calls == [(['one.org', 'two.org'], 'edit')]


def test_select_session_nothing_selected(tmp_path):
    assert locate.select_session(_Context(None), str(tmp_path), 'x') is None


@pytest.fixture
def change_times(monkeypatch):
    times = {}
    monkeypatch.setattr(locate, '_change_time',
                        lambda path: times[os.path.basename(path)])
    return times


def test_rotation_boundary(tmp_path, change_times):
    now = 1_600_000_000.0
    _touch(tmp_path / 'old')
    _touch(tmp_path / 'fresh')
    change_times['old'] = now - 61 * 60
    change_times['fresh'] = now - 59 * 60
    removed = locate.rotate_older_than(
        str(tmp_path), datetime.timedelta(minutes=60), now=now
    )
    assert removed == [str(tmp_path / 'old')]
    assert sorted(os.listdir(str(tmp_path))) == ['fresh']


def test_rotation_pattern(tmp_path, change_times):
    now = 1_600_000_000.0
    for name in ['session-2020-09-13-12-00-00', 'default.yml', 'notes']:
        _touch(tmp_path / name)
        change_times[name] = now - 24 * 3600
    removed = locate.rotate_older_than(
        str(tmp_path), datetime.timedelta(minutes=60),
        pattern=locate.TIMED_SESSION_NAME, now=now,
    )
    assert removed == [str(tmp_path / 'session-2020-09-13-12-00-00')]
    assert sorted(os.listdir(str(tmp_path))) == ['default.yml', 'notes']


def test_files_older_than_uses_change_time(tmp_path):
    # Touching the modification time doesn't make a file old.
    _touch(tmp_path / 'recent', mtime=time.time() - 10 * 24 * 3600)
    assert locate.files_older_than(str(tmp_path),
                                   datetime.timedelta(hours=1)) == []


def test_timestamp():
    stamp = locate.timestamp(datetime.datetime(2021, 3, 4, 5, 6, 7))
    assert stamp == '2021-03-04-05-06-07'
    assert re.fullmatch(locate.TIMED_SESSION_NAME, f'session-{stamp}')
