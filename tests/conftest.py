import logging

import pytest

from tbsessions.model import Format, HistoryEntry, SessionTree, Tab, Window


@pytest.fixture
def firefox_tree():
    return SessionTree(
        windows=[
            Window(tabs=[
                Tab(entries=[
                    HistoryEntry(url='moz-extension://abc/static/newtab.html',
                                 title='New Tab'),
                    HistoryEntry(url='http://example.com', title='Example',
                                 original_uri='http://example.com/'),
                    HistoryEntry(url='http://example.com/about',
                                 title='About'),
                ]),
                Tab(entries=[
                    HistoryEntry(url='https://python.org', title='Python'),
                ]),
            ]),
            Window(tabs=[
                Tab(entries=[
                    HistoryEntry(url='https://pypi.org', title=''),
                    HistoryEntry(url='https://pypi.org/project/click',
                                 title='click'),
                ]),
            ]),
        ],
        format=Format.FIREFOX,
    )


@pytest.fixture
def qutebrowser_tree():
    return SessionTree(
        windows=[
            Window(
                geometry=b'\x01\xd9\xd0\xcb\x00\x03',
                tabs=[
                    Tab(active=True, entries=[
                        HistoryEntry(url='https://a.org', title='A',
                                     last_visited='2021-03-04T10:11:12',
                                     scroll_pos=(0, 120)),
                        HistoryEntry(url='https://b.org', title='B',
                                     active=True, zoom=1.25,
                                     last_visited='2021-03-04T10:12:00'),
                    ]),
                    Tab(entries=[
                        HistoryEntry(url='https://c.org', title='C',
                                     active=True, pinned=True),
                    ]),
                ],
            ),
        ],
        format=Format.QUTEBROWSER,
    )


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    monkeypatch.delenv('DEBUG_MODE', raising=False)
    yield
    logger = logging.getLogger('tbsessions')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
