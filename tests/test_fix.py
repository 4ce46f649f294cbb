import copy

from tbsessions.fix import fix_session
from tbsessions.model import Format, HistoryEntry, SessionTree, Tab, Window


def _tree(*tabs, geometry=None):
    return SessionTree(windows=[Window(tabs=list(tabs), geometry=geometry)],
                       format=Format.QUTEBROWSER)


def test_prunes_dead_pages():
    tree = _tree(Tab(entries=[
        HistoryEntry(url='data:text/html,x'),
        HistoryEntry(url='http://a', title='ok', scroll_pos=(10, 400),
                     zoom=1.75),
        HistoryEntry(title='Error loading foo'),
    ]))
    tab, = fix_session(tree).windows[0].tabs
    assert tab.entries == [
        HistoryEntry(url='http://a', title='ok', active=True,
                     scroll_pos=(0, 0), zoom=1.0),
    ]


def test_only_last_entry_is_reset():
    tree = _tree(Tab(entries=[
        HistoryEntry(url='http://a', scroll_pos=(0, 50), zoom=2.0,
                     active=True),
        HistoryEntry(url='http://b', scroll_pos=(0, 70), zoom=0.5),
    ]))
    first, last = fix_session(tree).windows[0].tabs[0].entries
    assert first == HistoryEntry(url='http://a', scroll_pos=(0, 50), zoom=2.0,
                                 active=True)
    assert last == HistoryEntry(url='http://b', active=True)


def test_keeps_empty_tabs_and_windows():
    tree = SessionTree(
        windows=[
            Window(geometry='geo', tabs=[
                Tab(active=True,
                    entries=[HistoryEntry(title='Error loading page')]),
            ]),
            Window(),
        ],
        format=Format.QUTEBROWSER,
    )
    fixed = fix_session(tree)
    assert len(fixed.windows) == 2
    assert fixed.windows[0].geometry == 'geo'
    assert fixed.windows[0].tabs == [Tab(entries=[], active=True)]
    assert fixed.windows[1].tabs == []


def test_does_not_modify_input(qutebrowser_tree):
    before = copy.deepcopy(qutebrowser_tree)
    fixed = fix_session(qutebrowser_tree)
    assert qutebrowser_tree == before
    assert fixed is not qutebrowser_tree
    assert fixed.windows[0].tabs[0].entries[-1] is not \
        qutebrowser_tree.windows[0].tabs[0].entries[-1]


def test_idempotent(qutebrowser_tree):
    qutebrowser_tree.windows[0].tabs[0].entries.insert(
        0, HistoryEntry(url='data:text/html;charset=utf-8,blank'))
    once = fix_session(qutebrowser_tree)
    assert fix_session(once) == once


def test_empty_session():
    tree = SessionTree(format=Format.QUTEBROWSER)
    assert fix_session(tree) == tree
