from pdfcraft.bookmarks import Bookmark, BookmarkMixin
from pdfcraft.objects import Name, PdfString


class _Host(BookmarkMixin):
    def __init__(self, max_id=0):
        self.max_id = max_id
        self.objects = {}
        self.bookmarks = []
        self.bookmark_table = {}
        self.max_bookmark_id = 0


def _mark(title, page=(3, 0)):
    return Bookmark(title, (0.0, 0.0, 0.0), 0, page)


def test_add_bookmark_ids_and_tree():
    host = _Host()
    top = host.add_bookmark(_mark("Top"), None)
    child = host.add_bookmark(_mark("Child"), top)
    other = host.add_bookmark(_mark("Other"))
    assert [top, child, other] == [1, 2, 3]
    assert host.bookmarks == [top, other]
    assert host.bookmark_table[top].children == [child]
    assert host.bookmark_table[child].id == child


def test_add_bookmark_unknown_parent():
    host = _Host()
    bid = host.add_bookmark(_mark("Orphan"), 99)
    assert host.bookmarks == []
    assert host.bookmark_table[bid].title == "Orphan"


def test_build_outline_empty():
    host = _Host(max_id=7)
    assert BookmarkMixin.build_outline(host) is None
    assert host.objects == {}
    assert host.max_id == 7


def test_build_outline_single():
    host = _Host(max_id=10)
    host.add_bookmark(Bookmark("Intro", (1.0, 0.5, 0.0), 2, (4, 0)))
    outline_id = host.build_outline()
    assert outline_id == (11, 0)
    outline = host.objects[outline_id]
    assert outline.get("First") == outline.get("Last")
    assert outline.get("Count") == 1

    entry = host.objects[outline.get("First")]
    assert entry.get("Parent") == outline_id
    assert entry.get("Title") == PdfString(b"Intro")
    assert entry.get("F") == 2
    assert entry.get("C") == [1.0, 0.5, 0.0]
    assert not entry.has("Prev") and not entry.has("Next")

    action = host.objects[entry.get("A")]
    assert action.get("D") == [(4, 0), Name("Fit")]
    assert action.get("S") == Name("GoTo")
    assert host.max_id == max(key[0] for key in host.objects)


def test_build_outline_sibling_links():
    host = _Host()
    for title in ("A", "B", "C"):
        host.add_bookmark(_mark(title))
    outline = host.objects[host.build_outline()]
    assert outline.get("Count") == 3
    first = outline.get("First")
    second = host.objects[first].get("Next")
    third = host.objects[second].get("Next")
    assert third == outline.get("Last")
    assert host.objects[third].get("Prev") == second
    assert host.objects[second].get("Prev") == first
    assert not host.objects[third].has("Next")
    titles = [host.objects[i].get("Title").data for i in (first, second, third)]
    assert titles == [b"A", b"B", b"C"]


def test_build_outline_nested():
    host = _Host()
    top = host.add_bookmark(_mark("Top"))
    host.add_bookmark(_mark("One"), top)
    host.add_bookmark(_mark("Two"), top)
    outline_id = host.build_outline()
    top_entry = host.objects[host.objects[outline_id].get("First")]
    assert top_entry.get("Count") == 2
    child = host.objects[top_entry.get("First")]
    assert child.get("Parent") == host.objects[outline_id].get("First")
    assert child.get("Next") == top_entry.get("Last")
    assert host.objects[top_entry.get("Last")].get("Title").data == b"Two"


def test_non_ascii_title_is_utf16():
    host = _Host()
    host.add_bookmark(_mark("тест"))
    outline = host.objects[host.build_outline()]
    data = host.objects[outline.get("First")].get("Title").data
    assert data.startswith(b"\xfe\xff")
    assert data[2:].decode("utf-16-be") == "тест"


def test_outline_objects_are_new_ids():
    host = _Host(max_id=5)
    host.objects[(5, 0)] = "existing"
    host.add_bookmark(_mark("X"))
    host.build_outline()
    assert host.objects[(5, 0)] == "existing"
    assert all(key[0] > 5 for key in host.objects if key != (5, 0))