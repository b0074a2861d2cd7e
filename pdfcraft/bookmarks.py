"""Bookmarks and the document outline built from them."""

from dataclasses import dataclass, field
from itertools import count

from .objects import Dictionary, Name, string_literal


@dataclass
class Bookmark:
    """An outline entry pointing at a page.

    ``format`` is 0, 1 for italic, 2 for bold or 3 for bold italic;
    ``color`` is an RGB triple.
    """

    title: str
    color: tuple
    format: int
    page: tuple
    children: list = field(default_factory=list)
    id: int = 0


def _title_bytes(title):
    if title.isascii():
        return title.encode("ascii")
    return b"\xfe\xff" + title.encode("utf-16-be")


class BookmarkMixin:
    """Bookmark handling for a document.

    Expects ``max_id``, ``objects``, ``bookmarks``, ``bookmark_table`` and
    ``max_bookmark_id`` on the instance.
    """

    def add_bookmark(self, bookmark, parent=None):
        """Register a bookmark, under ``parent`` if given; return its id."""
        self.max_bookmark_id += 1
        bookmark_id = self.max_bookmark_id
        bookmark.id = bookmark_id
        if parent is not None:
            owner = self.bookmark_table.get(parent)
            if owner is not None:
                owner.children.append(bookmark_id)
        else:
            self.bookmarks.append(bookmark_id)
        self.bookmark_table[bookmark_id] = bookmark
        return bookmark_id

    def _outline_children(self, ids, parent_id, child_ids, processed):
        first = last = None
        for bookmark_id in child_ids:
            object_id = (next(ids), 0)
            info_id = (next(ids), 0)
            bookmark = self.bookmark_table[bookmark_id]

            info = Dictionary()
            info.set("D", [bookmark.page, Name("Fit")])
            info.set("S", Name("GoTo"))

            child = Dictionary()
            child.set("Parent", parent_id)
            child.set("Title", string_literal(_title_bytes(bookmark.title)))
            child.set("A", info_id)
            child.set("F", int(bookmark.format))
            child.set("C", [float(c) for c in bookmark.color])

            if first is None:
                first = object_id
            elif last is not None:
                processed[last].set("Next", object_id)
                child.set("Prev", last)
            last = object_id

            if bookmark.children:
                c_first, c_last, c_count = self._outline_children(
                    ids, object_id, bookmark.children, processed
                )
                if c_first is not None:
                    child.set("First", c_first)
                if c_last is not None:
                    child.set("Last", c_last)
                child.set("Count", c_count)

            processed[object_id] = child
            processed[info_id] = info
        return first, last, len(child_ids)

    def build_outline(self):
        """Add the outline objects to the document; return the outline id or None."""
        if not self.bookmarks:
            return None
        outline_id = (self.max_id + 1, 0)
        ids = count(self.max_id + 2)
        processed = {}
        first, last, total = self._outline_children(ids, outline_id, self.bookmarks, processed)

        outline = Dictionary()
        if first is not None:
            outline.set("First", first)
        if last is not None:
            outline.set("Last", last)
        outline.set("Count", total)

        self.objects.update(processed)
        self.objects[outline_id] = outline
        self.max_id = next(ids) - 1
        return outline_id