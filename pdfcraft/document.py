"""The PDF document."""

import copy
from dataclasses import dataclass, field

from .bookmarks import BookmarkMixin
from .creator import CreatorMixin
from .destinations import DestinationMixin
from .errors import (
    ObjectNotFoundError,
    ObjectTypeError,
    PageNumberNotFoundError,
    PdfError,
    ReferenceLimitError,
)
from .objects import Dictionary, Stream, as_array, as_dict, as_reference, is_reference, kind_of
from .pages import DEREF_LIMIT, PagesMixin
from .pagetree import PageTreeMixin


@dataclass(eq=False)
class Document(CreatorMixin, BookmarkMixin, DestinationMixin, PageTreeMixin, PagesMixin):
    """A PDF document: its objects, trailer and bookmarks."""

    version: str = "1.4"
    binary_mark: bytes = bytes([0xBB, 0xAD, 0xC0, 0xDE])
    trailer: Dictionary = field(default_factory=Dictionary)
    objects: dict = field(default_factory=dict)
    max_id: int = 0
    max_bookmark_id: int = 0
    bookmarks: list = field(default_factory=list)
    bookmark_table: dict = field(default_factory=dict)
    xref_start: int = 0
    encryption_state: object = None

    DEREF_LIMIT = DEREF_LIMIT

    @classmethod
    def new_from_prev(cls, prev):
        """Start an incremental update on top of ``prev``."""
        trailer = copy.deepcopy(prev.trailer)
        trailer.set(b"Prev", int(prev.xref_start))
        return cls(
            trailer=trailer,
            max_id=prev.max_id,
            max_bookmark_id=prev.max_bookmark_id,
        )

    def _fix_pages(self, bookmark_ids, first):
        for bookmark_id in bookmark_ids:
            bookmark = self.bookmark_table.get(bookmark_id)
            if bookmark is None:
                return (0, 0)
            children = list(bookmark.children)
            page = bookmark.page
            if page[0] == 0 and children:
                page = self._fix_pages(children, False)
                bookmark.page = page
            if not first and page[0] != 0:
                return page
            if first and children:
                self._fix_pages(children, True)
        return (0, 0)

    def adjust_zero_pages(self):
        """Point bookmarks whose page is ``(0, _)`` at their first child's page."""
        self._fix_pages(list(self.bookmarks), True)

    def dereference(self, obj):
        """Follow references; return ``(last_id_or_None, final_object)``."""
        last_id = None
        hops = 0
        while is_reference(obj):
            last_id = obj
            if obj not in self.objects:
                raise ObjectNotFoundError(obj)
            obj = self.objects[obj]
            hops += 1
            if hops > self.DEREF_LIMIT:
                raise ReferenceLimitError()
        return last_id, obj

    def get_object(self, object_id):
        """Return the object stored under ``object_id``, following references."""
        object_id = tuple(object_id)
        if object_id not in self.objects:
            raise ObjectNotFoundError(object_id)
        return self.dereference(self.objects[object_id])[1]

    def has_object(self, object_id):
        return tuple(object_id) in self.objects

    def get_object_page(self, object_id):
        """Return the id of the page whose /Annots contains ``object_id``."""
        object_id = tuple(object_id)
        for page_id in self.get_pages().values():
            page = as_dict(self.get_object(page_id))
            annots = as_array(page.get(b"Annots"))
            if any(is_reference(item) and item == object_id for item in annots):
                return page_id
        raise PageNumberNotFoundError(0)

    def get_dictionary(self, object_id):
        return as_dict(self.get_object(object_id))

    def get_dict_in_dict(self, node, key):
        """Return the dictionary stored (directly or by reference) under ``key``."""
        value = node.get(key)
        if is_reference(value):
            return self.get_dictionary(value)
        if isinstance(value, Dictionary):
            return value
        raise ObjectTypeError("Dictionary", kind_of(value))

    def traverse_objects(self, action):
        """Walk every object reachable from the trailer, calling ``action`` on each.

        Returns the referenced object ids in the order they were found.
        """
        refs = []
        seen = set()

        def visit(obj):
            action(obj)
            if isinstance(obj, list):
                for item in obj:
                    visit(item)
            elif isinstance(obj, Dictionary):
                for value in list(obj.values()):
                    visit(value)
            elif isinstance(obj, Stream):
                for value in list(obj.dict.values()):
                    visit(value)
            elif is_reference(obj) and obj not in seen:
                seen.add(obj)
                refs.append(obj)

        for value in list(self.trailer.values()):
            visit(value)
        for ref in refs:
            target = self.objects.get(ref)
            if target is not None:
                visit(target)
        return refs

    def get_encrypted(self):
        """Return the encryption dictionary referenced by the trailer."""
        return self.get_dictionary(as_reference(self.trailer.get(b"Encrypt")))

    def is_encrypted(self):
        try:
            self.get_encrypted()
        except PdfError:
            return False
        return True

    def catalog(self):
        """Return the document catalog."""
        return self.get_dictionary(as_reference(self.trailer.get(b"Root")))