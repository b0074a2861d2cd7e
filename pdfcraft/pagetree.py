"""Walking the page tree."""

from .errors import PdfError
from .objects import as_array, as_int, as_reference, is_reference

_PAGE_TREE_DEPTH_LIMIT = 256


class PageTreeMixin:
    """Page tree traversal for a document.

    Expects ``objects`` on the instance along with ``catalog``,
    ``get_dictionary`` and ``dereference``.
    """

    def get_pages(self):
        """Map page numbers, starting at 1, to page object ids."""
        return {number: page_id for number, page_id in enumerate(self.page_iter(), start=1)}

    def _page_kids(self, tree_id):
        try:
            kids = self.get_dictionary(tree_id).get_deref(b"Kids", self)
            return as_array(kids)
        except PdfError:
            return None

    def _root_kids(self):
        try:
            tree_id = as_reference(self.catalog().get(b"Pages"))
        except PdfError:
            return None
        return self._page_kids(tree_id)

    def page_iter(self):
        """Yield page object ids in document order.

        The walk visits at most as many nodes as the document has objects
        and descends at most 256 levels, so malformed trees terminate.
        """
        kids = self._root_kids()
        level = (kids, 0) if kids is not None else None
        budget = len(self.objects)
        stack = []
        while True:
            while level is not None and level[1] < len(level[0]):
                if budget == 0:
                    return
                budget -= 1
                items, pos = level
                kid = items[pos]
                level = (items, pos + 1)
                if not is_reference(kid):
                    continue
                try:
                    type_name = self.get_dictionary(kid).get_type()
                except PdfError:
                    continue
                if type_name == b"Page":
                    yield kid
                elif type_name == b"Pages" and len(stack) < _PAGE_TREE_DEPTH_LIMIT:
                    if level[1] < len(items):
                        stack.append(level)
                    sub = self._page_kids(kid)
                    level = (sub, 0) if sub is not None else None
            if not stack:
                return
            level = stack.pop()

    def page_count_hint(self):
        """Estimate the page count from the root kids and their /Count entries."""
        total = 0
        for kid in self._root_kids() or []:
            try:
                node = self.get_dictionary(as_reference(kid))
                is_pages = node.get_type() == b"Pages"
            except PdfError:
                total += 1
                continue
            if not is_pages:
                total += 1
                continue
            try:
                count = as_int(node.get_deref(b"Count", self))
            except PdfError:
                count = 0
            total += max(0, count)
        return total