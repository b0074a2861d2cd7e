"""Named destinations."""

from .errors import PdfError
from .objects import Dictionary, as_array, as_dict, as_reference, as_str, is_reference


class Destination:
    """A named destination: a title, a target page and a fit type."""

    def __init__(self, title, page, typ):
        self.entries = Dictionary()
        self.entries.set(b"Title", title)
        self.entries.set(b"Page", page)
        self.entries.set(b"Type", typ)

    def set(self, key, value):
        self.entries.set(key, value)

    def title(self):
        return self.entries.get(b"Title")

    def page(self):
        return self.entries.get(b"Page")

    def __repr__(self):
        return f"Destination({self.entries!r})"


def _from_array(key, target):
    return Destination(key, target[0], target[1])


class DestinationMixin:
    """Named destination lookup for a document.

    Expects ``get_object`` and ``get_dictionary`` on the instance.
    """

    def get_named_destinations(self, tree):
        """Collect the destinations of a name tree, in order, keyed by name bytes."""
        found = {}
        self._collect_destinations(tree, found)
        return found

    def _collect_destinations(self, tree, found):
        if tree.has(b"Kids"):
            for kid in as_array(tree.get(b"Kids")):
                try:
                    kid_dict = self.get_dictionary(as_reference(kid))
                except PdfError:
                    continue
                self._collect_destinations(kid_dict, found)
        if not tree.has(b"Names"):
            return
        names = iter(as_array(tree.get(b"Names")))
        for key, value in zip(names, names):
            if is_reference(value):
                try:
                    target = self.get_dictionary(value)
                except PdfError:
                    try:
                        target = self.get_object(value)
                    except PdfError:
                        continue
                    if isinstance(target, list):
                        found[bytes(as_str(key))] = _from_array(key, target)
                    continue
                found[bytes(as_str(key))] = _from_array(key, as_array(target.get(b"D")))
            elif isinstance(value, Dictionary):
                found[bytes(as_str(key))] = _from_array(key, as_array(as_dict(value).get(b"D")))