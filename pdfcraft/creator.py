"""Creating and editing objects in a document."""

from .errors import PdfError
from .objects import Dictionary, Name, as_array, as_dict, as_reference, is_reference


def _coerce(obj):
    if isinstance(obj, str):
        return Name(obj)
    if isinstance(obj, bytearray):
        return bytes(obj)
    return obj


class CreatorMixin:
    """Object creation for a document.

    Expects ``version``, ``objects`` and ``max_id`` on the instance, along
    with ``get_object``, ``get_dictionary`` and ``get_pages``.
    """

    @classmethod
    def with_version(cls, version):
        """Create a new document that declares ``version``."""
        document = cls()
        document.version = str(version)
        return document

    def new_object_id(self):
        """Reserve and return a fresh object id."""
        self.max_id += 1
        return (self.max_id, 0)

    def add_object(self, obj):
        """Store ``obj`` under a fresh id and return that id."""
        object_id = self.new_object_id()
        self.objects[object_id] = _coerce(obj)
        return object_id

    def set_object(self, object_id, obj):
        """Store ``obj`` under ``object_id``, replacing what was there."""
        self.objects[tuple(object_id)] = _coerce(obj)

    def remove_object(self, object_id):
        """Remove an object; references to it elsewhere are left dangling."""
        self.objects.pop(tuple(object_id), None)

    def remove_annot(self, object_id):
        """Remove an annotation from every page's /Annots and then from the document."""
        object_id = tuple(object_id)
        for page_id in self.get_pages().values():
            page = as_dict(self.get_object(page_id))
            annots = as_array(page.get(b"Annots"))
            annots[:] = [item for item in annots if not (is_reference(item) and item == object_id)]
        self.remove_object(object_id)

    def get_or_create_resources(self, page_id):
        """Return the page's resources object, creating an empty dictionary if absent."""
        page = self.get_dictionary(page_id)
        if page.has(b"Resources"):
            resources = page.get(b"Resources")
            if is_reference(resources):
                return self.get_object(resources)
        else:
            page.set(b"Resources", Dictionary())
        return page.get(b"Resources")

    def add_xobject(self, page_id, name, xobject_id):
        """Register an XObject in the page's resources under ``name``."""
        try:
            resources = as_dict(self.get_or_create_resources(page_id))
        except PdfError:
            return
        if not resources.has(b"XObject"):
            resources.set(b"XObject", Dictionary())
        xobjects = resources.get(b"XObject")
        if is_reference(xobjects):
            xobjects = self.get_object(xobjects)
        as_dict(xobjects).set(name, as_reference(tuple(xobject_id)))

    def add_graphics_state(self, page_id, name, gs_id):
        """Register a graphics state in the page's resources under ``name``."""
        try:
            resources = as_dict(self.get_or_create_resources(page_id))
        except PdfError:
            return
        if not resources.has(b"ExtGState"):
            resources.set(b"ExtGState", Dictionary())
        states = as_dict(resources.get(b"ExtGState"))
        states.set(name, as_reference(tuple(gs_id)))