"""Page level access: contents, resources, fonts, annotations and images."""

from dataclasses import dataclass

from .errors import PdfError, ReferenceCycleError
from .objects import (
    Dictionary,
    Name,
    Stream,
    as_array,
    as_dict,
    as_int,
    as_name,
    as_reference,
    as_stream,
    is_reference,
)

DEREF_LIMIT = 128


def _lossy(data):
    return bytes(data).decode("utf-8", errors="replace")


@dataclass
class PdfImage:
    """An image XObject found in a page's resources."""

    id: tuple
    width: int
    height: int
    color_space: object
    bits_per_component: object
    filters: list
    content: bytes
    origin_dict: Dictionary


class PagesMixin:
    """Page level queries for a document.

    Expects ``objects`` on the instance along with ``get_object``,
    ``get_dictionary``, ``get_dict_in_dict`` and ``add_object``.
    """

    def get_page_contents(self, page_id):
        """Return the object ids of the page's content streams."""
        try:
            page = self.get_dictionary(page_id)
        except PdfError:
            return []
        if not page.has(b"Contents"):
            return []
        contents = page.get(b"Contents")
        streams = []
        derefs = 0
        while True:
            if is_reference(contents):
                target = self.objects.get(contents)
                if target is None or isinstance(target, Stream):
                    streams.append(contents)
                else:
                    derefs += 1
                    if derefs < DEREF_LIMIT:
                        contents = target
                        continue
            elif isinstance(contents, list):
                streams.extend(item for item in contents if is_reference(item))
            break
        return streams

    def add_page_contents(self, page_id, content):
        """Append a new content stream to the page, keeping the existing ones."""
        page = self.get_dictionary(page_id)
        current = page.get(b"Contents") if page.has(b"Contents") else None
        if is_reference(current):
            content_list = [current]
        elif isinstance(current, list):
            content_list = list(current)
        else:
            content_list = []
        content_id = self.add_object(Stream(Dictionary(), bytes(content)))
        content_list.append(content_id)
        self.get_dictionary(page_id).set(b"Contents", content_list)

    def get_page_content(self, page_id):
        """Return the decoded bytes of all the page's content streams joined."""
        parts = []
        for object_id in self.get_page_contents(page_id):
            try:
                stream = as_stream(self.get_object(object_id))
            except PdfError:
                continue
            try:
                parts.append(stream.decompressed_content())
            except PdfError:
                parts.append(stream.content)
        return b"".join(parts)

    def get_page_resources(self, page_id):
        """Return the page's direct resource dictionary (or None) and the
        ids of resource dictionaries referenced by it and its ancestors."""
        try:
            page = self.get_dictionary(page_id)
        except PdfError:
            return None, []
        resource_dict = page.get(b"Resources") if page.has(b"Resources") else None
        if not isinstance(resource_dict, Dictionary):
            resource_dict = None

        resource_ids = []
        seen = set()
        node = page
        while True:
            if node.has(b"Resources") and is_reference(node.get(b"Resources")):
                resource_ids.append(node.get(b"Resources"))
            parent = node.get(b"Parent") if node.has(b"Parent") else None
            if not is_reference(parent):
                break
            if parent in seen:
                raise ReferenceCycleError(parent)
            seen.add(parent)
            node = self.get_dictionary(parent)
        return resource_dict, resource_ids

    def _collect_fonts(self, resources, fonts):
        if not resources.has(b"Font"):
            return
        font = resources.get(b"Font")
        if is_reference(font):
            try:
                font_dict = as_dict(self.get_object(font))
            except PdfError:
                return
        elif isinstance(font, Dictionary):
            font_dict = font
        else:
            return
        for name, value in font_dict.items():
            if name in fonts:
                continue
            if is_reference(value):
                try:
                    fonts[name] = self.get_dictionary(value)
                except PdfError:
                    pass
            elif isinstance(value, Dictionary):
                fonts[name] = value

    def get_page_fonts(self, page_id):
        """Map font resource names to font dictionaries, sorted by name.

        Fonts closer to the page win over inherited ones of the same name.
        """
        fonts = {}
        resource_dict, resource_ids = self.get_page_resources(page_id)
        if resource_dict is not None:
            self._collect_fonts(resource_dict, fonts)
        for resource_id in resource_ids:
            try:
                resources = self.get_dictionary(resource_id)
            except PdfError:
                continue
            self._collect_fonts(resources, fonts)
        return dict(sorted(fonts.items()))

    def _annotation_dicts(self, items):
        found = []
        for item in items:
            if not is_reference(item):
                continue
            try:
                found.append(self.get_dictionary(item))
            except PdfError:
                pass
        return found

    def get_page_annotations(self, page_id):
        """Return the annotation dictionaries listed in the page's /Annots."""
        try:
            page = self.get_dictionary(page_id)
        except PdfError:
            return []
        if not page.has(b"Annots"):
            return []
        annots = page.get(b"Annots")
        if is_reference(annots):
            return self._annotation_dicts(as_array(self.get_object(annots)))
        if isinstance(annots, list):
            return self._annotation_dicts(annots)
        return []

    def get_page_images(self, page_id):
        """Return the image XObjects in the page's resources."""
        try:
            page = self.get_dictionary(page_id)
        except PdfError:
            return []
        resources = self.get_dict_in_dict(page, b"Resources")
        xobjects = self.get_dict_in_dict(resources, b"XObject")
        images = []
        for value in xobjects.values():
            image_id = as_reference(value)
            stream = as_stream(self.get_object(image_id))
            info = stream.dict
            if as_name(info.get(b"Subtype")) != b"Image":
                continue
            width = as_int(info.get(b"Width"))
            height = as_int(info.get(b"Height"))

            color_space = None
            if info.has(b"ColorSpace"):
                space = info.get(b"ColorSpace")
                if isinstance(space, list):
                    color_space = _lossy(as_name(space[0]))
                elif isinstance(space, Name):
                    color_space = _lossy(space)

            bits = as_int(info.get(b"BitsPerComponent")) if info.has(b"BitsPerComponent") else None

            filters = []
            if info.has(b"Filter"):
                flt = info.get(b"Filter")
                if isinstance(flt, list):
                    filters = [_lossy(as_name(item)) for item in flt]
                elif isinstance(flt, Name):
                    filters = [_lossy(flt)]

            images.append(
                PdfImage(
                    id=image_id,
                    width=width,
                    height=height,
                    color_space=color_space,
                    bits_per_component=bits,
                    filters=filters,
                    content=stream.content,
                    origin_dict=info,
                )
            )
        return images