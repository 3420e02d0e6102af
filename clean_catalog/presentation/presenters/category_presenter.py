"""
Category Presenter

Serializes a CategoryResponse into JSON or XML. Serialization is pure: the
same presenter can render any number of formats from one response.
"""

import base64
import json
import re
import xml.etree.ElementTree as ET
from typing import Dict

from clean_catalog.application.dtos.category_dtos import CategoryResponse
from clean_catalog.domain.exceptions import UnsupportedFormatError

SUPPORTED_FORMATS: Dict[str, str] = {
    "json": "application/json",
    "xml": "application/xml",
}

# Characters outside the XML 1.0 Char production, not even as references.
_XML_ILLEGAL_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")

BASE64_ENCODING = "base64"


class CategoryPresenter:
    """Presenter for category use case output"""

    def __init__(
        self,
        response: CategoryResponse,
        xml_root_tag: str = "category",
        default_format: str = "json",
    ):
        self._response = response
        self._xml_root_tag = xml_root_tag
        self._default_format = default_format

    @property
    def response(self) -> CategoryResponse:
        return self._response

    @property
    def default_format(self) -> str:
        return self._default_format

    def to_json(self) -> bytes:
        """Render as a JSON object"""
        payload = {"id": self._response.id, "name": self._response.name}
        return json.dumps(payload).encode("utf-8")

    def to_xml(self) -> bytes:
        """
        Render as an XML document with ID and Name children

        Names holding characters XML 1.0 cannot carry are written as base64
        of their UTF-8 bytes, flagged with encoding="base64" on Name.
        """
        root = ET.Element(self._xml_root_tag)
        ET.SubElement(root, "ID").text = str(self._response.id)
        name_element = ET.SubElement(root, "Name")

        name = self._response.name
        if _XML_ILLEGAL_CHARS.search(name):
            name_element.set("encoding", BASE64_ENCODING)
            name_element.text = base64.b64encode(
                name.encode("utf-8", "surrogatepass")
            ).decode("ascii")
        else:
            name_element.text = name

        payload = ET.tostring(root, encoding="utf-8", xml_declaration=True)
        # ElementTree leaves CR raw in text; parsers would fold it into LF.
        return payload.replace(b"\r", b"&#13;")

    @staticmethod
    def from_xml(payload: bytes) -> CategoryResponse:
        """Read back a document produced by to_xml"""
        root = ET.fromstring(payload)
        name_element = root.find("Name")
        name = name_element.text or ""
        if name_element.get("encoding") == BASE64_ENCODING:
            name = base64.b64decode(name).decode("utf-8", "surrogatepass")
        return CategoryResponse(id=int(root.findtext("ID")), name=name)

    def render(self, fmt: str | None = None) -> bytes:
        """Render in the named format, or the presenter's default one"""
        fmt = (fmt or self._default_format).lower()
        if fmt == "json":
            return self.to_json()
        if fmt == "xml":
            return self.to_xml()
        raise UnsupportedFormatError(fmt)

    @staticmethod
    def content_type(fmt: str) -> str:
        """Media type for a supported format"""
        try:
            return SUPPORTED_FORMATS[(fmt or "").lower()]
        except KeyError as e:
            raise UnsupportedFormatError(fmt) from e

    def __repr__(self):
        return f"CategoryPresenter(response={self._response!r})"
