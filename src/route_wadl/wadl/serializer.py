"""Serializes a WADL application to XML.

Elements are written in the WADL namespace (as the default namespace). Type
tags from that namespace are written unprefixed; tags from any other
namespace get a prefix declared on the root element, ``xs`` for XML Schema.
"""

import xml.etree.ElementTree as ET

from route_wadl.types.base import WADL_NAMESPACE, XSD_NAMESPACE, TypeTag
from route_wadl.wadl.document import Application, Method, Param, Representation

KNOWN_PREFIXES = {XSD_NAMESPACE: "xs"}


class _Writer:
    def __init__(self):
        self.prefixes: dict[str, str] = {}

    def type_ref(self, tag: TypeTag) -> str:
        if tag.namespace == WADL_NAMESPACE:
            return tag.local_name
        prefix = self.prefixes.get(tag.namespace)
        if prefix is None:
            prefix = KNOWN_PREFIXES.get(tag.namespace, f"ns{len(self.prefixes) + 1}")
            self.prefixes[tag.namespace] = prefix
        return f"{prefix}:{tag.local_name}"

    def application(self, application: Application) -> ET.Element:
        root = ET.Element("application", xmlns=WADL_NAMESPACE)
        ET.SubElement(root, "doc", title=application.title)

        resources = ET.SubElement(root, "resources", base=application.base)
        for resource in application.resources:
            el = ET.SubElement(resources, "resource", path=resource.path)
            for method in resource.methods:
                self.method(el, method)

        for namespace, prefix in self.prefixes.items():
            root.set(f"xmlns:{prefix}", namespace)
        return root

    def method(self, parent: ET.Element, method: Method) -> None:
        el = ET.SubElement(parent, "method", name=method.name, id=method.id)
        ET.SubElement(el, "doc", title=method.title)

        if method.request is not None:
            request = ET.SubElement(el, "request")
            for param in method.request.params:
                self.param(request, param)
            for representation in method.request.representations:
                self.representation(request, representation)

        for response in method.responses:
            response_el = ET.SubElement(el, "response")
            for representation in response.representations:
                self.representation(response_el, representation)

    def param(self, parent: ET.Element, param: Param) -> None:
        el = ET.SubElement(parent, "param", name=param.name, style=param.style)
        if param.type is not None:
            el.set("type", self.type_ref(param.type))
        el.set("required", "true" if param.required else "false")
        if param.default is not None:
            el.set("default", param.default)

    def representation(self, parent: ET.Element, representation: Representation) -> None:
        el = ET.SubElement(parent, "representation", mediaType=representation.media_type)
        if representation.element is not None:
            el.set("element", self.type_ref(representation.element))


def to_element(application: Application) -> ET.Element:
    return _Writer().application(application)


def to_xml(application: Application, pretty: bool = True) -> str:
    """Render ``application`` as a WADL XML document string."""
    root = to_element(application)
    if pretty:
        ET.indent(root)
    body = ET.tostring(root, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"
