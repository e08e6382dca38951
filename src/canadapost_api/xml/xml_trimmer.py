import re
from xml.etree import ElementTree


class XmlTrimmer:

    @staticmethod
    def remove_namespaces(element: ElementTree.Element):
        element.tag = XmlTrimmer.remove_namespace(element.tag)
        for child in element:
            XmlTrimmer.remove_namespaces(child)

    @staticmethod
    def remove_namespace(string):
        return re.sub(r'{.*}', '', string)
