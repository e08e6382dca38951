from xml.etree import ElementTree
from xml.dom import minidom
from xml.dom.minidom import Node

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def remove_blanks_xml(node):
    """ Remove blank text nodes """

    for child_node in node.childNodes:
        if child_node.nodeType == Node.TEXT_NODE:
            if child_node.nodeValue:
                child_node.nodeValue = child_node.nodeValue.strip()
        elif child_node.nodeType == Node.ELEMENT_NODE:
            remove_blanks_xml(child_node)


def prettify_xml(document: str):
    """ Prettify an XML document for log output """

    reparsed = minidom.parseString(document.encode('utf-8'))
    remove_blanks_xml(reparsed)
    reparsed.normalize()
    return reparsed.toprettyxml(indent="    ")


def to_xml_document(elem: ElementTree.Element) -> str:
    """ Serialize an element as a standalone document with a UTF-8 declaration """

    return XML_DECLARATION + ElementTree.tostring(elem, encoding='unicode')
