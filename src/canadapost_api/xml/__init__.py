from canadapost_api.xml.xml_marshaller import XmlMarshaller, ATTRIBUTE, ITEM_TAG
from canadapost_api.xml.xml_trimmer import XmlTrimmer
from canadapost_api.xml.xml_utils import prettify_xml, to_xml_document
