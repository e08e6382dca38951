import copy
from datetime import date
from decimal import Decimal
from typing import Type, Union, TypeVar, Any, List, Optional
from dataclasses import fields, dataclass, is_dataclass, Field
from xml.etree import ElementTree

from dateutil import parser

dc_type = TypeVar('DataClass')

ITEM_TAG = 'item_tag'
ATTRIBUTE = 'attribute'


class XmlMarshaller:
    """
    Maps kebab-case carrier XML documents onto frozen dataclasses with
    snake_case fields, and back.

    List fields whose items are enclosed in a wrapper element carry the item
    tag in their field metadata (``ITEM_TAG``), every other list is read from
    repeated sibling elements named after the field. Fields carrying
    ``ATTRIBUTE`` metadata are read from that XML attribute of the element.
    """

    def xml_to_dataclass(self, xml_element: ElementTree.Element, data_class: dc_type) -> dc_type:
        element_copy = copy.deepcopy(xml_element)
        self._map_element_casing(element_copy)
        return self._build_dataclass(element_copy, data_class)

    def dataclass_to_xml(self, instance: Any, tag: str, namespace: str = None) -> ElementTree.Element:
        root = ElementTree.Element(tag)
        if namespace:
            root.set('xmlns', namespace)
        self._fill_element(root, instance)
        return root

    def _map_element_casing(self, xml_element: ElementTree.Element):
        xml_element.tag = '_'.join(self._split_to_tokens(xml_element.tag))
        for child in xml_element:
            self._map_element_casing(child)

    @staticmethod
    def _split_to_tokens(tag: str) -> List[str]:
        return tag.split('-')

    @staticmethod
    def _to_source_tag(field_name: str) -> str:
        return field_name.replace('_', '-')

    def _build_dataclass(
            self,
            xml_element: Optional[ElementTree.Element],
            data_class: dataclass,
            outer_type: Type = None) -> dataclass:
        if xml_element is None or (len(xml_element) == 0 and not is_dataclass(data_class)):
            if outer_type is None:
                outer_type = data_class
            return self._create_from_leaf_element(xml_element, outer_type)

        dataclass_params = {}

        for field in fields(data_class):
            if ATTRIBUTE in field.metadata:
                dataclass_params[field.name] = self._convert_text(
                    xml_element.get(field.metadata[ATTRIBUTE]), field.type)
                continue
            elements = xml_element.findall(field.name)
            if self._is_list_type(field.type):
                if ITEM_TAG in field.metadata and elements:
                    parent = next(el for el in elements)
                    elements = (el for el in parent)
                inner_type = self._get_inner_type(field.type)
                dataclass_params[field.name] = [self._build_dataclass(el, inner_type, inner_type)
                                                for el in elements]
            elif self._is_optional_type(field.type):
                inner_type = self._get_inner_type(field.type)
                child = elements[0] if elements else None
                if child is not None and is_dataclass(inner_type):
                    dataclass_params[field.name] = self._build_dataclass(child, inner_type)
                else:
                    dataclass_params[field.name] = self._build_dataclass(child, inner_type, field.type)
            elif not elements:
                dataclass_params[field.name] = None
            else:
                dataclass_params[field.name] = self._build_dataclass(
                    elements[0], field.type, field.type)

        return data_class(**dataclass_params)

    def _create_from_leaf_element(
            self,
            xml_element: Optional[ElementTree.Element],
            field_type: Any) -> Any:
        if xml_element is None or is_dataclass(field_type):
            return None
        return self._convert_text(xml_element.text, field_type)

    def _convert_text(self, text: Optional[str], field_type: Any) -> Any:
        if text is None:
            return None
        if self._is_optional_type(field_type):
            field_type = self._get_inner_type(field_type)
        text = text.strip()
        if field_type == bool:
            return text.lower() in ['true', '1']
        elif field_type == date:
            return parser.parse(text).date()
        else:
            return field_type(text)

    def _fill_element(self, element: ElementTree.Element, instance: Any):
        for field in fields(instance):
            value = getattr(instance, field.name)
            if value is None:
                continue
            if ATTRIBUTE in field.metadata:
                element.set(field.metadata[ATTRIBUTE], self._to_text(value))
                continue
            tag = self._to_source_tag(field.name)
            if self._is_list_type(field.type):
                if not value:
                    continue
                if ITEM_TAG in field.metadata:
                    parent = ElementTree.SubElement(element, tag)
                    item_tag = self._to_source_tag(field.metadata[ITEM_TAG])
                    for item in value:
                        self._append_value(parent, item_tag, item)
                else:
                    for item in value:
                        self._append_value(element, tag, item)
            else:
                self._append_value(element, tag, value)

    def _append_value(self, parent: ElementTree.Element, tag: str, value: Any):
        child = ElementTree.SubElement(parent, tag)
        if is_dataclass(value):
            self._fill_element(child, value)
        else:
            child.text = self._to_text(value)

    @staticmethod
    def _to_text(value: Any) -> str:
        if isinstance(value, bool):
            return 'true' if value else 'false'
        elif isinstance(value, date):
            return value.isoformat()
        elif isinstance(value, Decimal):
            return format(value, 'f')
        return str(value)

    def _get_inner_type(self, field_type) -> Type:
        return field_type.__args__[0]

    def _is_list_type(self, type_: Type) -> bool:
        try:
            return type_.__origin__ == list
        except AttributeError:
            return False

    def _is_optional_type(self, type_: Type) -> bool:
        return self._is_union(type_) and type(None) in type_.__args__

    def _is_union(self, type_: Type) -> bool:
        return self._is_generic(type_) and type_.__origin__ == Union

    def _is_generic(self, type_: Type) -> bool:
        return hasattr(type_, '__origin__')
