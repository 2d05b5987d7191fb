import xml.etree.ElementTree as ET
import base64
import binascii
import logging

from .osd import (
    OSD, OSDType, OSDBoolean, OSDInteger, OSDReal, OSDString,
    OSDBinary, OSDMap, OSDArray,
)

logger = logging.getLogger(__name__)

def _parse_xml_node(node: ET.Element) -> OSD:
    """Parses an individual XML element into an OSD object."""
    tag = node.tag.lower()

    if tag == 'map':
        osd_map = OSDMap()
        key_element = None
        for child in node:
            if child.tag.lower() == 'key':
                key_element = child.text.strip() if child.text else ""
            else:
                if key_element is None:
                    logger.warning("LLSD XML map parsing: value found before key. Skipping.")
                    continue
                osd_map[key_element] = _parse_xml_node(child)
                key_element = None
        return osd_map

    elif tag == 'array':
        osd_array = OSDArray()
        for child in node:
            osd_array.append(_parse_xml_node(child))
        return osd_array

    elif tag == 'undef':
        return OSD()

    text_content = node.text.strip() if node.text else ""

    if tag == 'boolean':
        return OSDBoolean(text_content == 'true' or text_content == '1')
    elif tag == 'string':
        return OSDString(text_content)

    try:
        if tag in ('integer', 'i4', 'i8'):
            return OSDInteger(int(text_content)) if text_content else OSDInteger(0)
        elif tag in ('real', 'double'):
            # float() accepts "inf", "-inf" and "nan", which vectors may carry
            return OSDReal(float(text_content)) if text_content else OSDReal(0.0)
        elif tag == 'binary':
            encoding = node.attrib.get('encoding', 'base64').lower()
            if encoding != 'base64':
                logger.warning(f"LLSD XML: Unsupported binary encoding '{encoding}'. Treating as empty.")
                return OSDBinary(b'')
            return OSDBinary(base64.b64decode(text_content, validate=True)) if text_content else OSDBinary(b'')
    except (ValueError, binascii.Error) as e:
        logger.warning(f"LLSD XML: Bad <{tag}> content '{text_content[:50]}': {e}. Treating as OSDType.UNKNOWN.")
        return OSD()

    logger.warning(f"LLSD XML: Unknown or unhandled tag type '{tag}'. Treating as OSDType.UNKNOWN.")
    return OSD()


def parse_llsd_xml(xml_data: str | bytes) -> OSD:
    """
    Parses an LLSD XML string or bytes into an OSD object hierarchy.

    Args:
        xml_data: The LLSD XML data as a string or bytes.

    Returns:
        An OSD object representing the root of the parsed data.
        Returns OSD(OSDType.UNKNOWN) if the document cannot be parsed.
    """
    if isinstance(xml_data, bytes):
        xml_data = xml_data.decode('utf-8', errors='replace')

    try:
        root = ET.fromstring(xml_data)
    except ET.ParseError as e:
        logger.error(f"LLSD XML parsing failed: {e}. XML data: '{xml_data[:200]}...'")
        return OSD()

    if root.tag.lower() != 'llsd':
        logger.warning(f"LLSD XML root tag is not <llsd>, found <{root.tag}>. Parsing it as a data node.")
        return _parse_xml_node(root)

    if len(root) == 0: # Empty <llsd />
        return OSD()
    if len(root) > 1:
        logger.warning("LLSD XML: <llsd> tag has multiple children. Parsing first child.")
    return _parse_xml_node(root[0])


_SIMPLE_TAGS = {
    OSDType.BOOLEAN: 'boolean',
    OSDType.INTEGER: 'integer',
    OSDType.REAL: 'real',
    OSDType.STRING: 'string',
    OSDType.BINARY: 'binary',
}

def _serialize_osd_to_xml_node(osd_data: OSD, parent_element: ET.Element) -> ET.Element:
    """Serializes an OSD object to an XML element appended to parent_element."""
    el: ET.Element

    if osd_data.osd_type == OSDType.MAP:
        el = ET.SubElement(parent_element, 'map')
        for key, value_osd in osd_data.items():
            key_el = ET.SubElement(el, 'key')
            key_el.text = str(key)
            _serialize_osd_to_xml_node(value_osd, el)

    elif osd_data.osd_type == OSDType.ARRAY:
        el = ET.SubElement(parent_element, 'array')
        for item_osd in osd_data:
            _serialize_osd_to_xml_node(item_osd, el)

    elif osd_data.osd_type in _SIMPLE_TAGS:
        el = ET.SubElement(parent_element, _SIMPLE_TAGS[osd_data.osd_type])
        el.text = osd_data.as_string() # Binary is base64 encoded by as_string()

    else:
        el = ET.SubElement(parent_element, 'undef')

    return el


def serialize_llsd_xml(osd_data: OSD, pretty_print: bool = False) -> str:
    """
    Serializes an OSD object hierarchy to an LLSD XML string.

    Args:
        osd_data: The root OSD object to serialize.
        pretty_print: If True, adds indentation and newlines for readability.

    Returns:
        An LLSD XML string representation of the OSD data.
    """
    llsd_root_el = ET.Element('llsd')
    _serialize_osd_to_xml_node(osd_data, llsd_root_el)

    if pretty_print:
        ET.indent(llsd_root_el)

    return ET.tostring(llsd_root_el, encoding='unicode')
