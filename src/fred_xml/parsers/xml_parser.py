"""
Low-level XML parsing for FRED responses.

Response shapes:
1. Single-record endpoints wrap the record in a plural root
   (<categories><category .../></categories>); a bare record root is
   accepted as well
2. List endpoints return a root whose immediate children are the records,
   in server order
3. release/tables mixes <element> children with housekeeping nodes, so
   list parsing takes an optional element-name filter
4. Record values live in attributes, in leaf child elements (release table
   elements) or in the node text (release dates, vintage dates)
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from lxml import etree
from pydantic import ValidationError

from fred_xml.errors import MalformedResponse
from fred_xml.models.records import XmlRecord


logger = logging.getLogger(__name__)

R = TypeVar('R', bound=XmlRecord)


def _make_parser() -> etree.XMLParser:
    # No entity expansion and no network access for server-supplied XML
    return etree.XMLParser(
        encoding='utf-8',
        resolve_entities=False,
        no_network=True,
        huge_tree=True,
        remove_comments=True,
        remove_pis=True
    )


def load_xml(payload: Union[str, bytes]) -> etree._Element:
    """
    Parse a raw response payload and return its root element.

    Args:
        payload: Response body as text or UTF-8 bytes

    Returns:
        Root lxml element

    Raises:
        MalformedResponse: If the payload is empty or not well-formed XML
    """
    if isinstance(payload, str):
        payload = payload.encode('utf-8')

    if not payload or not payload.strip():
        raise MalformedResponse("Response body is empty")

    try:
        return etree.fromstring(payload, _make_parser())
    except etree.XMLSyntaxError as e:
        raise MalformedResponse(f"Response is not well-formed XML: {e}") from e


def local_name(node: etree._Element) -> str:
    """Tag name without namespace."""
    return etree.QName(node).localname


def _is_element(node: Any) -> bool:
    # Comments and processing instructions have a non-string tag
    return isinstance(node.tag, str)


def _matches(node: etree._Element, name: str) -> bool:
    return local_name(node).lower() == name.lower()


def parse_children(container: etree._Element, model: Type[R]) -> List[R]:
    """Deserialize every child of container named like the model's xml_tag."""
    return [
        deserialize_element(child, model)
        for child in container
        if _is_element(child) and _matches(child, model.xml_tag)
    ]


def collect_values(node: etree._Element, model: Type[XmlRecord]) -> Dict[str, Any]:
    """
    Gather raw field values of one element.

    Sources, in order of precedence:
    - attributes
    - nested containers declared by model.nested_types() (parsed recursively)
    - text of leaf child elements (empty elements give None)
    - the node's own text, for models with xml_text_field
    """
    values: Dict[str, Any] = dict(node.attrib)
    nested = model.nested_types()

    for child in node:
        if not _is_element(child):
            continue
        name = local_name(child)
        if name in nested:
            values[name] = parse_children(child, nested[name])
        elif len(child) == 0 and name not in values:
            text = (child.text or '').strip()
            values[name] = text or None

    if model.xml_text_field:
        text = (node.text or '').strip()
        if text:
            values[model.xml_text_field] = text

    return values


def deserialize_element(node: etree._Element, model: Type[R]) -> R:
    """
    Map one XML element onto a record model.

    Args:
        node: The element to read
        model: Target record class

    Returns:
        Validated, frozen record

    Raises:
        MalformedResponse: If a required value is missing or invalid
        UnknownEnumValue: If an enum-valued field holds an unknown wire code
    """
    values = collect_values(node, model)
    try:
        return model.model_validate(values)
    except ValidationError as e:
        raise MalformedResponse(
            f"Invalid <{local_name(node)}> element for {model.__name__}: {e}"
        ) from e


def parse_single(payload: Union[str, bytes], model: Type[R]) -> R:
    """
    Deserialize a single-record response.

    The root is used when its name equals model.xml_tag; otherwise the first
    matching child of the root is used.

    Example:
        >>> parse_single('<category id="125" parent_id="13" name="Trade Balance"/>', Category)
        Category(id=125, parent_id=13, name='Trade Balance', notes=None)

    Raises:
        MalformedResponse: If no matching element exists or it is invalid
    """
    root = load_xml(payload)

    if _matches(root, model.xml_tag):
        return deserialize_element(root, model)

    for child in root:
        if _is_element(child) and _matches(child, model.xml_tag):
            return deserialize_element(child, model)

    raise MalformedResponse(
        f"No <{model.xml_tag}> element found in response root <{local_name(root)}>"
    )


def parse_list(
    payload: Union[str, bytes],
    model: Type[R],
    element_filter: Optional[str] = None
) -> List[R]:
    """
    Deserialize the immediate children of the root into records.

    Args:
        payload: Raw response XML
        model: Record class for every child
        element_filter: If set, children whose name does not equal it
                        (case-insensitive) are skipped

    Returns:
        Records in document order

    Raises:
        MalformedResponse: If the XML is invalid or any child fails to map
    """
    root = load_xml(payload)

    records = []
    for child in root:
        if not _is_element(child):
            continue
        if element_filter is not None and not _matches(child, element_filter):
            continue
        records.append(deserialize_element(child, model))

    logger.debug(
        f"Parsed {len(records)} {model.__name__} record(s) from <{local_name(root)}>"
    )
    return records
