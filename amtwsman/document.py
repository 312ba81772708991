import collections
import warnings

from lxml import etree

from .exceptions import ParseError, UnknownNamespace, UnsupportedValueType
from .utils import coerce_text, format_scalar
from .xml import class_element_maker


class Collection(list):
    """
    The nodes of a tag that occurred more than once under the same parent,
    in document order.

    A tag that occurs only once is never wrapped in a Collection, so check
    the node type before indexing.
    """
    def __repr__(self):
        return 'Collection({0})'.format(list.__repr__(self))


class WSManDocument(object):
    def __init__(self, header, body):
        self.header, self.body = header, body

    def __getitem__(self, key):
        if key == 'Header':
            return self.header
        elif key == 'Body':
            return self.body
        raise KeyError(key)

    def __repr__(self):
        return '<WSManDocument {0}>'.format(list(self.body))

    def as_dict(self):
        return {'Header': self.header, 'Body': self.body}


def local_name(element):
    return etree.QName(element).localname

def has_children(element):
    return next(element.iterchildren(etree.Element), None) is not None

def parse_children(element):
    """
    Converts the child elements of ``element`` into a dict keyed by local
    name.

    Elements with children become nested dicts; leaves become ints, bools
    or strings (see ``coerce_text``). Tags that repeat are folded into a
    ``Collection``.
    """
    grouped = collections.OrderedDict()
    for child in element.iterchildren(etree.Element):
        if has_children(child):
            node = parse_children(child)
        else:
            node = coerce_text(child.text)
        grouped.setdefault(local_name(child), []).append(node)

    result = {}
    for tag, nodes in grouped.items():
        result[tag] = nodes[0] if len(nodes) == 1 else Collection(nodes)
    return result

def _find(root, name):
    for element in root.iter('{*}' + name):
        return element
    raise ParseError("No {0} element in envelope".format(name))

def parse(source):
    """
    Parses a SOAP envelope into a WSManDocument.

    ``source`` may be bytes, a string, or a binary file-like object such as
    an HTTP response.
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        if hasattr(source, 'read'):
            root = etree.parse(source, parser).getroot()
        else:
            if isinstance(source, str):
                source = source.encode('utf-8')
            root = etree.fromstring(source.strip(), parser)
    except etree.XMLSyntaxError as e:
        raise ParseError('Malformed XML: {0}'.format(e)) from e
    return WSManDocument(parse_children(_find(root, 'Header')),
                         parse_children(_find(root, 'Body')))

def put_body(class_name, body):
    """
    Renders ``body[class_name]`` as the body fragment of a Put request.

    Returns an empty string if there's nothing to serialize, or if the class
    has no known namespace. Values other than strings, ints, bools and None
    can't be rendered and are dropped with an ``UnsupportedValueType``
    warning.
    """
    if not body or class_name not in body:
        return ''
    try:
        R = class_element_maker(class_name)
    except UnknownNamespace:
        return ''
    instance = body[class_name]
    if not isinstance(instance, dict):
        warnings.warn("Expected a single {0} instance, not a {1}".format(class_name, type(instance).__name__),
                      UnsupportedValueType)
        return ''

    try:
        xml = R(class_name)
    except ValueError as e:
        warnings.warn("Can't serialize {0}: {1}".format(class_name, e), UnsupportedValueType)
        return ''
    for key, value in instance.items():
        if not (value is None or isinstance(value, (str, bool, int))):
            warnings.warn("Can't serialize {0}.{1} of type {2}".format(class_name, key, type(value).__name__),
                          UnsupportedValueType)
            continue
        # lxml rejects keys that aren't XML names and text with control characters.
        try:
            field = R(key) if value is None else R(key, format_scalar(value))
        except ValueError as e:
            warnings.warn("Can't serialize {0}.{1}: {2}".format(class_name, key, e), UnsupportedValueType)
            continue
        xml.append(field)
    return etree.tostring(xml, encoding='unicode')
