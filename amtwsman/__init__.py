__version__ = '0.1'

from .document import parse, put_body, Collection, WSManDocument
from .envelopes import build_get, build_enumerate, build_pull, build_put, selector_set
from .exceptions import WSManException, UnknownNamespace, ParseError, UnsupportedValueType
from .xml import namespace_for, resource_uri, NS_PREFIXES
