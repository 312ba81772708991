from types import MappingProxyType

from lxml import builder

from .exceptions import UnknownNamespace

namespaces = {
    'a': 'http://www.w3.org/2003/05/soap-envelope',
    'b': 'http://schemas.xmlsoap.org/ws/2004/08/addressing',
    'c': 'http://schemas.dmtf.org/wbem/wsman/1/wsman.xsd',
    'n': 'http://schemas.xmlsoap.org/ws/2004/09/enumeration',
    't': 'http://schemas.xmlsoap.org/ws/2004/09/transfer',
}

# Resource URIs are the base URI with the class name appended.
NS_PREFIXES = MappingProxyType({
    'AMT': 'http://intel.com/wbem/wscim/1/amt-schema/1/',
    'CIM': 'http://schemas.dmtf.org/wbem/wscim/1/cim-schema/2/',
    'IPS': 'http://intel.com/wbem/wscim/1/ips-schema/1/',
})

WSMAN = builder.ElementMaker(namespace=namespaces['c'], nsmap={'c': namespaces['c']})

def namespace_for(class_name):
    """
    Returns the schema base URI for a class such as ``AMT_GeneralSettings``.

    Raises ``UnknownNamespace`` if the three-letter prefix isn't one of
    ``NS_PREFIXES``.
    """
    if len(class_name) < 3:
        raise ValueError("Class name too short for a namespace prefix: '{0}'".format(class_name))
    try:
        return NS_PREFIXES[class_name[:3]]
    except KeyError:
        raise UnknownNamespace(class_name)

def resource_uri(class_name):
    return namespace_for(class_name) + class_name

def class_element_maker(class_name):
    uri = resource_uri(class_name)
    return builder.ElementMaker(namespace=uri, nsmap={'r': uri})
