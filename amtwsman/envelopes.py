"""
Request envelopes for the four WS-Management operations we support.

The class name, message ID and enumeration context are substituted into
the templates as-is, without escaping. Only pass well-formed identifiers,
message IDs from a UUID source, and contexts taken from a previous
response.
"""

from lxml import etree

from .exceptions import UnknownNamespace
from .utils import format_scalar
from .xml import WSMAN, namespaces, resource_uri

ACTIONS = {
    'get': namespaces['t'] + '/Get',
    'put': namespaces['t'] + '/Put',
    'enumerate': namespaces['n'] + '/Enumerate',
    'pull': namespaces['n'] + '/Pull',
}

ANONYMOUS = 'http://schemas.xmlsoap.org/ws/2004/08/addressing/role/anonymous'

# Upper bound on the items the agent may return in one PullResponse.
MAX_ELEMENTS = 999

ENVELOPE_TEMPLATE = """<?xml version="1.0" encoding="UTF-8" ?>
<a:Envelope xmlns:a="http://www.w3.org/2003/05/soap-envelope"
	xmlns:b="http://schemas.xmlsoap.org/ws/2004/08/addressing"
	xmlns:c="http://schemas.dmtf.org/wbem/wsman/1/wsman.xsd">
	<a:Header>
		<b:Action mustUnderstand="true">{action}</b:Action>
		<b:To>/wsman</b:To>
		<c:ResourceURI>{resource_uri}</c:ResourceURI>
		<b:MessageID>{message_id}</b:MessageID>
		<b:ReplyTo><b:Address>""" + ANONYMOUS + """</b:Address></b:ReplyTo>
		<c:OperationTimeout>PT60S</c:OperationTimeout>{header}
	</a:Header>
	{body}
</a:Envelope>
"""

ENUMERATE_BODY = """<a:Body>
		<Enumerate xmlns="http://schemas.xmlsoap.org/ws/2004/09/enumeration" />
	</a:Body>"""

PULL_BODY = """<a:Body>
		<Pull xmlns="http://schemas.xmlsoap.org/ws/2004/09/enumeration">
			<EnumerationContext>{context}</EnumerationContext>
			<MaxElements>""" + str(MAX_ELEMENTS) + """</MaxElements>
		</Pull>
	</a:Body>"""

PUT_BODY = """<a:Body>
{fragment}
	</a:Body>"""


def _envelope(action, class_name, message_id, header='', body='<a:Body/>'):
    try:
        uri = resource_uri(class_name)
    except UnknownNamespace:
        return ''
    if header:
        header = '\n\t\t' + header
    return ENVELOPE_TEMPLATE.format(action=ACTIONS[action],
                                    resource_uri=uri,
                                    message_id=message_id,
                                    header=header,
                                    body=body)

def build_get(class_name, message_id):
    return _envelope('get', class_name, message_id)

def build_enumerate(class_name, message_id):
    return _envelope('enumerate', class_name, message_id, body=ENUMERATE_BODY)

def build_pull(class_name, message_id, enumeration_context):
    """
    Builds a Pull request continuing the enumeration identified by
    ``enumeration_context``, as returned by Enumerate or the previous Pull.
    """
    return _envelope('pull', class_name, message_id,
                     body=PULL_BODY.format(context=enumeration_context))

def build_put(class_name, message_id, selectors='', body=''):
    """
    Builds a Put request.

    ``selectors`` goes into the header verbatim (see ``selector_set``) and
    ``body`` into the SOAP body verbatim (see ``document.put_body``).
    """
    return _envelope('put', class_name, message_id, header=selectors,
                     body=PUT_BODY.format(fragment=body))

def selector_set(**selectors):
    """
    Renders a SelectorSet identifying the instance a Put should update, e.g.
    ``selector_set(InstanceID='Intel(r) AMT: General Settings')``.
    """
    if not selectors:
        return ''
    xml = WSMAN.SelectorSet(*(WSMAN.Selector(format_scalar(value), Name=name)
                              for name, value in selectors.items()))
    return etree.tostring(xml, encoding='unicode')
