import io
import os

import pytest

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')

ENVELOPE = '''<?xml version="1.0" encoding="UTF-8"?>
<a:Envelope xmlns:a="http://www.w3.org/2003/05/soap-envelope"
    xmlns:b="http://schemas.xmlsoap.org/ws/2004/08/addressing"
    xmlns:g="http://schemas.xmlsoap.org/ws/2004/09/enumeration"
    xmlns:h="http://schemas.dmtf.org/wbem/wscim/1/cim-schema/2/CIM_SoftwareIdentity">
    <a:Header>
        <b:Action a:mustUnderstand="true">%(action)s</b:Action>
        <b:RelatesTo>uuid:00000000-0000-0000-0000-000000000000</b:RelatesTo>
    </a:Header>
    <a:Body>%(body)s</a:Body>
</a:Envelope>'''

def envelope(body, action='http://schemas.xmlsoap.org/ws/2004/09/transfer/GetResponse'):
    return ENVELOPE % {'action': action, 'body': body}


@pytest.fixture
def gensettings():
    with open(os.path.join(DATA_DIR, 'gensettings.xml'), 'rb') as f:
        return f.read()


class FakeResponse(io.BytesIO):
    pass


class FakeOpener(object):
    """
    Stands in for a urllib opener, replaying canned responses in order and
    recording the requests it was given.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []
        self.timeouts = []

    def open(self, request, timeout=None):
        self.requests.append(request)
        self.timeouts.append(timeout)
        response = self.responses.pop(0)
        if isinstance(response, str):
            response = response.encode('utf-8')
        return FakeResponse(response)

    @property
    def sent(self):
        return [request.data.decode('utf-8') for request in self.requests]
