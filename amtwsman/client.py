import logging
import uuid
from urllib.request import Request

from .document import parse, put_body, Collection
from .envelopes import (build_get, build_enumerate, build_pull, build_put,
                        selector_set)
from .exceptions import UnexpectedResponse, UnknownNamespace
from .utils import format_scalar
from .xml import resource_uri

log = logging.getLogger(__name__)

WSMAN_PATH = '/wsman'

def new_message_id():
    return 'uuid:{0}'.format(uuid.uuid4())


class WSManClient(object):
    """
    Talks to the /wsman endpoint of a management agent, e.g.
    ``WSManClient('http://nuc:16992', digest_auth_opener(...))``.
    """

    def __init__(self, url, opener, timeout=None):
        url = url.rstrip('/')
        if not url.endswith(WSMAN_PATH):
            url += WSMAN_PATH

        self.url = url
        self.opener = opener
        self.timeout = timeout
        self.message_id = new_message_id

    def __repr__(self):
        return "<WSManClient '{0}'>".format(self.url)

    def post(self, xml):
        log.debug("Sending message to %s: %s", self.url, xml)
        request = Request(self.url, xml.encode('utf-8'))
        request.add_header('Content-type', 'text/xml; charset=utf-8')
        response = self.opener.open(request, timeout=self.timeout)
        try:
            document = parse(response)
        finally:
            response.close()
        log.debug("Received response with body %r", document.body)
        return document

    def _send(self, xml, class_name):
        if not xml:
            raise UnknownNamespace(class_name)
        return self.post(xml)

    def get(self, class_name):
        return self._send(build_get(class_name, self.message_id()), class_name)

    def enumerate(self, class_name):
        """
        Returns every instance of ``class_name``, pulling until the agent
        signals the end of the sequence.

        The enumeration context is echoed back as its parsed value rendered
        as text, so a context that looks like an int or bool isn't sent back
        byte for byte (``007`` goes back as ``7``).
        """
        response = self._send(build_enumerate(class_name, self.message_id()), class_name)
        try:
            context = response.body['EnumerateResponse']['EnumerationContext']
        except (KeyError, TypeError):
            raise UnexpectedResponse('Enumerate', class_name, 'EnumerationContext')

        instances = []
        while True:
            xml = build_pull(class_name, self.message_id(), format_scalar(context))
            pull_response = self._send(xml, class_name).body.get('PullResponse')
            if not isinstance(pull_response, dict):
                break

            items = pull_response.get('Items')
            if isinstance(items, dict) and class_name in items:
                found = items[class_name]
                if isinstance(found, Collection):
                    instances.extend(found)
                else:
                    instances.append(found)

            if 'EndOfSequence' in pull_response:
                log.debug("End of sequence for %s after %d instances", class_name, len(instances))
                break
            context = pull_response.get('EnumerationContext', context)
        return instances

    def put(self, class_name, body, selectors=None):
        """
        Sends ``body[class_name]`` back to the agent. ``selectors`` is a
        dict of selector names to values identifying the instance.
        """
        resource_uri(class_name)
        fragment = put_body(class_name, body)
        if not fragment:
            raise ValueError("Nothing to put for '{0}'".format(class_name))
        xml = build_put(class_name, self.message_id(),
                        selector_set(**(selectors or {})),
                        fragment)
        return self._send(xml, class_name)

    def update(self, class_name, selectors=None, **fields):
        """
        Fetches the current instance, changes ``fields`` and puts it back.
        """
        document = self.get(class_name)
        instance = document.body.get(class_name)
        if not isinstance(instance, dict):
            raise UnexpectedResponse('Get', class_name, class_name + ' instance')
        instance.update(fields)
        return self.put(class_name, document.body, selectors)
