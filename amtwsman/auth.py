import base64

from urllib.request import (BaseHandler, HTTPDigestAuthHandler,
                            HTTPPasswordMgrWithDefaultRealm, build_opener)


class PreemptiveBasicAuthHandler(BaseHandler):
    """
    Sends basic credentials with every request. AMT only accepts basic auth
    over TLS, so pair this with an https:// URL.
    """

    def __init__(self, password_manager):
        self.password_manager = password_manager

    def http_request(self, request):
        url = request.get_full_url()
        username, password = self.password_manager.find_user_password(None, url)
        if password is None:
            return request

        raw = "%s:%s" % (username, password)
        auth = 'Basic %s' % base64.b64encode(raw.encode('utf-8')).decode('utf-8').strip()

        request.add_unredirected_header('Authorization', auth)
        return request
    https_request = http_request


def auth_opener(url, username, password, digest=True):
    password_manager = HTTPPasswordMgrWithDefaultRealm()
    password_manager.add_password(None, url, username, password)
    if digest:
        auth_handler = HTTPDigestAuthHandler(password_manager)
    else:
        auth_handler = PreemptiveBasicAuthHandler(password_manager)
    return build_opener(auth_handler)

def digest_auth_opener(url, username, password):
    return auth_opener(url, username, password, digest=True)
