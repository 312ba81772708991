from .auth import auth_opener
from .client import WSManClient
from .exceptions import UnexpectedResponse, UnknownNamespace
from .utils import coerce_text

class ExitCodes(object):
    MISSING_ACTION = 1
    MISSING_ARGUMENT = 2
    MISSING_CREDENTIALS = 3
    NO_SUCH_ACTION = 4
    INVALID_FIELD = 5
    NO_SUCH_CLASS = 6
    UNEXPECTED_RESPONSE = 7

def parse_fields(args):
    fields = {}
    for arg in args:
        name, sep, value = arg.partition('=')
        if not sep or not name:
            raise ValueError(arg)
        fields[name] = coerce_text(value)
    return fields

def main(argv=None):
    from optparse import OptionParser
    import json
    import logging
    import os
    import sys

    description = ["A utility to query and update Intel AMT and other CIM ",
                   "agents over WS-Management, returning JSON. Available ",
                   "actions are 'get' (returns an instance), 'enumerate' ",
                   "(returns all instances of a class) and 'put' (updates ",
                   "fields of an instance, given as name=value)"]

    parser = OptionParser(usage='%prog action class [name=value ...] [options]',
                          description=''.join(description))
    parser.add_option('-H', '--host', dest='host', help='Host name or address of the agent')
    parser.add_option('-P', '--port', dest='port', type='int', help='Port (default 16992, or 16993 with --tls)')
    parser.add_option('--tls', dest='tls', action='store_true', default=False, help='Connect over https')
    parser.add_option('-u', '--username', dest='username', default='admin', help='Username (default admin)')
    parser.add_option('-p', '--password', dest='password', help='Password')
    parser.add_option('-c', '--credentials', dest='credentials', help="File containing 'username:password'.")
    parser.add_option('--basic', dest='digest', action='store_false', default=True, help='Use basic instead of digest authentication')
    parser.add_option('--timeout', dest='timeout', default=None, type="float", help='Connection timeout (in seconds)')
    parser.add_option('-v', '--verbose', dest='verbose', action='store_true', default=False, help='Log requests and responses')

    options, args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if options.verbose else logging.WARNING)

    if not options.host:
        sys.stderr.write("--host is a required parameter. Use -h for more information.\n")
        return ExitCodes.MISSING_ARGUMENT

    if len(args) < 1:
        sys.stderr.write("You must provide an action. Use -h for more information.\n")
        return ExitCodes.MISSING_ACTION
    if len(args) < 2:
        sys.stderr.write("You must provide a class name. Use -h for more information.\n")
        return ExitCodes.MISSING_ARGUMENT
    action, class_name = args[0], args[1]

    if options.credentials:
        with open(os.path.expanduser(options.credentials)) as f:
            username, password = f.read().strip().split(':', 1)
    else:
        username, password = options.username, options.password

    if not password:
        from getpass import getpass
        password = getpass()
    if not password:
        sys.stderr.write("No password given.\n")
        return ExitCodes.MISSING_CREDENTIALS

    port = options.port or (16993 if options.tls else 16992)
    url = '{0}://{1}:{2}/wsman'.format('https' if options.tls else 'http', options.host, port)
    client = WSManClient(url, auth_opener(url, username, password, digest=options.digest),
                         timeout=options.timeout)

    if action not in ('get', 'enumerate', 'put'):
        sys.stderr.write("Unsupported action: '{0}'. Use -h to discover supported actions.\n".format(action))
        return ExitCodes.NO_SUCH_ACTION

    if action == 'put':
        try:
            fields = parse_fields(args[2:])
        except ValueError as e:
            sys.stderr.write("Fields must be given as name=value, not '{0}'\n".format(e))
            return ExitCodes.INVALID_FIELD
        if not fields:
            sys.stderr.write("You must provide fields to update. Use -h for more information.\n")
            return ExitCodes.MISSING_ARGUMENT

    try:
        if action == 'get':
            result = client.get(class_name).body
        elif action == 'enumerate':
            result = client.enumerate(class_name)
        else:
            result = client.update(class_name, **fields).body
    except UnknownNamespace as e:
        sys.stderr.write("{0}\n".format(e))
        return ExitCodes.NO_SUCH_CLASS
    except UnexpectedResponse as e:
        sys.stderr.write("{0}\n".format(e))
        return ExitCodes.UNEXPECTED_RESPONSE

    sys.stdout.write(json.dumps(result, indent=3) + '\n')
    return 0

if __name__ == '__main__':
    import sys
    sys.exit(main())
