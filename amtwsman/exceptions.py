class WSManException(Exception):
    pass

class UnknownNamespace(WSManException, KeyError):
    def __init__(self, class_name):
        super(UnknownNamespace, self).__init__(class_name)
        self.class_name = class_name

    def __str__(self):
        return "No namespace for class '{0}' (prefix '{1}')".format(
            self.class_name,
            self.class_name[:3])

class ParseError(WSManException, ValueError):
    pass

class UnexpectedResponse(WSManException):
    def __init__(self, action, class_name, missing):
        self.action, self.class_name = action, class_name
        self.missing = missing

    def __str__(self):
        return '{0} of {1} returned no {2}'.format(
            self.action,
            self.class_name,
            self.missing)

class UnsupportedValueType(UserWarning):
    pass
