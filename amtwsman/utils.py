import re

INT64_MIN, INT64_MAX = -2 ** 63, 2 ** 63 - 1

integer_re = re.compile(r'^[+-]?[0-9]+\Z')

# '1' and '0' never get this far; they're integers.
boolean_literals = {'1': True, 't': True, 'T': True, 'TRUE': True, 'true': True, 'True': True,
                    '0': False, 'f': False, 'F': False, 'FALSE': False, 'false': False, 'False': False}

##
# Infers the scalar type of an element's text content.
#
# @param text The text of a leaf element, or None if it had none.
# @return An int if the text is a base-10 int64, a bool if it is a boolean
#         literal, and otherwise the text itself.

def coerce_text(text):
    if text is None:
        return ''
    if integer_re.match(text):
        value = int(text)
        if INT64_MIN <= value <= INT64_MAX:
            return value
    try:
        return boolean_literals[text]
    except KeyError:
        return text

def format_scalar(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return '{0}'.format(value)
