import re

import numpy

from .errors import MalformedNumber, MalformedVertex

# Plain ASCII decimal literals; Python's own extras (digit separators, non-ASCII digits) are refused.
_float_pattern = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
_special_pattern = re.compile(r'[+-]?(?:inf|infinity|nan)', re.IGNORECASE)


def _parse_float(token: str):
    special = _special_pattern.fullmatch(token) is not None
    if not special and _float_pattern.fullmatch(token) is None:
        raise ValueError('invalid float literal: %r' % token)
    try:
        with numpy.errstate(over='raise'):
            value = numpy.float32(token)
    except FloatingPointError:
        raise ValueError('float literal out of range: %r' % token) from None
    if not special and not numpy.isfinite(value):
        raise ValueError('float literal out of range: %r' % token)
    return value


def parse_vec3(tokens):
    """Parse exactly three float tokens into a float32 vector."""
    if len(tokens) != 3:
        raise MalformedVertex('expected 3 coordinates, found %d: %r' % (len(tokens), list(tokens)))
    values = numpy.zeros(3, dtype=numpy.float32)
    for index, token in enumerate(tokens):
        try:
            values[index] = _parse_float(token)
        except ValueError:
            raise MalformedVertex('coordinate %d is not a number: %r' % (index, token)) from None
    return values


def parse_float_list(tokens):
    values = []
    for index, token in enumerate(tokens):
        try:
            values.append(_parse_float(token))
        except ValueError:
            raise MalformedNumber('element %d is not a number: %r' % (index, token), index) from None
    return values
