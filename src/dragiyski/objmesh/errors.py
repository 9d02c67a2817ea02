class WavefrontError(RuntimeError):
    """Base of every error raised while loading a mesh.

    The context fields are filled in as the error travels up: the token
    parsers know nothing about lines, the line loop attaches ``line`` and
    ``tokens``, and the loader attaches ``source``.
    """

    def __init__(self, message, *, source=None, line=None, tokens=None):
        super().__init__(message)
        self.message = message
        self.source = source
        self.line = line
        self.tokens = tokens

    def __str__(self):
        if self.source is not None and self.line is not None:
            return '[%s:%d]: %s' % (self.source, self.line, self.message)
        if self.line is not None:
            return '[%d]: %s' % (self.line, self.message)
        if self.source is not None:
            return '[%s]: %s' % (self.source, self.message)
        return self.message


class ParseError(WavefrontError):
    pass


class MalformedNumber(ParseError):
    def __init__(self, message, position, **kwargs):
        super().__init__(message, **kwargs)
        self.position = position


class MalformedVertex(ParseError):
    pass


class MalformedFace(ParseError):
    pass


class MalformedDirective(ParseError):
    pass


class NoActiveMaterial(ParseError):
    pass


class NoActiveSubMesh(ParseError):
    pass


class UnknownDirective(ParseError):
    pass


class ReadFailure(WavefrontError):
    def __init__(self, message, path, **kwargs):
        kwargs.setdefault('source', str(path))
        super().__init__(message, **kwargs)
        self.path = path
