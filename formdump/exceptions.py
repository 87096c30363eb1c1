class FormdumpException(Exception):
    '''Base class to extend in order to throw exception in formdump.

    It takes an optional argument that represents the chain of the layer that
    caused the exception, innermost field first.
    '''

    def __init__(self, message='', chain=None):
        self.message = message
        self.chain = chain if chain is not None else []
        super().__init__(message)

    def __str__(self):
        if not self.chain:
            return self.message

        return '%s: %s' % ('.'.join(reversed(self.chain)), self.message)


class UnpackException(FormdumpException):
    '''The underlying stream could not give us what we asked for.'''
    pass


class OutOfBoundsException(UnpackException):
    pass


class MagicException(FormdumpException):
    pass


class UnknownChunkException(FormdumpException):
    '''The set of chunk kinds is closed: we don't guess what an unknown tag contains.'''

    def __init__(self, tag, chain=None):
        self.tag = tag
        super().__init__('unknown chunk %r' % tag, chain=chain)


class MalformedOffsetTableException(FormdumpException):
    pass
