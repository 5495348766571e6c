"""Errors raised by :func:`ircline.decode`.

The set is closed: a line either is missing its terminator
(:class:`IncompleteMessage`) or can never form a message
(:class:`MalformedMessage`).
"""


class DecodeError(Exception):
    """Base class for lines that could not be decoded.

    *offset* is the index into the decoded text where the failing
    component started and *fragment* the undecoded input from there on.
    """

    def __init__(self, description, offset=None, fragment=None):
        super().__init__(description, offset, fragment)
        self.description = description
        self.offset = offset
        self.fragment = fragment

    def __str__(self):
        if self.offset is None:
            return self.description
        return "Error at position %d: %r (%s)" % (self.offset, self.fragment, self.description)


class IncompleteMessage(DecodeError):
    "The input ended before the line terminator; more data may complete it"


class MalformedMessage(DecodeError):
    "The input cannot form a message no matter what follows it"
