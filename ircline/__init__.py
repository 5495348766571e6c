"""Decoder for single IRC protocol lines.

    >>> msg = decode(b":nick!user@host PRIVMSG #channel :hello there\\r\\n")
    >>> msg.prefix, msg.command, msg.params
    (UserPrefix(nick='nick', user='user', host='host'), NamedCommand(name='PRIVMSG'), ('#channel', 'hello there'))

Splitting a socket stream into lines is left to the caller.
"""

import codecs
import logging

import ircline.parser
import pyparsing

from ircline.config import DEFAULT_CONFIG, load_config
from ircline.errors import DecodeError, IncompleteMessage, MalformedMessage
from ircline.message import Message, NamedCommand, NumericCommand, ServerPrefix, UserPrefix

__all__ = [
    "decode", "parse_message", "decode_prefix", "decode_command", "decode_params", "split_word",
    "Message", "ServerPrefix", "UserPrefix", "NamedCommand", "NumericCommand",
    "DecodeError", "IncompleteMessage", "MalformedMessage",
    "DEFAULT_CONFIG", "load_config",
]

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

def to_text(line, encoding=DEFAULT_CONFIG["encoding"], errors=DEFAULT_CONFIG["errors"]):
    if isinstance(line, str):
        return line
    line = bytes(line)
    try:
        return line.decode(encoding, errors)
    except UnicodeDecodeError as e:
        raise MalformedMessage("not valid %s" % encoding, e.start, line[e.start:e.end]) from e

def byte_offset(line, loc, encoding=DEFAULT_CONFIG["encoding"], errors=DEFAULT_CONFIG["errors"]):
    "Map index *loc* of the decoded text back onto the raw bytes *line*"
    decoder = codecs.getincrementaldecoder(encoding)(errors)
    decoded = 0
    for index in range(len(line)):
        if decoded >= loc:
            return index
        decoded += len(decoder.decode(line[index:index + 1]))
    return len(line)

def run(element, text, locate=None):
    try:
        return element.parse_string(text)
    except ircline.parser.InputExhausted as e:
        offset = locate(e.loc) if locate else e.loc
        raise IncompleteMessage(e.msg, offset, text[e.loc:]) from e
    except pyparsing.ParseBaseException as e:
        offset = locate(e.loc) if locate else e.loc
        raise MalformedMessage(e.msg, offset, text[e.loc:]) from e

def run_located(element, text):
    start, tokens, end = run(element, text)
    return tokens[0], text[end:]

def decode(line, encoding=DEFAULT_CONFIG["encoding"], errors=DEFAULT_CONFIG["errors"]):
    """Decode one ``\\r``-terminated line into a :class:`Message`.

    *line* may be ``str`` or any bytes-like object; bytes are decoded with
    *encoding* and the codec error policy *errors* first. Anything after
    the ``\\r`` is ignored.

    Raises :class:`IncompleteMessage` when the terminator is missing and
    :class:`MalformedMessage` when the line can never form a message.
    Error offsets index *line* itself, so they are byte offsets for
    bytes input.
    """
    locate = None
    if not isinstance(line, str):
        raw = bytes(line)
        locate = lambda loc: byte_offset(raw, loc, encoding, errors)
    try:
        message, = run(ircline.parser.message, to_text(line, encoding, errors), locate)
    except DecodeError as e:
        logger.debug("Parse error while parsing %r: %s", line, e)
        raise
    return message

def parse_message(text):
    "Decode an already decoded line of text"
    return decode(text)

def decode_prefix(text):
    """Decode the optional ``:prefix `` at the start of *text*.

    Returns ``(prefix, rest)``; *prefix* is ``None`` and *rest* is *text*
    unchanged when the line has no prefix.
    """
    return run_located(ircline.parser.located_prefix, text)

def decode_command(text):
    "Decode the command word at the start of *text*; returns ``(command, rest)``"
    return run_located(ircline.parser.located_command, text)

def decode_params(text):
    """Decode the parameters up to and including the ``\\r`` terminator.

    Returns ``(params, rest)`` with *rest* being whatever followed the
    terminator.
    """
    return run_located(ircline.parser.located_params, text)

def split_word(text):
    "Split *text* at its first space; returns ``(word, rest)``"
    return run_located(ircline.parser.located_word, text)
