from __future__ import annotations

import pyparsing
import pytest

from ircline import DecodeError, IncompleteMessage, MalformedMessage, decode


def test_error_kinds_share_a_base():
    assert issubclass(IncompleteMessage, DecodeError)
    assert issubclass(MalformedMessage, DecodeError)
    assert not issubclass(IncompleteMessage, MalformedMessage)


def test_description_only():
    error = MalformedMessage("no command word")
    assert str(error) == "no command word"
    assert error.offset is None
    assert error.fragment is None


def test_position_and_fragment():
    error = IncompleteMessage("line has no terminator", 4, " #a")
    assert str(error) == "Error at position 4: ' #a' (line has no terminator)"


def test_parser_exception_is_chained():
    with pytest.raises(IncompleteMessage) as excinfo:
        decode(b"PING")
    assert isinstance(excinfo.value.__cause__, pyparsing.ParseBaseException)
    assert excinfo.value.description == "line has no terminator"


def test_undecodable_bytes_chain_the_codec_error():
    with pytest.raises(MalformedMessage) as excinfo:
        decode(b"\xff\r", errors="strict")
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert excinfo.value.description == "not valid utf-8"
