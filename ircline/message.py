"""Decoded IRC line values and their textual renderings.

Everything here is immutable; a decoded line is built once by
:func:`ircline.decode` and then only read.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class ServerPrefix:
    "Sender given as a bare server name"
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class UserPrefix:
    "Sender given as a nick!user@host triple"
    nick: str
    user: str
    host: str

    def __str__(self):
        return "%s!%s@%s" % (self.nick, self.user, self.host)


Prefix = Union[ServerPrefix, UserPrefix]


@dataclass(frozen=True)
class NamedCommand:
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class NumericCommand:
    code: int

    def __str__(self):
        return str(self.code)


Command = Union[NamedCommand, NumericCommand]


@dataclass(frozen=True)
class Message:
    """One decoded protocol line.

    ``params`` keeps the positional order of the line. Only its last
    element can contain spaces, and only if the line carried a trailing
    ``:`` marker.

    Neither rendering below is meant to be sent back over the wire: the
    trailing marker is not restored, so a multi-word last parameter does
    not reparse to the same value.
    """
    prefix: Optional[Prefix]
    command: Command
    params: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "params", tuple(self.params))

    def __str__(self):
        text = ":%s " % self.prefix if self.prefix is not None else ""
        text += "%s " % self.command
        for param in self.params:
            text += param + " "
        return text

    def to_whitespace_separated(self):
        "Compact one-line form: command, prefix, then the params"
        prefix = str(self.prefix) if self.prefix is not None else ""
        return "%s %s %s" % (self.command, prefix, " ".join(self.params))
