import re

import pyparsing

from ircline.message import Message, NamedCommand, NumericCommand, ServerPrefix, UserPrefix

pyparsing.ParserElement.enable_packrat()

numeric = re.compile(r"[0-9]+")

class InputExhausted(pyparsing.ParseFatalException):
    "The input ran out before a required delimiter"

#
# Fail actions
#
def exhausted(reason):
    def fail(s, loc, expr, err):
        raise InputExhausted(s, loc, reason)
    return fail

def malformed(reason):
    def fail(s, loc, expr, err):
        raise pyparsing.ParseFatalException(s, loc, reason)
    return fail

#
# Parse actions
#
def ignore(s, loc, toks):
    "Ignore tokens"
    return []

def to_prefix(s, loc, toks):
    "Classify the prefix word; anything that is not a full nick!user@host is a server"
    word = toks[0]
    try:
        nick, user, hostname = user_prefix.parse_string(word, parse_all=True)
    except pyparsing.ParseException:
        return [ServerPrefix(word)]
    return [UserPrefix(nick, user, hostname)]

def to_command(s, loc, toks):
    word = toks[0]
    # An empty word only counts when a space delimits it.
    if not word and not s.startswith(" ", loc):
        raise pyparsing.ParseFatalException(s, loc, "no command word")
    if numeric.fullmatch(word):
        return [NumericCommand(int(word))]
    return [NamedCommand(word)]

def split_params(s, loc, toks):
    middle, marker, trailing = toks[0].partition(":")
    params = middle.split()
    if marker:
        params.append(trailing)
    return [tuple(params)]

#
# Rules
#
ignored_literal = lambda lit: pyparsing.Literal(lit).add_parse_action(ignore)
ignored_colon = ignored_literal(":")
take_until = lambda delim: pyparsing.SkipTo(pyparsing.Literal(delim))
take_until_and_consume = lambda delim: pyparsing.SkipTo(ignored_literal(delim), include=True)

word = take_until_and_consume(" ").set_fail_action(exhausted("no space after word"))

host = pyparsing.Regex(r"[^ ]*")
user_prefix = take_until("!") + ignored_literal("!") + take_until("@") + ignored_literal("@") + host

prefix_word = take_until_and_consume(" ").set_fail_action(malformed("prefix is not followed by a space"))
prefix = (ignored_colon + prefix_word).add_parse_action(to_prefix)

# Up to the next space; without one, up to the trailing marker or the terminator.
command = pyparsing.Regex(r"[^ \r]*(?= )|[^ \r:]*").add_parse_action(to_command)

params = take_until_and_consume("\r").set_fail_action(exhausted("line has no terminator"))
params.add_parse_action(split_params)

message = pyparsing.Opt(prefix, None) + command + params
message.add_parse_action(lambda toks: [Message(*toks)])

# Component entry points that also report where they stopped.
located_word = pyparsing.Located(word)
located_prefix = pyparsing.Located(pyparsing.Opt(prefix, None))
located_command = pyparsing.Located(command)
located_params = pyparsing.Located(params)

for name, local in list(locals().items()):
    if isinstance(local, pyparsing.ParserElement):
        local.leave_whitespace()
        local.parse_with_tabs()
        local.set_name(name)
