"""Matching chat messages against command usage strings such as ``launch <version> <options>``."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Optional

_REGEX_CHARACTERS = ("\\", "(", ")", "{", "}", "[", "]", "?", ".", "+", "|", "^", "$")

_PARAMETER = re.compile(r"<\S+>")
_LAZY_PARAMETER = re.compile(r"<\S+\?>")

_SPACE_PATTERN = r"[\t\n\f\r ]+"
_INPUT_PATTERN = "(.+)"
_LAZY_INPUT_PATTERN = "(.+?)"
_PRE_COMMAND_PATTERN = "(^)"
_POST_COMMAND_PATTERN = r"([\t\n\f\r ]|\Z)"

FAILED_TO_EXECUTE = "Failed to execute the command!"

CommandHandler = Callable[[Any, Any, Any, "Properties"], str]


class TokenType(IntEnum):
    """Kind of a word in a command usage string."""

    NOT_PARAMETER = 0
    GREEDY_PARAMETER = 1
    LAZY_PARAMETER = 2


@dataclass(frozen=True)
class Token:
    """One word of a command usage string."""

    word: str
    type: TokenType = TokenType.NOT_PARAMETER

    def is_parameter(self) -> bool:
        return self.type != TokenType.NOT_PARAMETER


@dataclass
class Properties:
    """Parameters extracted from a matched message."""

    property_map: dict[str, str] = field(default_factory=dict)

    def string_param(self, key: str, default: str) -> str:
        """Return the value for ``key``, or ``default`` when it was not given."""
        return self.property_map.get(key, default)


@dataclass
class CommandDefinition:
    """Description, example and handler of a bot command."""

    description: str = ""
    example: str = ""
    handler: Optional[CommandHandler] = None


def _tokenize(format: str) -> list[Token]:
    tokens = []
    for word in format.split():
        if _LAZY_PARAMETER.search(word):
            tokens.append(Token(word[1:-2], TokenType.LAZY_PARAMETER))
        elif _PARAMETER.search(word):
            tokens.append(Token(word[1:-1], TokenType.GREEDY_PARAMETER))
        else:
            tokens.append(Token(word, TokenType.NOT_PARAMETER))
    return tokens


def _escape(text: str) -> str:
    for character in _REGEX_CHARACTERS:
        text = text.replace(character, "\\" + character)
    return text


def _input_pattern(token: Token) -> str:
    if token.type == TokenType.LAZY_PARAMETER:
        return _LAZY_INPUT_PATTERN
    if token.type == TokenType.GREEDY_PARAMETER:
        return _INPUT_PATTERN
    return _escape(token.word)


def _compile(tokens: list[Token]) -> Optional[re.Pattern[str]]:
    if not tokens:
        return None
    body = _SPACE_PATTERN.join(_input_pattern(token) for token in tokens)
    return re.compile(_PRE_COMMAND_PATTERN + body + _POST_COMMAND_PATTERN, re.IGNORECASE)


def _generate(tokens: list[Token]) -> list[re.Pattern[str]]:
    """Build expressions from the most to the least specific, dropping trailing parameters."""
    expressions = []
    for boundary in range(len(tokens) - 1, -2, -1):
        kept = [
            token
            for index, token in enumerate(tokens)
            if not token.is_parameter() or index <= boundary
        ]
        expression = _compile(kept)
        if expression is not None:
            expressions.append(expression)
    return expressions


class Command:
    """A parsed usage string that can match message text."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = list(tokens)
        self._expressions = _generate(self._tokens)

    def tokenize(self) -> list[Token]:
        return list(self._tokens)

    def match(self, text: str) -> Optional[Properties]:
        """Return the extracted parameters, or None if the text does not match."""
        parameters = [token for token in self._tokens if token.is_parameter()]
        for expression in self._expressions:
            found = expression.search(text)
            if found is None:
                continue
            values = found.groups()[1:-1]
            return Properties({token.word: value for token, value in zip(parameters, values)})
        return None


class BotCommand:
    """A command the bot understands, with its usage, definition and visibility."""

    def __init__(
        self,
        usage: str,
        definition: Optional[CommandDefinition] = None,
        is_private: bool = False,
    ) -> None:
        self.usage = usage
        self.definition = definition
        self.is_private = is_private
        self.command = new_command(usage)

    def match(self, text: str) -> Optional[Properties]:
        return self.command.match(text)

    def tokenize(self) -> list[Token]:
        return self.command.tokenize()

    def execute(self, client: Any, manager: Any, event: Any, properties: Properties) -> str:
        """Run the command's handler and return its reply."""
        if self.definition is None or self.definition.handler is None:
            return FAILED_TO_EXECUTE
        return self.definition.handler(client, manager, event, properties)

    def __repr__(self) -> str:
        return f"BotCommand({self.usage!r})"


def new_command(format: str) -> Command:
    """Parse a usage string into a Command."""
    return Command(_tokenize(format))


def new_bot_command(
    usage: str, definition: Optional[CommandDefinition], is_private: bool
) -> BotCommand:
    """Create a BotCommand for a usage string."""
    return BotCommand(usage, definition, is_private)