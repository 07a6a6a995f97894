"""
Signature parsing.

A signature string lists a function's parameters the way the scripting
language documentation writes them::

    clip c, int "x"=0, [float y], val ...

Each field becomes an ``Argument``; the whole list becomes a ``Signature``
that knows how to render itself as an editor snippet template.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from avscomplete.domain.exceptions import MalformedArgument
from avscomplete.logger import get_logger

logger = get_logger("signature")

RECEIVER_TYPE = "clip"

_FIELD = re.compile(
    r"""^\s*
    (?P<open>\[?)\s*
    (?P<body>\w+\s+\w+|\w+)\s*
    (?P<default>=.*?)?\s*
    (?P<variadic>\.{3})?\s*
    (?P<close>\]?)\s*$""",
    re.VERBOSE,
)
_SEPARATOR = re.compile(r"\s*,\s*")


@dataclass(frozen=True, slots=True)
class Argument:
    """A single parameter of a signature."""

    name: str
    type: str
    optional: bool = False
    variadic: bool = False

    def to_placeholder(self, index: int) -> str:
        return "${" + str(index) + ":" + self.name + "}"


def parse_argument(text: str) -> Argument:
    """
    Parse one signature field into an Argument.

    Args:
        text: A field such as ``"int x=0"``, ``"[clip c]"`` or ``"val ..."``

    Returns:
        The parsed Argument; ``type`` equals ``name`` for single-token fields

    Raises:
        MalformedArgument: If the field matches none of the accepted shapes
    """
    match = _FIELD.match(text)
    if match is None:
        raise MalformedArgument(text)

    words = match.group("body").split()
    if len(words) == 2:
        arg_type, name = words
    else:
        arg_type = name = words[0]

    return Argument(
        name=name,
        type=arg_type,
        optional=bool(match.group("open") or match.group("close")),
        variadic=match.group("variadic") is not None,
    )


@dataclass(frozen=True, slots=True)
class Signature:
    """
    Ordered parameters of a function plus the snippet templates derived from them.

    ``takes_receiver`` and both templates are computed once, at construction.
    """

    arguments: tuple[Argument, ...] = ()
    takes_receiver: bool = field(init=False)
    full_template: str = field(init=False)
    receiver_template: str | None = field(init=False)

    def __post_init__(self) -> None:
        takes_receiver = bool(self.arguments) and self.arguments[0].type == RECEIVER_TYPE
        object.__setattr__(self, "takes_receiver", takes_receiver)
        object.__setattr__(self, "full_template", _template(self.arguments))
        object.__setattr__(
            self,
            "receiver_template",
            _template(self.arguments[1:]) if takes_receiver else None,
        )

    def __len__(self) -> int:
        return len(self.arguments)

    def template_for(self, receiver: bool) -> str:
        """Receiver-stripped template when asked for and available, else the full one."""
        if receiver and self.receiver_template is not None:
            return self.receiver_template
        return self.full_template


def _template(arguments: Sequence[Argument]) -> str:
    # Placeholders are numbered from 1 in written order
    fields = [argument.to_placeholder(index) for index, argument in enumerate(arguments, start=1)]
    return "(" + ", ".join(fields) + ")"


def parse_signature(raw: str | Sequence[str]) -> Signature:
    """
    Parse a signature string into a Signature.

    When ``raw`` is a sequence of alternative signatures only the first one
    is modelled; the others are discarded.

    Args:
        raw: Signature string, or list of alternative signature strings

    Returns:
        Signature with arguments in written order (empty for a blank string)

    Raises:
        MalformedArgument: If any field fails to parse, or the signature is
            not a string or list of strings
    """
    if isinstance(raw, (list, tuple)):
        alternatives = list(raw)
        if len(alternatives) > 1:
            logger.debug("Ignoring {} alternative signature(s) after {!r}", len(alternatives) - 1, alternatives[0])
        raw = alternatives[0] if alternatives else ""
    if not isinstance(raw, str):
        raise MalformedArgument(repr(raw))

    if not raw.strip():
        return Signature()

    fields = _SEPARATOR.split(raw.strip())
    return Signature(tuple(parse_argument(text) for text in fields))
