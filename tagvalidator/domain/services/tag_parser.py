"""Annotation parser.

Turns a raw annotation string such as ``min=3,in='a,b,c',attr=alias`` into an
ordered ``DirectiveList``.

Grammar:
    annotation := directive ("," directive)*
    directive  := name "=" value
    name       := one or more characters other than ``'`` and ``=``
    value      := ``'`` text-with-commas ``'`` | text up to the next ``,``

Whitespace around names and values is stripped. Text that does not form a
directive is ignored.
"""

from __future__ import annotations

import logging
import re

from ..exceptions import UnknownTagError
from ..value_objects.directive import Directive, DirectiveList

_LOGGER = logging.getLogger(__name__)

TAG_PATTERN = re.compile(r"([^'=]+)=(?:'?)([^'=]*)(?:'?)(?:,|$)")


def parse_tags(raw: str) -> DirectiveList:
    """Parse an annotation string into directives.

    Args:
        raw: Annotation string (never the ``-`` skip marker)

    Returns:
        Directives in annotation order

    Raises:
        UnknownTagError: If a directive name is blank

    Example:
        >>> parse_tags("quoted='v,a,l,u,e',name1=val1")
        DirectiveList([Directive(name='quoted', param='v,a,l,u,e'), Directive(name='name1', param='val1')])
    """
    directives = []
    for match in TAG_PATTERN.finditer(raw):
        name = match.group(1).strip(" ")
        if not name:
            _LOGGER.debug("Blank directive name in annotation %r", raw)
            raise UnknownTagError()

        directives.append(Directive(name=name, param=match.group(2).strip(" ")))

    return DirectiveList(directives)


def format_tags(directives: DirectiveList) -> str:
    """Join directives back into an annotation string.

    Parameters containing a comma are single-quoted, so
    ``parse_tags(format_tags(d)) == d`` for any parsed list.
    """
    return str(directives)
