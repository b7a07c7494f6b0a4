"""Query – ScrubbingPrinter.

Prints a GraphQL document the way :func:`graphql.print_ast` does, except that
arguments named in the deny-list have their value replaced by a placeholder.

Only the argument rule is overridden.  A :class:`graphql.language.Visitor`
swaps each denied ``ArgumentNode`` for a copy whose value is an
``EnumValueNode`` holding the placeholder text, which the default printer
emits verbatim; every other node kind keeps its default handler.  ``visit``
copies edited nodes, so the input document is left untouched.
"""
from __future__ import annotations

from typing import Any

from graphql import GraphQLSyntaxError, parse, print_ast
from graphql.language import (
    ArgumentNode,
    DocumentNode,
    EnumValueNode,
    ObjectFieldNode,
    Visitor,
    visit,
)

from logscrub.kernel.errors import QueryParseError
from logscrub.query.config import ScrubConfig


class _RedactArgumentsVisitor(Visitor):
    def __init__(self, config: ScrubConfig) -> None:
        super().__init__()
        self._config = config

    def _placeholder(self) -> EnumValueNode:
        return EnumValueNode(value=self._config.filtered_value)

    def enter_argument(self, node: ArgumentNode, *_args: Any) -> ArgumentNode | None:
        if not self._config.is_denied(node.name.value):
            return None
        return ArgumentNode(name=node.name, value=self._placeholder(), loc=node.loc)

    def enter_object_field(self, node: ObjectFieldNode, *_args: Any) -> ObjectFieldNode | None:
        if not self._config.redact_object_fields or not self._config.is_denied(node.name.value):
            return None
        return ObjectFieldNode(name=node.name, value=self._placeholder(), loc=node.loc)


class ScrubbingPrinter:
    """Print GraphQL documents with denied argument values replaced.

    Usage::

        printer = ScrubbingPrinter(ScrubConfig(filtered_args={"password"}))
        printer.print(parse('{ login(password: "hunter2") { id } }'))
        # '{\\n  login(password: [FILTERED]) {\\n    id\\n  }\\n}'
    """

    def __init__(self, config: ScrubConfig | None = None) -> None:
        self._config = config or ScrubConfig()

    @property
    def config(self) -> ScrubConfig:
        return self._config

    def print(self, document: DocumentNode) -> str:  # noqa: A003
        scrubbed = visit(document, _RedactArgumentsVisitor(self._config))
        return print_ast(scrubbed)

    def print_source(self, source: str) -> str:
        """Parse *source* and print it scrubbed.

        Raises
        ------
        QueryParseError
            When *source* is not a valid GraphQL document.
        """
        try:
            document = parse(source, no_location=True)
        except GraphQLSyntaxError as exc:
            line = column = None
            if exc.locations:
                line, column = exc.locations[0].line, exc.locations[0].column
            raise QueryParseError(line=line, column=column, cause=exc) from exc
        return self.print(document)


def scrub_document(document: DocumentNode, config: ScrubConfig | None = None) -> str:
    """Shortcut for ``ScrubbingPrinter(config).print(document)``."""
    return ScrubbingPrinter(config).print(document)


def scrub_query(source: str, config: ScrubConfig | None = None) -> str:
    """Parse *source* and return its scrubbed re-serialization."""
    return ScrubbingPrinter(config).print_source(source)


__all__ = ["ScrubbingPrinter", "scrub_document", "scrub_query"]
