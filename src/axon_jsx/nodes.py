from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias

# =============================================================================
# Base classes
# =============================================================================


@dataclass(slots=True, frozen=True)
class Span:
	"""Byte range [start, end) in the UTF-8 encoded source."""

	start: int
	end: int


class Node:
	"""Base class for all AST nodes."""

	__slots__: tuple[str, ...] = ()


@dataclass(slots=True)
class Expr(Node):
	"""Base class for expression nodes.

	Parsed nodes carry the span they were read from. For a parenthesised
	expression the span covers the parentheses too. Nodes synthesised by a
	rewrite have no span.
	"""

	span: Span | None = field(default=None, kw_only=True)


# =============================================================================
# Expression Nodes
# =============================================================================


@dataclass(slots=True)
class Call(Expr):
	"""JS function call: fn(args)"""

	callee: Expr
	arguments: Sequence[Expr] = ()


@dataclass(slots=True)
class TemplateLiteral(Expr):
	"""JS template literal: `hello ${name}`"""

	quasis: Sequence[str]
	expressions: Sequence[Expr]


@dataclass(slots=True)
class Conditional(Expr):
	"""JS ternary expression: test ? consequent : alternate"""

	test: Expr
	consequent: Expr
	alternate: Expr


@dataclass(slots=True)
class Logical(Expr):
	"""JS logical expression: a && b, a || b, a ?? b"""

	left: Expr
	operator: str
	right: Expr


@dataclass(slots=True)
class Binary(Expr):
	"""JS binary expression: x + y, a === b, k in obj"""

	left: Expr
	operator: str
	right: Expr


@dataclass(slots=True)
class Unary(Expr):
	"""JS unary expression: -x, !x, typeof x"""

	operator: str
	argument: Expr


@dataclass(slots=True)
class Member(Expr):
	"""JS member access: obj.prop or obj[key] (computed)"""

	object: Expr
	property: Expr
	computed: bool = False


@dataclass(slots=True)
class Array(Expr):
	"""JS array: [a, b, c]. Holes are stored as None."""

	elements: Sequence[Expr | None]


@dataclass(slots=True)
class Property(Node):
	"""Key/value entry of an object literal: { key: value } or { key }"""

	key: Expr
	value: Expr
	shorthand: bool = False
	computed: bool = False
	span: Span | None = field(default=None, kw_only=True)


@dataclass(slots=True)
class Object(Expr):
	"""JS object literal.

	Methods and spreads are kept as Opaque entries.
	"""

	properties: Sequence[Property | Opaque]


@dataclass(slots=True)
class ArrowFunction(Expr):
	"""JS arrow function: (x) => expr or (x) => { ... }"""

	params: Sequence[Expr]
	body: Expr
	is_async: bool = False


@dataclass(slots=True)
class Function(Expr):
	"""JS function expression: function name(params) { ... }

	Generators and async functions are function expressions too.
	"""

	name: str | None = None
	is_async: bool = False
	is_generator: bool = False


@dataclass(slots=True)
class Opaque(Expr):
	"""Any expression kind the analysis does not look inside.

	Identifiers, literals, `new`, sequences, assignments, optional chains,
	tagged templates, spreads, JSX values and TypeScript-only wrappers all end
	up here. `kind` is the grammar's name for the node.
	"""

	kind: str
	text: str = ""


# =============================================================================
# JSX Nodes
# =============================================================================


@dataclass(slots=True)
class JSXName(Node):
	"""Plain attribute name: class, data-id"""

	name: str


@dataclass(slots=True)
class JSXNamespacedName(Node):
	"""Namespaced attribute name: xlink:href"""

	namespace: str
	name: str


@dataclass(slots=True)
class StringLiteral(Node):
	"""Static attribute value: class="btn" """

	value: str
	span: Span | None = field(default=None, kw_only=True)


@dataclass(slots=True)
class JSXElementValue(Node):
	"""An element used directly as attribute value: icon=<Icon />"""

	text: str
	span: Span | None = field(default=None, kw_only=True)


@dataclass(slots=True)
class JSXEmptyExpression(Node):
	"""The empty slot in `{}` or `{/* comment */}`."""

	span: Span | None = field(default=None, kw_only=True)


@dataclass(slots=True)
class JSXExpressionContainer(Node):
	"""Attribute value holding an expression: prop={expr}"""

	expression: Expr | JSXEmptyExpression
	span: Span | None = field(default=None, kw_only=True)


@dataclass(slots=True)
class JSXAttribute(Node):
	"""A single JSX attribute: name, name="text", name={expr}"""

	name: JSXName | JSXNamespacedName
	value: AttributeValue | None = None
	span: Span | None = field(default=None, kw_only=True)


AttributeValue: TypeAlias = StringLiteral | JSXElementValue | JSXExpressionContainer


@dataclass(slots=True)
class Module(Node):
	"""A parsed source file.

	Only the attributes are lowered into nodes. Everything else in the file is
	kept as source bytes, and the generator copies it through unchanged.
	"""

	source: bytes
	attributes: list[JSXAttribute] = field(default_factory=list)
	source_name: str | None = None


# =============================================================================
# Traversal
# =============================================================================


def iter_attributes(module: Module) -> Iterator[JSXAttribute]:
	"""Yield every attribute in the module once, in source order."""
	yield from module.attributes


def walk_attributes(
	module: Module, visitor: Callable[[JSXAttribute], bool]
) -> bool:
	"""Call `visitor` once per attribute and fold the results with `or`.

	Every attribute is visited even after one returns True.
	"""
	changed = False
	for attr in iter_attributes(module):
		if visitor(attr):
			changed = True
	return changed


def attribute_name(attr: JSXAttribute) -> str:
	"""Canonical name of an attribute: `name` or `namespace:name`."""
	name = attr.name
	if isinstance(name, JSXNamespacedName):
		return f"{name.namespace}:{name.name}"
	return name.name


__all__ = [
	"Array",
	"ArrowFunction",
	"AttributeValue",
	"Binary",
	"Call",
	"Conditional",
	"Expr",
	"Function",
	"JSXAttribute",
	"JSXElementValue",
	"JSXEmptyExpression",
	"JSXExpressionContainer",
	"JSXName",
	"JSXNamespacedName",
	"Logical",
	"Member",
	"Module",
	"Node",
	"Object",
	"Opaque",
	"Property",
	"Span",
	"StringLiteral",
	"TemplateLiteral",
	"Unary",
	"attribute_name",
	"iter_attributes",
	"walk_attributes",
]
