"""
TSX source -> axon_jsx node model.

Parsing is done by tree-sitter with the TSX grammar. Only JSX attributes are
lowered into nodes; the rest of the file is never touched and stays as bytes
on the Module.
"""

from __future__ import annotations

from collections.abc import Iterator

import tree_sitter_typescript as ts_typescript
from tree_sitter import Language, Node as TSNode, Parser

from axon_jsx.errors import ParseError, UnexpectedNodeError
from axon_jsx.nodes import (
	Array,
	ArrowFunction,
	AttributeValue,
	Binary,
	Call,
	Conditional,
	Expr,
	Function,
	JSXAttribute,
	JSXElementValue,
	JSXExpressionContainer,
	JSXName,
	JSXNamespacedName,
	Logical,
	Member,
	Module,
	Object,
	Opaque,
	Property,
	Span,
	StringLiteral,
	TemplateLiteral,
	Unary,
)

TSX: Language = Language(ts_typescript.language_tsx())

LOGICAL_OPERATORS = frozenset({"&&", "||", "??"})

# Grammar names of plain function expressions across grammar versions
FUNCTION_KINDS = frozenset({"function_expression", "function", "generator_function"})

JSX_ELEMENT_KINDS = frozenset(
	{"jsx_element", "jsx_self_closing_element", "jsx_fragment"}
)

# Links of a call/member chain and the field holding the next link
_CHAIN_FIELDS: dict[str, str] = {
	"call_expression": "function",
	"member_expression": "object",
	"subscript_expression": "object",
}


def parse(source: str | bytes, source_name: str | None = None) -> Module:
	"""Parse TSX source into a Module.

	Raises ParseError when the source contains any syntax error.
	"""
	data = source.encode("utf-8") if isinstance(source, str) else source
	# Parsers hold per-parse state; one per call keeps invocations independent
	parser = Parser(TSX)
	tree = parser.parse(data)
	root = tree.root_node
	if root.has_error:
		raise _parse_error(root)
	return Module(
		source=data,
		attributes=[_lower_attribute(n, data) for n in _find_attributes(root)],
		source_name=source_name,
	)


def parse_expression(source: str) -> Expr:
	"""Parse a single expression, e.g. for inspection or tests."""
	# Wrapped in parens so object literals are not read as blocks
	wrapped = b"(" + source.encode("utf-8") + b"\n)"
	parser = Parser(TSX)
	root = parser.parse(wrapped).root_node
	if root.has_error:
		raise _parse_error(root)
	stmt = _named(root)[0]
	parens = _named(stmt)[0]
	expr = _lower_expression(_named(parens)[0], wrapped)
	# Shift spans back so they index into the caller's source
	_shift_spans(expr, -1)
	return expr


# =============================================================================
# Tree walking
# =============================================================================


def _find_attributes(root: TSNode) -> Iterator[TSNode]:
	"""Every jsx_attribute in the tree, in source order."""
	stack = [root]
	while stack:
		node = stack.pop()
		if node.type == "jsx_attribute":
			yield node
		stack.extend(reversed(node.children))


def _named(node: TSNode) -> list[TSNode]:
	"""Named children without comments."""
	return [c for c in node.named_children if c.type != "comment"]


def _text(node: TSNode, source: bytes) -> str:
	return source[node.start_byte : node.end_byte].decode("utf-8")


def _span(node: TSNode) -> Span:
	return Span(node.start_byte, node.end_byte)


def _parse_error(root: TSNode) -> ParseError:
	stack = [root]
	while stack:
		node = stack.pop()
		if node.is_missing:
			line, column = node.start_point
			return ParseError(line + 1, column, "MISSING")
		if node.type == "ERROR":
			line, column = node.start_point
			return ParseError(line + 1, column)
		stack.extend(c for c in reversed(node.children) if c.has_error)
	line, column = root.start_point
	return ParseError(line + 1, column)


# =============================================================================
# Attributes
# =============================================================================


def _lower_attribute(node: TSNode, source: bytes) -> JSXAttribute:
	children = _named(node)
	if not children:
		raise UnexpectedNodeError(f"jsx_attribute without a name at byte {node.start_byte}")
	name_node = children[0]
	if name_node.type == "jsx_namespace_name":
		parts = _named(name_node)
		if len(parts) != 2:
			raise UnexpectedNodeError(
				f"Namespaced attribute name with {len(parts)} parts: {_text(name_node, source)!r}"
			)
		name: JSXName | JSXNamespacedName = JSXNamespacedName(
			_text(parts[0], source), _text(parts[1], source)
		)
	else:
		name = JSXName(_text(name_node, source))

	value: AttributeValue | None = None
	if len(children) > 1:
		value = _lower_attribute_value(children[1], source)
	return JSXAttribute(name, value, span=_span(node))


def _lower_attribute_value(node: TSNode, source: bytes) -> AttributeValue:
	if node.type == "string":
		raw = _text(node, source)
		return StringLiteral(raw[1:-1], span=_span(node))
	if node.type in JSX_ELEMENT_KINDS:
		return JSXElementValue(_text(node, source), span=_span(node))
	if node.type == "jsx_expression":
		inner = _named(node)
		# `x={}` and `x={/* c */}` are syntax errors for JS compilers
		if not inner:
			line, column = node.start_point
			raise ParseError(line + 1, column, "EMPTY_ATTRIBUTE")
		return JSXExpressionContainer(
			_lower_expression(inner[0], source), span=_span(node)
		)
	raise UnexpectedNodeError(
		f"Unsupported JSX attribute value {node.type!r} at byte {node.start_byte}"
	)


# =============================================================================
# Expressions
# =============================================================================


def _lower_expression(node: TSNode, source: bytes) -> Expr:
	"""Lower a tree-sitter expression node.

	Parentheses are dropped but the outermost span is kept, so the generator
	inserts text around the parenthesised form.
	"""
	outer = node
	while node.type == "parenthesized_expression":
		inner = _named(node)
		if not inner:
			break
		node = inner[0]
	expr = _lower_unwrapped(node, source)
	expr.span = _span(outer)
	return expr


def _lower_unwrapped(node: TSNode, source: bytes) -> Expr:
	kind = node.type
	field = node.child_by_field_name

	if kind in _CHAIN_FIELDS and _in_optional_chain(node):
		return _opaque(node, source, "optional_chain")

	if kind == "call_expression":
		args = field("arguments")
		if args is not None and args.type == "template_string":
			return _opaque(node, source, "tagged_template")
		return Call(
			_lower_expression(_required(node, "function"), source),
			[_lower_expression(a, source) for a in _named(args)]
			if args is not None
			else [],
		)

	if kind == "member_expression":
		return Member(
			_lower_expression(_required(node, "object"), source),
			_opaque(_required(node, "property"), source),
			computed=False,
		)

	if kind == "subscript_expression":
		return Member(
			_lower_expression(_required(node, "object"), source),
			_lower_expression(_required(node, "index"), source),
			computed=True,
		)

	if kind == "template_string":
		quasis: list[str] = []
		expressions: list[Expr] = []
		for child in _named(node):
			if child.type == "template_substitution":
				inner = _named(child)
				if inner:
					expressions.append(_lower_expression(inner[0], source))
			else:
				quasis.append(_text(child, source))
		return TemplateLiteral(quasis, expressions)

	if kind == "ternary_expression":
		return Conditional(
			_lower_expression(_required(node, "condition"), source),
			_lower_expression(_required(node, "consequence"), source),
			_lower_expression(_required(node, "alternative"), source),
		)

	if kind == "binary_expression":
		op = _text(_required(node, "operator"), source)
		left = _lower_expression(_required(node, "left"), source)
		right = _lower_expression(_required(node, "right"), source)
		if op in LOGICAL_OPERATORS:
			return Logical(left, op, right)
		return Binary(left, op, right)

	if kind == "unary_expression":
		return Unary(
			_text(_required(node, "operator"), source),
			_lower_expression(_required(node, "argument"), source),
		)

	if kind == "array":
		# Holes leave no node behind; count commas to put them back
		elements: list[Expr | None] = []
		pending: Expr | None = None
		seen_value = False
		for child in node.children:
			if child.type == ",":
				elements.append(pending if seen_value else None)
				pending, seen_value = None, False
			elif child.is_named and child.type != "comment":
				pending, seen_value = _lower_expression(child, source), True
		if seen_value:
			elements.append(pending)
		return Array(elements)

	if kind == "object":
		return Object([_lower_object_entry(c, source) for c in _named(node)])

	if kind == "arrow_function":
		params: list[Expr] = []
		if (single := field("parameter")) is not None:
			params.append(_opaque(single, source))
		elif (formal := field("parameters")) is not None:
			params.extend(_opaque(p, source) for p in _named(formal))
		body = _required(node, "body")
		if body.type == "statement_block":
			lowered_body: Expr = _opaque(body, source)
		else:
			lowered_body = _lower_expression(body, source)
		return ArrowFunction(
			params, lowered_body, is_async=_has_token(node, "async")
		)

	if kind in FUNCTION_KINDS:
		name = field("name")
		return Function(
			_text(name, source) if name is not None else None,
			is_async=_has_token(node, "async"),
			is_generator=kind == "generator_function" or _has_token(node, "*"),
		)

	return _opaque(node, source)


def _lower_object_entry(node: TSNode, source: bytes) -> Property | Opaque:
	if node.type == "pair":
		key = _required(node, "key")
		return Property(
			_opaque(key, source),
			_lower_expression(_required(node, "value"), source),
			computed=key.type == "computed_property_name",
			span=_span(node),
		)
	if node.type == "shorthand_property_identifier":
		ident = _opaque(node, source, "identifier")
		return Property(ident, ident, shorthand=True, span=_span(node))
	# method_definition, spread_element
	return _opaque(node, source)


def _in_optional_chain(node: TSNode) -> bool:
	"""Whether a call/member link belongs to an optional chain (`a?.b.c()`)."""
	current: TSNode | None = node
	while current is not None and current.type in _CHAIN_FIELDS:
		if any(c.type == "optional_chain" for c in current.children):
			return True
		current = current.child_by_field_name(_CHAIN_FIELDS[current.type])
	return False


def _has_token(node: TSNode, token: str) -> bool:
	return any(not c.is_named and c.type == token for c in node.children)


def _required(node: TSNode, name: str) -> TSNode:
	child = node.child_by_field_name(name)
	if child is None:
		raise UnexpectedNodeError(
			f"{node.type} at byte {node.start_byte} has no {name!r} field"
		)
	return child


def _opaque(node: TSNode, source: bytes, kind: str | None = None) -> Opaque:
	return Opaque(kind or node.type, _text(node, source), span=_span(node))


def _shift_spans(expr: Expr, offset: int) -> None:
	for node in _iter_nodes(expr):
		if node.span is not None:
			node.span = Span(node.span.start + offset, node.span.end + offset)


def _iter_nodes(expr: Expr | Property) -> Iterator[Expr | Property]:
	stack: list[Expr | Property] = [expr]
	while stack:
		node = stack.pop()
		yield node
		if isinstance(node, Call):
			stack.append(node.callee)
			stack.extend(node.arguments)
		elif isinstance(node, TemplateLiteral):
			stack.extend(node.expressions)
		elif isinstance(node, Conditional):
			stack.extend((node.test, node.consequent, node.alternate))
		elif isinstance(node, (Logical, Binary)):
			stack.extend((node.left, node.right))
		elif isinstance(node, Unary):
			stack.append(node.argument)
		elif isinstance(node, Member):
			stack.extend((node.object, node.property))
		elif isinstance(node, Array):
			stack.extend(e for e in node.elements if e is not None)
		elif isinstance(node, Object):
			stack.extend(node.properties)
		elif isinstance(node, Property):
			stack.append(node.key)
			if not node.shorthand:
				stack.append(node.value)
		elif isinstance(node, ArrowFunction):
			stack.extend(node.params)
			stack.append(node.body)


__all__ = ["TSX", "parse", "parse_expression"]
