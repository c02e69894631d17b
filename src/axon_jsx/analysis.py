"""
Static predicates deciding whether a JSX attribute gets wrapped in a thunk.

Both predicates are purely syntactic. `contains_call` only descends into a
fixed set of expression kinds; everything else, function bodies included, is
treated as call-free.
"""

from __future__ import annotations

from axon_jsx.nodes import (
	Array,
	ArrowFunction,
	Binary,
	Call,
	Conditional,
	Expr,
	Function,
	Logical,
	Member,
	Object,
	Property,
	TemplateLiteral,
	Unary,
)

REF_ATTRIBUTE = "ref"
EVENT_PREFIX = "on"


def contains_call(node: Expr) -> bool:
	"""Whether `node` contains a call within the transparent expression kinds.

	- Call: always
	- Template literal: any interpolation
	- Conditional: test, consequent or alternate
	- Logical / binary: either operand
	- Unary: the operand
	- Member: the object only, never a computed key (`a[f()]` is call-free)
	- Array: any element, holes skipped
	- Object: values of non-shorthand key/value entries

	Any other kind, including arrow and function bodies, returns False.
	"""
	if isinstance(node, Call):
		return True
	if isinstance(node, TemplateLiteral):
		return any(contains_call(e) for e in node.expressions)
	if isinstance(node, Conditional):
		return (
			contains_call(node.test)
			or contains_call(node.consequent)
			or contains_call(node.alternate)
		)
	if isinstance(node, (Logical, Binary)):
		return contains_call(node.left) or contains_call(node.right)
	if isinstance(node, Unary):
		return contains_call(node.argument)
	if isinstance(node, Member):
		return contains_call(node.object)
	if isinstance(node, Array):
		return any(e is not None and contains_call(e) for e in node.elements)
	if isinstance(node, Object):
		return any(
			isinstance(p, Property) and not p.shorthand and contains_call(p.value)
			for p in node.properties
		)
	return False


def is_event_handler_name(name: str) -> bool:
	"""`on` followed by at least one character: onClick, oninput, online."""
	return name.startswith(EVENT_PREFIX) and len(name) > len(EVENT_PREFIX)


def should_skip(name: str, expr: Expr) -> bool:
	"""Whether an attribute is exempt from wrapping regardless of its content.

	Event handlers and refs receive functions on purpose, and expressions that
	are already functions need no thunk.
	"""
	if is_event_handler_name(name):
		return True
	if name == REF_ATTRIBUTE:
		return True
	if isinstance(expr, ArrowFunction):
		return True
	if isinstance(expr, Function):
		return True
	return False


__all__ = ["contains_call", "is_event_handler_name", "should_skip"]
