from __future__ import annotations

import logging
from dataclasses import dataclass, field

from axon_jsx.analysis import contains_call, should_skip
from axon_jsx.errors import UnexpectedNodeError
from axon_jsx.nodes import (
	ArrowFunction,
	Expr,
	JSXAttribute,
	JSXElementValue,
	JSXEmptyExpression,
	JSXExpressionContainer,
	Module,
	StringLiteral,
	attribute_name,
	walk_attributes,
)
from axon_jsx.sourcemap import UNNAMED_SOURCE

logger = logging.getLogger(__name__)


@dataclass
class RewriteStats:
	"""Outcome of one rewrite pass over a module."""

	visited: int = 0
	wrapped: list[str] = field(default_factory=list)

	@property
	def changed(self) -> bool:
		return bool(self.wrapped)


def make_thunk(expr: Expr) -> ArrowFunction:
	"""`expr` -> `() => expr`. The expression node moves into the body."""
	return ArrowFunction((), expr)


def rewrite_attribute(attr: JSXAttribute) -> bool:
	"""Wrap one attribute's expression in a thunk if it qualifies.

	Returns True when the attribute was rewritten.
	"""
	name = attribute_name(attr)
	value = attr.value
	if value is None or isinstance(value, (StringLiteral, JSXElementValue)):
		return False
	if not isinstance(value, JSXExpressionContainer):
		raise UnexpectedNodeError(
			f"Attribute {name!r} has unexpected value {type(value).__name__}"
		)

	expr = value.expression
	if isinstance(expr, JSXEmptyExpression):
		return False
	if should_skip(name, expr):
		return False
	if not contains_call(expr):
		return False

	value.expression = make_thunk(expr)
	return True


def rewrite_attributes_with_stats(module: Module) -> RewriteStats:
	"""Run the rewrite over every attribute and report what happened."""
	stats = RewriteStats()

	def visit(attr: JSXAttribute) -> bool:
		stats.visited += 1
		if rewrite_attribute(attr):
			stats.wrapped.append(attribute_name(attr))
			return True
		return False

	walk_attributes(module, visit)
	if stats.wrapped:
		logger.debug(
			"Wrapped %d of %d attribute(s) in %s: %s",
			len(stats.wrapped),
			stats.visited,
			module.source_name or UNNAMED_SOURCE,
			", ".join(stats.wrapped),
		)
	return stats


def rewrite_attributes(module: Module) -> bool:
	"""Rewrite qualifying attributes in place. Returns whether any changed."""
	return walk_attributes(module, rewrite_attribute)


__all__ = [
	"RewriteStats",
	"make_thunk",
	"rewrite_attribute",
	"rewrite_attributes",
	"rewrite_attributes_with_stats",
]
