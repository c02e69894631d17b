"""
Tests for the wrapping predicates: contains_call and should_skip.
"""

import pytest
from axon_jsx.analysis import contains_call, is_event_handler_name, should_skip
from axon_jsx.nodes import (
	Array,
	ArrowFunction,
	Binary,
	Call,
	Conditional,
	Function,
	Logical,
	Member,
	Object,
	Opaque,
	Property,
	TemplateLiteral,
	Unary,
)
from axon_jsx.parser import parse_expression


def ident(name: str) -> Opaque:
	return Opaque("identifier", name)


def call(name: str = "f") -> Call:
	return Call(ident(name))


# =============================================================================
# contains_call on hand-built nodes
# =============================================================================


class TestContainsCallNodes:
	"""Test contains_call against each node kind."""

	def test_call(self):
		assert contains_call(call()) is True

	def test_opaque_is_leaf(self):
		assert contains_call(ident("x")) is False
		assert contains_call(Opaque("new_expression", "new Foo()")) is False

	def test_template(self):
		assert contains_call(TemplateLiteral(["a ", ""], [call()]))
		assert not contains_call(TemplateLiteral(["a ", ""], [ident("x")]))
		assert not contains_call(TemplateLiteral(["plain"], []))

	def test_conditional_each_branch(self):
		x = ident("x")
		assert contains_call(Conditional(call(), x, x))
		assert contains_call(Conditional(x, call(), x))
		assert contains_call(Conditional(x, x, call()))
		assert not contains_call(Conditional(x, x, x))

	def test_logical_and_binary(self):
		assert contains_call(Logical(ident("a"), "&&", call()))
		assert contains_call(Binary(call(), "+", ident("b")))
		assert not contains_call(Binary(ident("a"), "+", ident("b")))

	def test_unary(self):
		assert contains_call(Unary("!", call()))
		assert not contains_call(Unary("-", ident("x")))

	def test_member_checks_object_only(self):
		assert contains_call(Member(call(), ident("x")))
		assert not contains_call(Member(ident("a"), call(), computed=True))

	def test_array_skips_holes(self):
		assert contains_call(Array([None, ident("a"), call()]))
		assert not contains_call(Array([None, ident("a")]))
		assert not contains_call(Array([]))

	def test_object_values(self):
		assert contains_call(Object([Property(ident("a"), call())]))
		assert not contains_call(Object([Property(ident("a"), ident("b"))]))

	def test_object_key_is_not_inspected(self):
		prop = Property(call("k"), ident("v"), computed=True)
		assert not contains_call(Object([prop]))

	def test_object_shorthand_and_spread_never_match(self):
		shorthand = Property(ident("a"), call(), shorthand=True)
		spread = Opaque("spread_element", "...f()")
		assert not contains_call(Object([shorthand, spread]))

	def test_functions_are_not_entered(self):
		assert not contains_call(ArrowFunction([], call()))
		assert not contains_call(Function("named"))

	def test_deep_nesting(self):
		expr = Binary(
			ident("a"),
			"+",
			Unary("!", Member(Array([None, Conditional(ident("c"), call(), ident("d"))]), ident("x"))),
		)
		assert contains_call(expr)


# =============================================================================
# contains_call on parsed expressions
# =============================================================================


class TestContainsCallParsed:
	"""Test contains_call on expressions read from source."""

	@pytest.mark.parametrize(
		"source",
		[
			"f()",
			"(f())",
			"`foo ${active() ? 'bar' : 'baz'}`",
			"`${`${f()}`}`",
			"a() ? 1 : 2",
			"a ? b() : c",
			"a && b()",
			"a ?? f()",
			"a + b * c()",
			"!f()",
			"-f()",
			"typeof f()",
			"f().x",
			"f()[0]",
			"(a?.b).c()",
			"[a, , f()]",
			"{ a: f() }",
			"{ a: { b: [f()] } }",
		],
	)
	def test_detects_call(self, source: str):
		assert contains_call(parse_expression(source)) is True

	@pytest.mark.parametrize(
		"source",
		[
			"count",
			"42",
			"'str'",
			"`plain ${x}`",
			"a ? b : c",
			"a.b.c",
			"a[f()]",
			"[a, , b]",
			"{ a }",
			"{ ...f() }",
			"{ [k()]: 1 }",
			"{ m() { return f() } }",
			"() => f()",
			"async () => await f()",
			"function () { return f() }",
			"function* gen() { yield f() }",
			"new Foo()",
			"(a, f())",
			"x = f()",
			"await f()",
			"x++",
			"a?.()",
			"a?.b()",
			"a?.b.c()",
			"tag`x ${f()}`",
			"f()!",
			"f() as string",
			"<div>{f()}</div>",
		],
	)
	def test_no_call(self, source: str):
		assert contains_call(parse_expression(source)) is False


# =============================================================================
# should_skip
# =============================================================================


class TestShouldSkip:
	"""Test the attribute exemption rules."""

	@pytest.mark.parametrize("name", ["onClick", "onInput", "oninput", "online", "onx"])
	def test_event_handler_names(self, name: str):
		assert should_skip(name, call()) is True

	@pytest.mark.parametrize("name", ["on", "On", "OnClick", "class", "disabled", "button"])
	def test_non_event_names(self, name: str):
		assert should_skip(name, call()) is False

	def test_ref(self):
		assert should_skip("ref", call()) is True
		assert should_skip("refs", call()) is False
		assert should_skip("Ref", call()) is False

	def test_existing_functions(self):
		assert should_skip("style", ArrowFunction([], call())) is True
		assert should_skip("style", Function()) is True
		assert should_skip("style", Function("named", is_async=True)) is True

	def test_plain_expression(self):
		assert should_skip("value", ident("count")) is False

	def test_event_prefix_helper(self):
		assert is_event_handler_name("onClick")
		assert not is_event_handler_name("on")
		assert not is_event_handler_name("o")
