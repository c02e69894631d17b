"""
Module -> source text + source map.

The generator never re-prints the file. It splices the text of synthesised
thunks into the original bytes, so formatting, comments, type annotations and
line numbers all survive unchanged.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from dataclasses import dataclass

from axon_jsx.errors import UnexpectedNodeError
from axon_jsx.nodes import (
	ArrowFunction,
	JSXExpressionContainer,
	Module,
	iter_attributes,
)
from axon_jsx.sourcemap import SourceMap, SourceMapBuilder

THUNK_PREFIX = "() => "


@dataclass(slots=True, frozen=True)
class Edit:
	"""Text inserted at a byte offset of the original source."""

	offset: int
	text: str


@dataclass(slots=True)
class GeneratedCode:
	code: str
	map: SourceMap


def thunk_edits(module: Module) -> list[Edit]:
	"""Insertions that turn every synthesised thunk into source text."""
	edits: list[Edit] = []
	for attr in iter_attributes(module):
		value = attr.value
		if not isinstance(value, JSXExpressionContainer):
			continue
		expr = value.expression
		# Parsed arrows keep their span; only rewritten ones lack it
		if not isinstance(expr, ArrowFunction) or expr.span is not None:
			continue
		if expr.params:
			raise UnexpectedNodeError("Synthesised arrow functions must not take parameters")
		body = expr.body
		if body.span is None:
			raise UnexpectedNodeError(
				f"Thunk body {type(body).__name__} has no source position"
			)
		start, end = body.span.start, body.span.end
		# An arrow body whose first token is `{` would be read as a block
		if module.source[start : start + 1] == b"{":
			edits.append(Edit(start, THUNK_PREFIX + "("))
			edits.append(Edit(end, ")"))
		else:
			edits.append(Edit(start, THUNK_PREFIX))
	edits.sort(key=lambda e: e.offset)
	return edits


def apply_edits(source: bytes, edits: Sequence[Edit]) -> bytes:
	"""Apply insertions sorted by offset."""
	out: list[bytes] = []
	pos = 0
	for edit in edits:
		out.append(source[pos : edit.offset])
		out.append(edit.text.encode("utf-8"))
		pos = edit.offset
	out.append(source[pos:])
	return b"".join(out)


def generate(module: Module) -> GeneratedCode:
	"""Serialise a rewritten module.

	Inserted text never spans lines, so every line of the output sits at the
	same line number as in the input.
	"""
	source = module.source
	edits = thunk_edits(module)
	code = apply_edits(source, edits).decode("utf-8")
	return GeneratedCode(code, _build_map(module, edits))


def _line_starts(source: bytes) -> list[int]:
	starts = [0]
	idx = source.find(b"\n")
	while idx != -1:
		starts.append(idx + 1)
		idx = source.find(b"\n", idx + 1)
	return starts


def _utf16_len(data: bytes) -> int:
	return len(data.decode("utf-8").encode("utf-16-le")) // 2


def _build_map(module: Module, edits: Sequence[Edit]) -> SourceMap:
	"""One segment at the start of each non-empty line, one after each insertion.

	Columns are counted in UTF-16 code units.
	"""
	source = module.source
	builder = SourceMapBuilder(
		source=module.source_name,
		source_content=source.decode("utf-8"),
		file=module.source_name,
	)
	starts = _line_starts(source)

	edits_by_line: dict[int, list[Edit]] = {}
	for edit in edits:
		line = bisect_right(starts, edit.offset) - 1
		edits_by_line.setdefault(line, []).append(edit)

	for line, start in enumerate(starts):
		end = starts[line + 1] - 1 if line + 1 < len(starts) else len(source)
		if end > start:
			builder.add_mapping(line, 0, line, 0)
		shift = 0
		for edit in edits_by_line.get(line, ()):
			column = _utf16_len(source[start : edit.offset])
			shift += _utf16_len(edit.text.encode("utf-8"))
			builder.add_mapping(line, column + shift, line, column)
	return builder.build()


__all__ = ["Edit", "GeneratedCode", "THUNK_PREFIX", "apply_edits", "generate", "thunk_edits"]
