"""Source Map v3 encoding for single-source transforms."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

# Source name used when the input has none
UNNAMED_SOURCE = "<source>"

BASE64_ALPHABET ="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

_VLQ_SHIFT = 5
_VLQ_CONTINUATION = 1 << _VLQ_SHIFT
_VLQ_MASK = _VLQ_CONTINUATION - 1


def encode_vlq(value: int) -> str:
	"""Encode one signed integer as Base64 VLQ."""
	# Sign goes into the least significant bit
	vlq = (-value << 1) | 1 if value < 0 else value << 1
	out: list[str] = []
	while True:
		digit = vlq & _VLQ_MASK
		vlq >>= _VLQ_SHIFT
		if vlq:
			digit |= _VLQ_CONTINUATION
		out.append(BASE64_ALPHABET[digit])
		if not vlq:
			return "".join(out)


@dataclass(slots=True, frozen=True)
class Mapping:
	"""Generated position -> original position. Lines and columns are 0-based."""

	generated_line: int
	generated_column: int
	original_line: int
	original_column: int


@dataclass(slots=True)
class SourceMap:
	"""A Source Map v3 document."""

	mappings: str
	sources: Sequence[str]
	sources_content: Sequence[str | None] = ()
	names: Sequence[str] = ()
	file: str | None = None

	def to_dict(self) -> dict[str, Any]:
		out: dict[str, Any] = {
			"version": 3,
			"sources": list(self.sources),
			"names": list(self.names),
			"mappings": self.mappings,
		}
		if self.sources_content:
			out["sourcesContent"] = list(self.sources_content)
		if self.file is not None:
			out["file"] = self.file
		return out

	def to_json(self) -> str:
		return json.dumps(self.to_dict())


@dataclass
class SourceMapBuilder:
	"""Collects mappings for one source file and encodes them."""

	source: str | None = None
	source_content: str | None = None
	file: str | None = None
	_mappings: list[Mapping] = field(default_factory=list, init=False, repr=False)

	def add_mapping(
		self,
		generated_line: int,
		generated_column: int,
		original_line: int,
		original_column: int,
	) -> None:
		self._mappings.append(
			Mapping(generated_line, generated_column, original_line, original_column)
		)

	def encode_mappings(self) -> str:
		"""The `mappings` field: lines split by `;`, segments by `,`.

		Generated columns restart at 0 on every line; the original position is
		relative to the previous segment in the file. There is only one source,
		so its index delta is always 0.
		"""
		by_line: dict[int, list[Mapping]] = {}
		for m in sorted(
			self._mappings, key=lambda m: (m.generated_line, m.generated_column)
		):
			by_line.setdefault(m.generated_line, []).append(m)

		lines: list[str] = []
		prev_line = 0
		prev_column = 0
		for line_no in range(max(by_line, default=-1) + 1):
			segments: list[str] = []
			prev_generated = 0
			for m in by_line.get(line_no, ()):
				segments.append(
					encode_vlq(m.generated_column - prev_generated)
					+ encode_vlq(0)
					+ encode_vlq(m.original_line - prev_line)
					+ encode_vlq(m.original_column - prev_column)
				)
				prev_generated = m.generated_column
				prev_line = m.original_line
				prev_column = m.original_column
			lines.append(",".join(segments))
		return ";".join(lines)

	def build(self) -> SourceMap:
		return SourceMap(
			mappings=self.encode_mappings(),
			sources=[self.source if self.source is not None else UNNAMED_SOURCE],
			sources_content=[self.source_content]
			if self.source_content is not None
			else (),
			file=self.file,
		)


__all__ = ["Mapping", "SourceMap", "SourceMapBuilder", "UNNAMED_SOURCE", "encode_vlq"]
