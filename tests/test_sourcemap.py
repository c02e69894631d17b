"""
Tests for Source Map v3 encoding.
"""

import json

import pytest
from axon_jsx.sourcemap import SourceMapBuilder, encode_vlq


class TestVlq:
	"""Test Base64 VLQ encoding."""

	@pytest.mark.parametrize(
		"value,expected",
		[
			(0, "A"),
			(1, "C"),
			(-1, "D"),
			(2, "E"),
			(15, "e"),
			(16, "gB"),
			(-16, "hB"),
			(25, "yB"),
			(31, "+B"),
			(123, "2H"),
			(1000, "w+B"),
		],
	)
	def test_encode(self, value: int, expected: str):
		assert encode_vlq(value) == expected


class TestSourceMapBuilder:
	"""Test mapping encoding and the v3 document."""

	def test_empty(self):
		assert SourceMapBuilder().encode_mappings() == ""

	def test_single_segment(self):
		builder = SourceMapBuilder()
		builder.add_mapping(0, 0, 0, 0)
		assert builder.encode_mappings() == "AAAA"

	def test_segments_on_one_line(self):
		builder = SourceMapBuilder()
		builder.add_mapping(0, 0, 0, 0)
		builder.add_mapping(0, 10, 0, 4)
		assert builder.encode_mappings() == "AAAA,UAAI"

	def test_line_gaps(self):
		builder = SourceMapBuilder()
		builder.add_mapping(0, 0, 0, 0)
		builder.add_mapping(2, 0, 2, 0)
		assert builder.encode_mappings() == "AAAA;;AEAA"

	def test_original_position_is_relative_across_lines(self):
		builder = SourceMapBuilder()
		builder.add_mapping(0, 4, 0, 4)
		builder.add_mapping(1, 2, 1, 2)
		# Second segment: column 2 on a fresh line, original line +1, column -2
		assert builder.encode_mappings() == "IAAI;EACF"

	def test_insertion_order_does_not_matter(self):
		builder = SourceMapBuilder()
		builder.add_mapping(1, 0, 1, 0)
		builder.add_mapping(0, 0, 0, 0)
		assert builder.encode_mappings() == "AAAA;AACA"

	def test_document(self):
		builder = SourceMapBuilder(source="App.tsx", source_content="x", file="App.tsx")
		builder.add_mapping(0, 0, 0, 0)
		doc = builder.build()
		assert doc.to_dict() == {
			"version": 3,
			"sources": ["App.tsx"],
			"names": [],
			"mappings": "AAAA",
			"sourcesContent": ["x"],
			"file": "App.tsx",
		}
		assert json.loads(doc.to_json()) == doc.to_dict()

	def test_unnamed_source(self):
		doc = SourceMapBuilder(source_content="x").build().to_dict()
		assert doc["sources"] == ["<source>"]
		assert json.loads(json.dumps(doc))["sources"] == ["<source>"]

	def test_document_without_content(self):
		doc = SourceMapBuilder(source="a.jsx").build()
		assert "sourcesContent" not in doc.to_dict()
		assert "file" not in doc.to_dict()
