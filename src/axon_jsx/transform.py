from __future__ import annotations

import logging
from dataclasses import dataclass, field

from axon_jsx.codegen import generate
from axon_jsx.config import PluginConfig
from axon_jsx.errors import ParseError
from axon_jsx.parser import parse
from axon_jsx.rewrite import rewrite_attributes_with_stats
from axon_jsx.sourcemap import SourceMap

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransformResult:
	"""Rewritten source for one file."""

	code: str
	map: SourceMap
	wrapped: list[str] = field(default_factory=list)
	"""Names of the attributes that were wrapped, in source order."""


def transform(
	code: str, file_id: str, *, config: PluginConfig | None = None
) -> TransformResult | None:
	"""Wrap reactive JSX attribute expressions of one file in thunks.

	Returns None when the file is left as is: not a JSX file, not parseable
	(the host compiler reports syntax errors itself), or nothing to wrap.
	"""
	cfg = config if config is not None else PluginConfig()
	if not cfg.handles(file_id):
		return None

	try:
		module = parse(code, source_name=file_id)
	except ParseError as exc:
		logger.debug("Skipping %s: %s", file_id, exc)
		return None

	stats = rewrite_attributes_with_stats(module)
	if not stats.changed:
		return None

	result = generate(module)
	return TransformResult(result.code, result.map, stats.wrapped)


__all__ = ["TransformResult", "transform"]
