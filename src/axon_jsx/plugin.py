"""
Build-tool plugin for axon JSX.

Mirrors the hook shape Vite/Rollup plugins expose, so a host pipeline can
drive it the same way: `config()` supplies the JSX factory settings, and
`transform(code, file_id)` returns `{"code", "map"}` or None for untouched files.
"""

from __future__ import annotations

from typing import Any, Literal

from axon_jsx.config import PluginConfig
from axon_jsx.transform import transform as transform_source


class AxonPlugin:
	"""Wraps reactive JSX attribute expressions before esbuild lowers JSX."""

	name: str = "axon-jsx"
	enforce: Literal["pre", "post"] = "pre"
	options: PluginConfig

	def __init__(self, options: PluginConfig | None = None) -> None:
		self.options = options if options is not None else PluginConfig()

	def config(self) -> dict[str, Any]:
		return {"esbuild": self.options.esbuild_options()}

	def transform(self, code: str, file_id: str) -> dict[str, Any] | None:
		result = transform_source(code, file_id, config=self.options)
		if result is None:
			return None
		return {"code": result.code, "map": result.map.to_dict()}


def axon_plugin(options: PluginConfig | None = None) -> AxonPlugin:
	return AxonPlugin(options)


__all__ = ["AxonPlugin", "axon_plugin"]
