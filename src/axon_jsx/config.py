from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_IMPORT_SOURCE = "@faber1999/axon.js/jsx"


@dataclass
class PluginConfig:
	"""
	Configuration for the JSX transform and the host build integration.

	Attributes:
	    jsx_factory (str): Function JSX elements are lowered to.
	    jsx_fragment (str): Symbol used for `<>...</>` fragments.
	    jsx_import_source (str): Module the factory and fragment are imported from.
	    extensions (tuple[str, ...]): File suffixes routed through the transform.
	"""

	jsx_factory: str = "h"
	"""Function JSX elements are lowered to."""

	jsx_fragment: str = "Fragment"
	"""Symbol used for fragments."""

	jsx_import_source: str = DEFAULT_IMPORT_SOURCE
	"""Module the factory and fragment symbols are imported from."""

	extensions: tuple[str, ...] = (".jsx", ".tsx")
	"""File suffixes the transform applies to."""

	@property
	def jsx_inject(self) -> str:
		"""Import statement prepended to every JSX module by the host."""
		names = self.jsx_factory
		if self.jsx_fragment != self.jsx_factory:
			names = f"{self.jsx_factory}, {self.jsx_fragment}"
		return f"import {{ {names} }} from '{self.jsx_import_source}'"

	def esbuild_options(self) -> dict[str, Any]:
		return {
			"jsxFactory": self.jsx_factory,
			"jsxFragment": self.jsx_fragment,
			"jsxInject": self.jsx_inject,
		}

	def handles(self, file_id: str) -> bool:
		"""Whether a module id names a file the transform applies to."""
		return file_id.endswith(self.extensions)


__all__ = ["DEFAULT_IMPORT_SOURCE", "PluginConfig"]
