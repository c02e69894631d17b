from __future__ import annotations


class AxonError(Exception):
	"""Base class for errors raised by axon_jsx."""


class ParseError(AxonError):
	"""Source text could not be parsed as TSX.

	Recoverable: the transform reports "not applicable" and leaves syntax
	errors to the host compiler.
	"""

	line: int
	column: int
	kind: str

	def __init__(self, line: int, column: int, kind: str = "ERROR") -> None:
		self.line = line
		self.column = column
		self.kind = kind
		if kind == "MISSING":
			label = "missing token"
		elif kind == "EMPTY_ATTRIBUTE":
			label = "empty attribute expression"
		else:
			label = "syntax error"
		super().__init__(f"{label} at {line}:{column}")


class UnexpectedNodeError(AxonError):
	"""A node did not have the shape the transform relies on.

	Always a bug in axon_jsx itself, never in user code.
	"""


__all__ = ["AxonError", "ParseError", "UnexpectedNodeError"]
