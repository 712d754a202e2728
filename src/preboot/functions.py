from __future__ import annotations

import textwrap
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class JsFunction:
	"""JavaScript function source embedded in preboot options.

	Options are plain data except for fields wrapped in ``JsFunction``; the
	serializer writes those out as raw source instead of string literals, so the
	browser receives a live function expression.
	"""

	source: str

	def __post_init__(self) -> None:
		if not isinstance(self.source, str):
			raise TypeError(
				f"JsFunction source must be a string, got {type(self.source).__name__}"
			)
		source = self.source.strip()
		if not source:
			raise ValueError("JsFunction source cannot be empty")
		object.__setattr__(self, "source", source)

	def __str__(self) -> str:
		return self.source


def js_function(source: str) -> JsFunction:
	"""Build a JsFunction from source written inside an indented Python string."""
	return JsFunction(textwrap.dedent(source))


__all__ = ["JsFunction", "js_function"]
