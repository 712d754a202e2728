"""Serialize preboot options into a JavaScript expression.

The output looks like ``JSON.stringify`` output with compact separators, except
that ``JsFunction`` values are written as raw function source::

    {"appRoot":"app","eventSelectors":[{"selector":"button","events":["click"],"action":function (node, event) { ... }}]}

Whether a value is a function is decided by its type (``JsFunction``) when the
options are built, so the encoder never has to recover functions from string
literals after the fact.

Strings are escaped so that the result can be placed inside an inline
``<script>`` tag: ``<``, ``>``, ``&``, U+2028 and U+2029 are written as
``\\uXXXX`` escapes, which both JavaScript and JSON decode back to the original
characters.
"""

from __future__ import annotations

import json
import math
import types
from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from typing import Any

from preboot.functions import JsFunction
from preboot.helpers import to_camel

__all__ = ["serialize", "js_string"]

_SCRIPT_UNSAFE = {
	"<": "\\u003c",
	">": "\\u003e",
	"&": "\\u0026",
	"\u2028": "\\u2028",
	"\u2029": "\\u2029",
}


def js_string(value: str) -> str:
	"""Double-quoted JS string literal, safe to inline in HTML."""
	s = json.dumps(value, ensure_ascii=False)
	for char, escaped in _SCRIPT_UNSAFE.items():
		s = s.replace(char, escaped)
	return s


def serialize(value: Any) -> str:
	"""Render ``value`` as the source of a single JavaScript expression."""
	# ids of the containers currently being rendered, to detect cycles
	stack: set[int] = set()

	def process(value: Any) -> str:
		if isinstance(value, JsFunction):
			return value.source
		if value is None:
			return "null"
		if isinstance(value, bool):
			return "true" if value else "false"
		if isinstance(value, int):
			return str(value)
		if isinstance(value, float):
			# JSON.stringify writes NaN and Infinity as null
			return json.dumps(value) if math.isfinite(value) else "null"
		if isinstance(value, str):
			return js_string(value)

		if callable(value) or isinstance(value, (type, types.ModuleType)):
			raise TypeError(
				f"Unsupported value in serialization: {type(value)!r}. "
				+ "Wrap JavaScript source in a JsFunction to embed a function."
			)

		obj_id = id(value)
		if obj_id in stack:
			raise ValueError("Circular reference detected in serialized value")
		stack.add(obj_id)
		try:
			if is_dataclass(value):
				return "{" + ",".join(_dataclass_entries(value, process)) + "}"

			if isinstance(value, Mapping):
				return "{" + ",".join(_mapping_entries(value, process)) + "}"

			if isinstance(value, (list, tuple)):
				return "[" + ",".join(process(entry) for entry in value) + "]"
		finally:
			stack.discard(obj_id)

		raise TypeError(f"Unsupported value in serialization: {type(value)!r}")

	return process(value)


def _mapping_entries(value: Mapping[Any, Any], process: Any) -> list[str]:
	entries: list[str] = []
	for key, entry in value.items():
		if not isinstance(key, str):
			raise TypeError(
				f"Only string keys can be serialized, got {type(key).__name__} ({key!r})"
			)
		entries.append(f"{js_string(key)}:{process(entry)}")
	return entries


def _dataclass_entries(value: Any, process: Any) -> list[str]:
	entries: list[str] = []
	for f in fields(value):
		entry = getattr(value, f.name)
		if f.metadata.get("flatten"):
			entries.extend(_mapping_entries(entry, process))
			continue
		# Unset optional fields are left out, like `undefined` in JSON.stringify
		if entry is None:
			continue
		entries.append(f"{js_string(to_camel(f.name))}:{process(entry)}")
	return entries
