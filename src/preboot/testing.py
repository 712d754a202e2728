"""Value factories for tests of code that embeds preboot."""

from __future__ import annotations

from typing import Any

from preboot.functions import JsFunction
from preboot.options import PrebootOptions, resolve_options


def get_mock_window() -> dict[str, Any]:
	return {"prebootData": {}, "prebootStarted": False}


def get_mock_options(**overrides: Any) -> PrebootOptions:
	"""Default options for the ``app`` root, with a mock ``window``."""
	return resolve_options({"appRoot": "app", "window": get_mock_window()}, overrides)


def get_mock_element() -> dict[str, Any]:
	"""Fake DOM element with just enough surface for ``createBuffer``."""
	return {
		"cloneNode": JsFunction("function () { return { style: {} }; }"),
		"parentNode": {"insertBefore": JsFunction("function () {}")},
	}
