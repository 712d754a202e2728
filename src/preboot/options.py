"""Preboot options: defaults, shallow merging and validation.

Options are resolved once per generated block. The result is an immutable
``PrebootOptions`` that the serializer and the inline code assembler only read.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any

from preboot.errors import ConfigurationError
from preboot.functions import JsFunction
from preboot.helpers import to_snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventSelector:
	"""A group of DOM events to record for elements matching ``selector``.

	Selectors may overlap. Every matching entry applies on its own; later
	entries never override earlier ones.
	"""

	selector: str
	events: tuple[str, ...]
	prevent_default: bool | None = None
	"""Call ``preventDefault()`` on the recorded event."""

	key_codes: tuple[int, ...] | None = None
	"""Only record key events with one of these key codes."""

	freeze: bool | None = None
	"""Freeze the page with an overlay until the client app takes over."""

	replay: bool | None = None
	"""Set to False to record the event (e.g. for focus tracking) without replaying it."""

	action: JsFunction | None = None
	"""Custom handler run in the browser with ``(node, event)`` when the event fires."""

	def __post_init__(self) -> None:
		object.__setattr__(self, "events", tuple(self.events))
		if self.key_codes is not None:
			object.__setattr__(self, "key_codes", tuple(self.key_codes))


@dataclass(frozen=True)
class PrebootOptions:
	"""Validated preboot configuration.

	Attributes:
	    app_root: Selector (or selectors) of the element(s) the app mounts on.
	    buffer: Render the client app into a hidden buffer before swapping it in.
	    minify: Hint for integrations that post-process the generated code.
	    replay: Replay recorded events once the client app is ready.
	    disable_overlay: Never show the freeze overlay.
	    event_selectors: Events to record, as ``EventSelector`` or plain mappings.
	    extra: Caller keys preboot does not know about, passed through verbatim.
	"""

	app_root: str | tuple[str, ...] | None = None
	buffer: bool = True
	minify: bool = True
	replay: bool = True
	disable_overlay: bool | None = None
	event_selectors: tuple[EventSelector | Mapping[str, Any], ...] | None = ()
	extra: Mapping[str, Any] = field(
		default_factory=lambda: MappingProxyType({}), metadata={"flatten": True}
	)


_OPTION_FIELDS = frozenset(f.name for f in fields(PrebootOptions)) - {"extra"}


# Events recorded on the server view and transferred to the client view
DEFAULT_OPTIONS = PrebootOptions(
	buffer=True,
	minify=True,
	replay=True,
	event_selectors=(
		# for recording changes in form elements
		EventSelector(
			selector="input,textarea",
			events=("keypress", "keyup", "keydown", "input", "change"),
		),
		EventSelector(selector="select,option", events=("change",)),
		# when user hits return button in an input box
		EventSelector(
			selector="input",
			events=("keyup",),
			prevent_default=True,
			key_codes=(13,),
			freeze=True,
		),
		# when user submits a form (press enter, click on button/input[type="submit"])
		EventSelector(
			selector="form",
			events=("submit",),
			prevent_default=True,
			freeze=True,
		),
		# for tracking focus (no need to replay)
		EventSelector(
			selector="input,textarea",
			events=("focusin", "focusout", "mousedown", "mouseup"),
			replay=False,
		),
		# user clicks on a button
		EventSelector(
			selector="button",
			events=("click",),
			prevent_default=True,
			freeze=True,
		),
	),
)


def _freeze(value: Any, stack: frozenset[int] = frozenset()) -> Any:
	"""Copy literal containers into read-only ones.

	Resolved options never share mutable state with the caller, so later
	changes to the override objects can't leak into generated code.
	"""
	if not isinstance(value, (Mapping, list, tuple)):
		return value
	if id(value) in stack:
		raise ValueError("Circular reference detected in preboot options")
	stack = stack | {id(value)}
	if isinstance(value, Mapping):
		return MappingProxyType(
			{key: _freeze(entry, stack) for key, entry in value.items()}
		)
	return tuple(_freeze(entry, stack) for entry in value)


def resolve_options(
	*overrides: Mapping[str, Any] | None, **values: Any
) -> PrebootOptions:
	"""Merge ``DEFAULT_OPTIONS`` with overrides and validate the result.

	The merge is shallow: each override replaces whole fields, so passing
	``eventSelectors`` replaces the default list instead of extending it.
	Nested lists and dicts are copied into tuples and read-only mappings.
	Keys may be camelCase (as in the browser) or snake_case. Keys preboot
	doesn't know are kept in ``extra`` and serialized as-is.
	"""
	known: dict[str, Any] = {}
	extra: dict[str, Any] = dict(DEFAULT_OPTIONS.extra)

	for source in (*overrides, values):
		if source is None:
			continue
		for key, value in source.items():
			name = to_snake(key)
			if name in _OPTION_FIELDS:
				known[name] = _freeze(value)
			else:
				extra[key] = _freeze(value)

	opts = replace(DEFAULT_OPTIONS, **known, extra=MappingProxyType(extra))
	validate_options(opts)
	return opts


def _is_selector(value: Any) -> bool:
	return isinstance(value, str) and len(value) > 0


def validate_options(opts: PrebootOptions) -> None:
	"""Raise ConfigurationError if the options can't locate the app root."""
	app_root = opts.app_root
	if isinstance(app_root, str):
		valid = _is_selector(app_root)
	elif isinstance(app_root, Sequence):
		valid = len(app_root) > 0 and all(_is_selector(s) for s in app_root)
	else:
		valid = False

	if not valid:
		raise ConfigurationError(
			"The appRoot is missing from preboot options. "
			+ "This is needed to find the root of your application. "
			+ "Set this value in the preboot options to be a selector for the root element of your app."
		)
	logger.debug("Validated preboot options for appRoot=%r", app_root)


__all__ = [
	"DEFAULT_OPTIONS",
	"EventSelector",
	"PrebootOptions",
	"resolve_options",
	"validate_options",
]
