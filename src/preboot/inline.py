"""Inline preboot code for server rendered pages.

A page embeds one definition block, which declares ``prebootInitFn``, followed
by one invocation statement per app root::

    <script>{get_inline_definition(opts)}</script>
    <app-root>...</app-root>
    <script>{get_inline_invocation(opts)}</script>

The invocation calls a global set by the definition block, so the definition
has to come first in the document. Emitting it once is up to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeAlias

from preboot.codegen.templates import (
	DEFINITION_TEMPLATE,
	INLINE_TEMPLATE,
	INVOCATION_TEMPLATE,
)
from preboot.options import PrebootOptions, resolve_options, validate_options
from preboot.registry import ProcedureRegistry, recorder_registry
from preboot.serializer import serialize

logger = logging.getLogger(__name__)

INIT_FUNCTION_NAME = "prebootInitFn"

CustomOptions: TypeAlias = "Mapping[str, Any] | PrebootOptions | None"


def _resolve(custom_options: CustomOptions) -> PrebootOptions:
	if isinstance(custom_options, PrebootOptions):
		validate_options(custom_options)
		return custom_options
	return resolve_options(custom_options)


def get_inline_definition(
	custom_options: CustomOptions = None,
	*,
	registry: ProcedureRegistry | None = None,
) -> str:
	"""Definition of ``prebootInitFn``, to be emitted once per document.

	Args:
	    custom_options: Overrides for ``DEFAULT_OPTIONS``, or resolved options.
	    registry: Procedures to inline. Defaults to the bundled event recorder.
	"""
	# validated even though the definition doesn't embed them
	_resolve(custom_options)
	if registry is None:
		registry = recorder_registry()

	code = DEFINITION_TEMPLATE.render(
		name=INIT_FUNCTION_NAME,
		registry_source=registry.collect_source(),
		entry_source=registry.entry.source,
	)
	logger.debug("Generated preboot definition (%d chars)", len(code))
	return code


def get_inline_invocation(custom_options: CustomOptions = None) -> str:
	"""Call of ``prebootInitFn`` with the serialized options.

	Each app root gets its own invocation, so different roots can carry
	different options while sharing a single definition block.
	"""
	opts = _resolve(custom_options)
	code = INVOCATION_TEMPLATE.render(
		name=INIT_FUNCTION_NAME, options=serialize(opts)
	)
	logger.debug("Generated preboot invocation for appRoot=%r", opts.app_root)
	return code


def get_inline_code(
	custom_options: CustomOptions = None,
	*,
	registry: ProcedureRegistry | None = None,
) -> str:
	"""Definition and invocation wrapped in a single self-invoking function.

	Only suitable for pages with a single app root: every call repeats the
	whole event recorder. Use ``get_inline_definition`` and
	``get_inline_invocation`` for pages with several roots.
	"""
	opts = _resolve(custom_options)
	return INLINE_TEMPLATE.render(
		definition=get_inline_definition(opts, registry=registry),
		invocation=get_inline_invocation(opts),
	)


__all__ = [
	"INIT_FUNCTION_NAME",
	"get_inline_code",
	"get_inline_definition",
	"get_inline_invocation",
]
