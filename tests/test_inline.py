"""
Tests for the inline code blocks embedded in server rendered pages.
"""

import pytest
from preboot.errors import ConfigurationError
from preboot.functions import JsFunction
from preboot.inline import (
	INIT_FUNCTION_NAME,
	get_inline_code,
	get_inline_definition,
	get_inline_invocation,
)
from preboot.options import DEFAULT_OPTIONS, EventSelector, resolve_options
from preboot.registry import Procedure, ProcedureRegistry, recorder_registry
from preboot.serializer import serialize
from preboot.testing import get_mock_element, get_mock_options


@pytest.fixture
def registry() -> ProcedureRegistry:
	return ProcedureRegistry(
		{"record": "function record(opts) { return key(opts); }"},
		helper=Procedure("key", "function key(ctx) { return 'k'; }"),
		entry=Procedure("boot", "function boot(opts) { record(opts); }"),
	)


# =============================================================================
# Definition
# =============================================================================


class TestDefinition:
	def test_format(self, registry: ProcedureRegistry):
		code = get_inline_definition({"appRoot": "app"}, registry=registry)
		assert code.startswith(f"var {INIT_FUNCTION_NAME} = (function() {{")
		assert registry.collect_source() in code
		assert code.endswith("return (function boot(opts) { record(opts); });\n    })();")

	def test_registry_precedes_entry(self, registry: ProcedureRegistry):
		code = get_inline_definition({"appRoot": "app"}, registry=registry)
		assert code.index("function record(") < code.index("function key(")
		assert code.index("function key(") < code.index("return (function boot(")

	def test_default_registry(self):
		code = get_inline_definition({"appRoot": "app"})
		registry = recorder_registry()
		for name in registry.names:
			assert f"function {name}(" in code
		assert "return (function init(opts)" in code

	def test_idempotent(self):
		first = get_inline_definition({"appRoot": "app"})
		second = get_inline_definition({"appRoot": "app"})
		assert first == second

	def test_options_do_not_change_definition(self):
		assert get_inline_definition({"appRoot": "app"}) == get_inline_definition(
			{"appRoot": "#other", "buffer": False}
		)

	def test_requires_app_root(self):
		with pytest.raises(ConfigurationError):
			get_inline_definition()
		with pytest.raises(ConfigurationError):
			get_inline_definition({})


# =============================================================================
# Invocation
# =============================================================================


class TestInvocation:
	def test_example_configuration(self):
		code = get_inline_invocation(
			{
				"appRoot": "app",
				"buffer": True,
				"eventSelectors": [{"selector": "input", "events": ["change"]}],
			}
		)
		assert code.startswith(f"{INIT_FUNCTION_NAME}(")
		assert code.endswith(");")
		assert '"appRoot":"app"' in code
		assert '"buffer":true' in code
		assert '"eventSelectors":[{"selector":"input","events":["change"]}]' in code

	def test_format(self):
		opts = resolve_options({"appRoot": "app"})
		assert get_inline_invocation(opts) == f"prebootInitFn({serialize(opts)});"

	def test_requires_app_root(self):
		with pytest.raises(ConfigurationError):
			get_inline_invocation({})

	def test_resolved_options_are_revalidated(self):
		with pytest.raises(ConfigurationError):
			get_inline_invocation(DEFAULT_OPTIONS)

	def test_distinct_roots(self):
		first = get_inline_invocation({"appRoot": "#first"})
		second = get_inline_invocation({"appRoot": "#second", "replay": False})
		assert '"appRoot":"#first"' in first
		assert '"appRoot":"#second"' in second
		assert '"replay":false' in second
		assert '"replay":true' in first

	def test_action_is_a_live_function(self):
		selector = EventSelector(
			selector="button",
			events=("click",),
			action=JsFunction("function (node, event) { node.blur(); }"),
		)
		code = get_inline_invocation({"appRoot": "app", "eventSelectors": [selector]})
		assert '"action":function (node, event) { node.blur(); }' in code

	def test_mock_options(self):
		code = get_inline_invocation(get_mock_options())
		assert '"appRoot":"app"' in code
		assert '"window":{"prebootData":{},"prebootStarted":false}' in code

	def test_mock_options_overrides(self):
		opts = get_mock_options(buffer=False)
		assert opts.buffer is False
		assert opts.app_root == "app"

	def test_mock_element(self):
		code = get_inline_invocation({"appRoot": "app", "element": get_mock_element()})
		assert (
			'"element":{"cloneNode":function () { return { style: {} }; },'
			+ '"parentNode":{"insertBefore":function () {}}}'
		) in code


# =============================================================================
# Combined block
# =============================================================================


class TestInlineCode:
	def test_format(self, registry: ProcedureRegistry):
		opts = {"appRoot": "app"}
		code = get_inline_code(opts, registry=registry)
		definition = get_inline_definition(opts, registry=registry)
		invocation = get_inline_invocation(opts)

		assert code.startswith("(function() {")
		assert code.endswith("})()")
		assert definition in code
		assert invocation in code
		assert code.index(definition) < code.index(invocation)

	def test_default_registry(self):
		code = get_inline_code({"appRoot": "app"})
		assert "var prebootInitFn = (function() {" in code
		assert 'prebootInitFn({"appRoot":"app"' in code

	def test_requires_app_root(self):
		with pytest.raises(ConfigurationError):
			get_inline_code({"buffer": False})

	def test_deterministic(self):
		assert get_inline_code({"appRoot": "app"}) == get_inline_code({"appRoot": "app"})
