from .errors import ConfigurationError
from .functions import JsFunction, js_function
from .inline import (
	INIT_FUNCTION_NAME,
	get_inline_code,
	get_inline_definition,
	get_inline_invocation,
)
from .options import (
	DEFAULT_OPTIONS,
	EventSelector,
	PrebootOptions,
	resolve_options,
	validate_options,
)
from .registry import Procedure, ProcedureRegistry, recorder_registry
from .serializer import serialize
from .version import __version__

__all__ = [
	"ConfigurationError",
	"DEFAULT_OPTIONS",
	"EventSelector",
	"INIT_FUNCTION_NAME",
	"JsFunction",
	"PrebootOptions",
	"Procedure",
	"ProcedureRegistry",
	"__version__",
	"get_inline_code",
	"get_inline_definition",
	"get_inline_invocation",
	"js_function",
	"recorder_registry",
	"resolve_options",
	"serialize",
	"validate_options",
]
