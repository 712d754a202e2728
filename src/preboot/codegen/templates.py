from mako.template import Template

# Defines the entry function once per document. The registry functions are
# scoped inside the wrapper; only `${name}` ends up as a global.
DEFINITION_TEMPLATE = Template(
	"""var ${name} = (function() {
      ${registry_source}
      return (${entry_source});
    })();"""
)

# One per app root, after the definition block
INVOCATION_TEMPLATE = Template("""${name}(${options});""")

# Definition and invocation in a single self-invoking block
INLINE_TEMPLATE = Template(
	"""(function() {
      ${definition}
      ${invocation}
    })()"""
)
