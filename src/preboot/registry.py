"""Named JavaScript procedures inlined into the preboot definition block.

Procedures are plain source text. The generated code runs in the browser, where
none of the generator's modules or closures exist, so every procedure has to be
self-contained: it may only use its own parameters, browser globals and other
procedures from the same registry.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import cache
from importlib.resources import files

logger = logging.getLogger(__name__)

RECORDER_PACKAGE = "preboot"
RECORDER_DIR = "recorder"

# Functions of the event recorder, in the order they are emitted
RECORDER_PROCEDURES: tuple[str, ...] = (
	"start",
	"createOverlay",
	"getAppRoots",
	"handleEvents",
	"createListenHandler",
	"getSelection",
	"createBuffer",
)
# Used by every recorder function to identify nodes between renders
NODE_KEY_PROCEDURE = "getNodeKeyForPreboot"
# Called with the resolved options by the invocation statement
ENTRY_PROCEDURE = "init"


@dataclass(frozen=True, slots=True)
class Procedure:
	name: str
	source: str

	def __post_init__(self) -> None:
		source = self.source.strip()
		declaration = re.compile(
			rf"(?:async\s+)?function(?:\s*\*\s*|\s+){re.escape(self.name)}\s*\("
		)
		if not declaration.match(source):
			raise ValueError(
				f"Source of procedure '{self.name}' must start with a declaration of "
				+ f"function {self.name}(...)"
			)
		object.__setattr__(self, "source", source)


def _as_procedures(
	procedures: Mapping[str, str] | Iterable[Procedure],
) -> list[Procedure]:
	if isinstance(procedures, Mapping):
		return [Procedure(name, source) for name, source in procedures.items()]
	return list(procedures)


class ProcedureRegistry:
	"""Ordered set of procedures plus the node key helper and the entry point.

	The order of ``procedures`` is the order of the emitted source, which keeps
	the output reproducible. The helper is always emitted last.
	"""

	procedures: tuple[Procedure, ...]
	helper: Procedure
	entry: Procedure

	def __init__(
		self,
		procedures: Mapping[str, str] | Iterable[Procedure],
		*,
		helper: Procedure,
		entry: Procedure,
	) -> None:
		self.procedures = tuple(_as_procedures(procedures))
		self.helper = helper
		self.entry = entry

		seen: set[str] = set()
		for proc in (*self.procedures, helper, entry):
			if proc.name in seen:
				raise ValueError(f"Duplicate procedure name '{proc.name}' in registry")
			seen.add(proc.name)

	@property
	def names(self) -> tuple[str, ...]:
		return tuple(p.name for p in self.procedures) + (self.helper.name,)

	def __contains__(self, name: object) -> bool:
		return name in self.names

	def __len__(self) -> int:
		return len(self.procedures) + 1

	def collect_source(self) -> str:
		"""Source of all procedures, separated by blank lines, helper last."""
		sources = [p.source for p in self.procedures]
		sources.append(self.helper.source)
		return "\n\n" + "\n\n".join(sources) + "\n\n"


def load_procedure(name: str) -> Procedure:
	"""Read a bundled recorder procedure from ``preboot/recorder/<name>.js``."""
	resource = files(RECORDER_PACKAGE) / RECORDER_DIR / f"{name}.js"
	return Procedure(name, resource.read_text(encoding="utf-8"))


@cache
def recorder_registry() -> ProcedureRegistry:
	"""The default event recorder. Loaded once and shared for the process."""
	registry = ProcedureRegistry(
		[load_procedure(name) for name in RECORDER_PROCEDURES],
		helper=load_procedure(NODE_KEY_PROCEDURE),
		entry=load_procedure(ENTRY_PROCEDURE),
	)
	logger.debug("Loaded preboot event recorder: %s", ", ".join(registry.names))
	return registry


__all__ = [
	"ENTRY_PROCEDURE",
	"NODE_KEY_PROCEDURE",
	"RECORDER_PROCEDURES",
	"Procedure",
	"ProcedureRegistry",
	"load_procedure",
	"recorder_registry",
]
