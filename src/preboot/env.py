"""Process-level settings read from environment variables."""

from __future__ import annotations

import os
from typing import Literal, TypeAlias

ENV_PREBOOT_APP_ROOT = "PREBOOT_APP_ROOT"
ENV_PREBOOT_LOG_LEVEL = "PREBOOT_LOG_LEVEL"

LogLevel: TypeAlias = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_LOG_LEVELS: tuple[LogLevel, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PrebootEnv:
	def _get(self, key: str) -> str | None:
		return os.environ.get(key)

	def _set(self, key: str, value: str | None) -> None:
		if value is None:
			os.environ.pop(key, None)
		else:
			os.environ[key] = value

	@property
	def app_root(self) -> str | None:
		"""Default app root selector for the command line."""
		return self._get(ENV_PREBOOT_APP_ROOT) or None

	@app_root.setter
	def app_root(self, value: str | None) -> None:
		self._set(ENV_PREBOOT_APP_ROOT, value)

	@property
	def log_level(self) -> LogLevel:
		value = (self._get(ENV_PREBOOT_LOG_LEVEL) or "WARNING").upper()
		if value in _LOG_LEVELS:
			return value  # pyright: ignore[reportReturnType]
		return "WARNING"

	@log_level.setter
	def log_level(self, value: LogLevel | None) -> None:
		self._set(ENV_PREBOOT_LOG_LEVEL, value)

	def update(
		self,
		*,
		app_root: str | None = None,
		log_level: LogLevel | None = None,
	) -> None:
		"""Set several values at once. ``None`` leaves a value untouched."""
		if app_root is not None:
			self.app_root = app_root
		if log_level is not None:
			self.log_level = log_level


env = PrebootEnv()

__all__ = [
	"ENV_PREBOOT_APP_ROOT",
	"ENV_PREBOOT_LOG_LEVEL",
	"LogLevel",
	"PrebootEnv",
	"env",
]
