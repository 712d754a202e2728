from __future__ import annotations


class ConfigurationError(ValueError):
	"""Raised when preboot options cannot be used to generate inline code."""

	field: str

	def __init__(self, message: str, *, field: str = "appRoot") -> None:
		super().__init__(message)
		self.field = field


__all__ = ["ConfigurationError"]
