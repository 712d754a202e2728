import re

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_camel(name: str) -> str:
	"""``event_selectors`` -> ``eventSelectors``"""
	head, *rest = name.split("_")
	return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_snake(name: str) -> str:
	"""``eventSelectors`` -> ``event_selectors``"""
	return _CAMEL_BOUNDARY.sub("_", name).lower()
