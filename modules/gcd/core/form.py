from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Tuple
from urllib.parse import parse_qsl

from modules.gcd.core.errors import FormDecodeError

FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"
MAX_FIELDS = 1000


class FormData:
    """Field name to ordered values, as submitted."""

    def __init__(self, pairs: Iterable[Tuple[str, str]] = ()) -> None:
        self._fields: Dict[str, List[str]] = {}
        for name, value in pairs:
            self._fields.setdefault(name, []).append(value)

    def get(self, name: str) -> List[str] | None:
        values = self._fields.get(name)
        if values is None:
            return None
        return list(values)

    def names(self) -> List[str]:
        return list(self._fields.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FormData({self._fields!r})"


def _media_type(content_type: str) -> str:
    return content_type.split(";", 1)[0].strip().lower()


def parse_form(body: bytes, content_type: str | None = None) -> FormData:
    if content_type is not None and _media_type(content_type) != FORM_MEDIA_TYPE:
        raise FormDecodeError(f"unsupported content type {content_type!r}")
    if not body:
        raise FormDecodeError("empty form body")

    try:
        text = body.decode("ascii")
    except UnicodeDecodeError as exc:
        raise FormDecodeError(f"body is not URL-encoded ({exc.reason})") from exc

    try:
        pairs = parse_qsl(
            text,
            keep_blank_values=True,
            encoding="utf-8",
            errors="strict",
            max_num_fields=MAX_FIELDS,
        )
    except ValueError as exc:
        # UnicodeDecodeError from a bad percent escape lands here too.
        raise FormDecodeError(str(exc)) from exc
    return FormData(pairs)
