"""Resolve handler and controller descriptions, with first-sentence summaries."""

import inspect
from typing import Callable

from api_spec_scanner.registry.bindings import DESCRIPTION_ATTR, ApiDescription

from .base import DescriptionInfo

SUMMARY_MAX_LENGTH = 100
SENTENCE_TERMINATORS = ".?!"


def first_sentence(text: str) -> str:
    """Return the first sentence of ``text`` for use as a summary.

    The sentence ends at the first ``.``, ``?`` or ``!``. When there is no
    terminator before the end of the text, the whole text is used, cut to
    100 characters plus ``...`` if longer.
    """
    if not text:
        return ""

    end = -1
    for i, c in enumerate(text):
        if c in SENTENCE_TERMINATORS:
            end = i + 1
            break

    if 0 < end < len(text):
        return text[:end].strip()
    if len(text) > SUMMARY_MAX_LENGTH:
        return text[:SUMMARY_MAX_LENGTH] + "..."
    return text


def _from_annotation(annotation: ApiDescription) -> DescriptionInfo:
    info = DescriptionInfo()
    if annotation.value:
        info.description = annotation.value
    if annotation.summary:
        info.summary = annotation.summary
    elif annotation.value:
        info.summary = first_sentence(annotation.value)
    return info


class DescriptionResolver:
    """Resolve the description of a handler.

    A handler-level ``api_description`` replaces the class-level one. With
    ``use_docstrings``, docstrings stand in for missing decorators in the
    same order.
    """

    def __init__(self, use_docstrings: bool = False):
        self.use_docstrings = use_docstrings

    def resolve(self, func: Callable, owner: type | None = None) -> DescriptionInfo | None:
        for target in (func, owner):
            if target is None:
                continue
            annotation = getattr(target, DESCRIPTION_ATTR, None)
            if isinstance(annotation, ApiDescription):
                return self._non_empty(_from_annotation(annotation))

        if self.use_docstrings:
            for target in (func, owner):
                if target is None:
                    continue
                # __doc__ rather than getdoc(): inherited docstrings do not count
                doc = getattr(target, "__doc__", None)
                if doc:
                    return _from_annotation(ApiDescription(value=inspect.cleandoc(doc)))
        return None

    def _non_empty(self, info: DescriptionInfo) -> DescriptionInfo | None:
        if info.description is None and info.summary is None:
            return None
        return info
