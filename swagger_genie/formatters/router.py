"""Formatter for Router directives: ``<path> [<method>]``."""

from __future__ import annotations

from typing import Sequence, cast

from swagger_genie.core.ir import Record, RouterRecord, Tag
from swagger_genie.core.resolver import resolve_router
from swagger_genie.formatters.base import BaseFormatter


class RouterFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "Router"

    def resolve(self, tag: Tag, tokens: Sequence[str]) -> Record:
        return resolve_router(tokens)

    def render(self, record: Record) -> str:
        router = cast(RouterRecord, record)
        return "{} [{}]".format(router.path, router.method)
