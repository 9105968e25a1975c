"""Wire schema of the mirroring engine's issue endpoint."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

log = logging.getLogger(__name__)


class MirrorBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "Mirror %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class IssuePayload(MirrorBaseModel):
    id: str | int
    title: str
    message: str | None = None
    # loosely typed so unknown or non-text states survive validation
    state: str | int | float | bool | None = None
    options: list[str] | None = None
    progress: float | None = None
    progress_text: str | None = Field(default=None, alias="progressText")


class ResolvePayload(BaseModel):
    id: str | int
    choice: str


IssueListAdapter = TypeAdapter(list[IssuePayload])
