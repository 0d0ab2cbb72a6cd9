# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from typing import Optional, TypeAlias

from tazita.model.collection import Collection


@dataclass(frozen=True)
class Loaded:
    collection: Collection


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Saved:
    pass


@dataclass(frozen=True)
class Failure:
    reason: str
    status_code: Optional[int] = None


LoadResult: TypeAlias = Loaded | NotFound | Failure
SaveResult: TypeAlias = Saved | Failure
