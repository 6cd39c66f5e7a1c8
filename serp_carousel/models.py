"""Data models used throughout the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ItemRecord:
    """One entity recovered from a carousel item container."""

    name: Optional[str]
    extensions: List[str] = field(default_factory=list)
    link: Optional[str] = None
    img: Optional[str] = None
    date: Optional[str] = None

    def to_dict(self, include_date: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name}
        if include_date:
            data["date"] = self.date
        data["extensions"] = list(self.extensions)
        data["link"] = self.link
        data["img"] = self.img
        return data


@dataclass(frozen=True)
class ExtractionProfile:
    """Result key and selector scope chosen for one carousel type."""

    kind: str
    results_key: str
    root_selector: str
    container_selector: str = "div"
    split_date: bool = False
