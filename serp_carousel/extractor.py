"""High-level orchestration: classify a page and extract its carousel items."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from bs4 import BeautifulSoup, Tag

from .classifier import classify_document, get_profile
from .config import ExtractionConfig
from .document import load_document
from .fields import extract_date, extract_extensions, extract_name_and_date
from .images import ScriptCorpus, resolve_image
from .links import extract_link
from .locator import find_carousel_root, find_item_containers
from .models import ExtractionProfile, ItemRecord

logger = logging.getLogger("serp_carousel")

Results = Dict[str, List[Dict[str, Any]]]


class CarouselExtractor:
    """Extract item records from one parsed results page."""

    def __init__(
        self,
        soup: BeautifulSoup,
        profile: Optional[ExtractionProfile] = None,
        config: Optional[ExtractionConfig] = None,
    ) -> None:
        self.soup = soup
        self.config = config or ExtractionConfig()
        self.profile = profile or classify_document(soup)
        self.scripts = ScriptCorpus(soup)

    @classmethod
    def from_source(
        cls,
        html_content: Optional[Union[str, bytes]] = None,
        file_path: Optional[Union[str, Path]] = None,
        profile: Optional[ExtractionProfile] = None,
        config: Optional[ExtractionConfig] = None,
    ) -> "CarouselExtractor":
        config = config or ExtractionConfig()
        soup = load_document(html_content, file_path, parser=config.parser)
        return cls(soup, profile=profile, config=config)

    def item_containers(self) -> List[Tag]:
        root = find_carousel_root(self.soup, self.profile.root_selector)
        if root is None:
            logger.debug("No carousel root matches %s", self.profile.root_selector)
            return []
        return find_item_containers(root, self.profile.container_selector)

    def extract_item(self, container: Tag) -> ItemRecord:
        name, year = extract_name_and_date(container)
        date = extract_date(container, year) if self.profile.split_date else None
        extensions = extract_extensions(
            container,
            name,
            max_chars=self.config.max_extension_chars,
            exclude=(date,) if date else (),
        )
        return ItemRecord(
            name=name,
            date=date,
            extensions=extensions,
            link=extract_link(container, self.config),
            img=resolve_image(container, self.scripts),
        )

    def records(self) -> List[ItemRecord]:
        containers = self.item_containers()
        records = []
        for container in containers:
            record = self.extract_item(container)
            if record.name:
                records.append(record)
        logger.debug(
            "Kept %d of %d item container(s) for %s profile",
            len(records),
            len(containers),
            self.profile.kind,
        )
        return records

    def extract(self) -> Results:
        """Return ``{results_key: [item, ...]}`` for the selected profile."""
        include_date = self.profile.split_date
        return {
            self.profile.results_key: [
                record.to_dict(include_date=include_date) for record in self.records()
            ]
        }


def extract_carousel(
    html_content: Optional[Union[str, bytes]] = None,
    file_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    config: Optional[ExtractionConfig] = None,
) -> Results:
    """Parse a page and return its carousel items.

    ``profile`` forces a profile by name instead of classifying the page.
    """
    chosen = get_profile(profile) if profile else None
    extractor = CarouselExtractor.from_source(
        html_content, file_path, profile=chosen, config=config
    )
    return extractor.extract()
