"""Locate the carousel root and its innermost item containers."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Set

from bs4 import BeautifulSoup, Tag


def find_carousel_root(soup: BeautifulSoup, selector: str) -> Optional[Tag]:
    return soup.select_one(selector)


def has_link_and_image(node: Tag) -> bool:
    """True when ``node`` holds at least one ``<a>`` and one ``<img>``."""
    return node.find("a") is not None and node.find("img") is not None


def _qualifying_divs(nodes, visited: Set[int], exclude: Optional[Tag] = None) -> List[Tag]:
    return [
        node
        for node in nodes
        if node is not exclude
        and id(node) not in visited
        and has_link_and_image(node)
    ]


def find_item_containers(root: Tag, container_selector: str = "div") -> List[Tag]:
    """Walk ``root`` breadth-first and return the innermost link+image nodes.

    A node is recorded only once none of its direct ``div`` children still
    carry both a link and an image. When a branch bottoms out the walk fans
    out to the node's qualifying ``div`` siblings. Results follow dequeue
    order. Nodes are tracked by identity so each is processed at most once.
    """
    visited: Set[int] = set()
    recorded: Set[int] = set()
    containers: List[Tag] = []

    queue: Deque[Tag] = deque(
        node for node in root.select(container_selector) if has_link_and_image(node)
    )

    while queue:
        current = queue.popleft()
        if id(current) in visited or not has_link_and_image(current):
            continue
        visited.add(id(current))

        children = _qualifying_divs(current.find_all("div", recursive=False), visited)
        if children:
            queue.extend(children)
            continue

        if id(current) not in recorded:
            recorded.add(id(current))
            containers.append(current)

        parent = current.parent
        if parent is not None:
            queue.extend(
                _qualifying_divs(
                    parent.find_all("div", recursive=False), visited, exclude=current
                )
            )

    return containers
