# dead_link_hunter/crawler/link_extractor.py
"""
Anchor extraction for the static engine.
"""
from __future__ import annotations

from typing import List, Union

from bs4 import BeautifulSoup, SoupStrainer
from bs4.element import Tag

# Only <a href> tags are built into the tree.
_ANCHORS = SoupStrainer("a", href=True)


def extract_hrefs(markup: Union[str, bytes]) -> List[str]:
    """
    Return the raw ``href`` value of every anchor, in document order.

    Values are not resolved or filtered here; scripts are not executed and
    iframes are not followed.
    """
    soup = BeautifulSoup(markup, "html.parser", parse_only=_ANCHORS)
    hrefs: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if isinstance(href_val, str):
            hrefs.append(href_val)
    return hrefs
