# ABOUTME: BeautifulSoup helpers shared by the per-source HTML parsers.
# ABOUTME: Text and link extraction that tolerates missing elements.

from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag


def load_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def select_text(element: Tag, selector: str) -> str | None:
    """Stripped text of the first match for ``selector``, or None if missing or blank."""
    found = element.select_one(selector)
    if found is None:
        return None
    text = found.get_text(" ", strip=True)
    return text or None


def select_link(element: Tag, selector: str, base_url: str) -> str:
    """Absolute href of the first match for ``selector``, falling back to ``base_url``."""
    found = element.select_one(selector)
    if found is None:
        return base_url
    href = found.get("href")
    if not isinstance(href, str) or not href.strip():
        return base_url
    return urljoin(base_url, href.strip())
