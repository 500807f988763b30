"""
Page metadata for the report header.

Reads the document title, meta description and JSON-LD blocks from the
already-navigated page in one evaluate call. JSON-LD is parsed here so a
broken block only costs that block.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from landing_analyzer.models import PageMetadata

logger = logging.getLogger(__name__)


PAGE_METADATA_SCRIPT = """
() => {
    const descriptionMeta = document.querySelector('meta[name="description"]');
    return {
        title: (document.title || '').trim(),
        description: ((descriptionMeta && descriptionMeta.getAttribute('content')) || '').trim(),
        url: window.location.href,
        jsonLd: Array.from(
            document.querySelectorAll('script[type="application/ld+json"]')
        ).map(script => script.textContent || '')
    };
}
"""


def _schema_items(data: Any) -> List[Dict[str, Any]]:
    items = data if isinstance(data, list) else [data]
    return [item for item in items if isinstance(item, dict)]


def _schema_summary(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": item.get("name"),
        "description": item.get("description"),
        "organization": item,
    }


def select_schema(blocks: List[str]) -> Optional[Dict[str, Any]]:
    """
    Pick the schema that best describes the site.

    The first Organization wins. A named WebSite is used only when no
    Organization appears in the same block or an earlier one.

    Args:
        blocks: Raw text of each application/ld+json script

    Returns:
        Dict with name, description and the full item, or None
    """
    for block in blocks:
        try:
            data = json.loads(block)
        except json.JSONDecodeError as e:
            logger.debug(f"Skipping invalid JSON-LD block: {str(e)[:100]}")
            continue

        schema = None
        for item in _schema_items(data):
            if item.get("@type") == "Organization":
                schema = _schema_summary(item)
                break
            if item.get("@type") == "WebSite" and item.get("name") and schema is None:
                schema = _schema_summary(item)
        if schema:
            return schema
    return None


def build_metadata(raw: Dict[str, Any], url: str) -> PageMetadata:
    """PageMetadata from the evaluate payload; url fills in a missing location."""
    raw = raw if isinstance(raw, dict) else {}
    blocks = [block for block in raw.get("jsonLd") or [] if isinstance(block, str)]
    return PageMetadata(
        title=str(raw.get("title") or "").strip(),
        description=str(raw.get("description") or "").strip(),
        url=raw.get("url") or url,
        schema=select_schema(blocks),
    )


async def extract_page_metadata(page, url: str) -> PageMetadata:
    raw = await page.evaluate(PAGE_METADATA_SCRIPT)
    metadata = build_metadata(raw, url)
    logger.debug(f"Page metadata for {url}: title={metadata.title!r}")
    return metadata
