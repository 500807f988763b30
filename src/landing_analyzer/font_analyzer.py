"""
Font Usage Analyzer

Classifies the page's computed font-family declarations as system or web
fonts and scores the load and consistency cost of the mix.
"""

import logging
from typing import Dict, List, Tuple

from landing_analyzer.dictionaries.fonts import SYSTEM_FONT_SET
from landing_analyzer.models import SectionResult
from landing_analyzer.recommendations import get_font_recommendations

logger = logging.getLogger(__name__)


# Unique computed font-family declarations, each stack kept whole
FONT_FAMILIES_SCRIPT = """
() => {
    const declarations = new Set();
    document.querySelectorAll('*').forEach(element => {
        const fontFamily = window.getComputedStyle(element).fontFamily;
        if (fontFamily && fontFamily !== 'inherit') {
            declarations.add(fontFamily);
        }
    });
    return Array.from(declarations);
}
"""


def font_tokens(declaration: str) -> List[str]:
    """Split a font-family stack into unquoted, lowercase family names."""
    tokens = []
    for token in declaration.split(","):
        cleaned = token.strip().strip("'\"").strip().lower()
        if cleaned:
            tokens.append(cleaned)
    return tokens


def is_system_declaration(declaration: str) -> bool:
    """True when every family in the stack ships with the OS or is generic."""
    tokens = font_tokens(declaration)
    return bool(tokens) and all(token in SYSTEM_FONT_SET for token in tokens)


def classify_fonts(declarations: List[str]) -> Tuple[List[str], List[str]]:
    """
    Split declarations into (system, web).

    Args:
        declarations: Computed font-family values

    Returns:
        Tuple of system declarations and web declarations, in input order
    """
    system_fonts, web_fonts = [], []
    for declaration in declarations:
        if is_system_declaration(declaration):
            system_fonts.append(declaration)
        else:
            web_fonts.append(declaration)
    return system_fonts, web_fonts


def calculate_font_score(system_count: int, web_count: int) -> int:
    score = 100

    # Web fonts cost network requests; system fonts only cost consistency
    if web_count > 2:
        score -= (web_count - 2) * 15
    elif web_count == 2:
        score -= 5

    if system_count > 3:
        score -= (system_count - 3) * 5

    if web_count == 0 and system_count <= 3:
        score = min(100, score + 5)

    return max(0, min(100, score))


def font_issues(system_count: int, web_count: int) -> List[str]:
    issues = []
    if web_count > 2:
        issues.append(
            f"Too many web fonts detected ({web_count}). Each web font requires additional "
            "network requests and can slow page loading."
        )
    if system_count > 5:
        issues.append(
            f"Excessive system font variety ({system_count}) can create visual inconsistency "
            "despite not affecting performance."
        )
    if web_count > 3:
        issues.append(
            "Excessive web font usage may significantly impact page performance and user experience."
        )
    return issues


class FontAnalyzer:
    """Font usage analysis on a loaded page."""

    async def collect(self, page) -> List[str]:
        declarations = await page.evaluate(FONT_FAMILIES_SCRIPT)
        return [d for d in (declarations or []) if d and d != "inherit"]

    def evaluate(self, declarations: List[str], url: str = "") -> SectionResult:
        # Keep first occurrence order while de-duplicating
        declarations = list(dict.fromkeys(declarations))
        system_fonts, web_fonts = classify_fonts(declarations)
        system_count, web_count = len(system_fonts), len(web_fonts)

        context: Dict = {
            "webFontCount": web_count,
            "systemFontCount": system_count,
            "fontCount": len(declarations),
            "fontFamilies": declarations,
            "url": url,
        }

        return SectionResult(
            score=calculate_font_score(system_count, web_count),
            issues=font_issues(system_count, web_count),
            recommendations=get_font_recommendations(context).legacy_strings,
            metrics={
                "font_families": declarations,
                "system_fonts": system_fonts,
                "web_fonts": web_fonts,
                "context": context,
            },
        )

    async def analyze(self, page, url: str = "") -> SectionResult:
        """Collect declarations from page and score them."""
        declarations = await self.collect(page)
        logger.info(
            f"Found {len(declarations)} unique font-family declarations on {url or 'page'}"
        )
        return self.evaluate(declarations, url)
