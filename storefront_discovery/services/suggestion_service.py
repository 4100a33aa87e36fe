"""
Suggestion service — alternative queries for searches that found nothing.

Suggestion pipeline:
1. Harvest correctly spelled product terms from a lenient index lookup
2. Return the close ones directly when there are enough of them
3. Otherwise ask the text generator to correct the query, using the
   harvested terms as context, and merge both sources

The generator is any object with ``async generate(prompt) -> str``
(GeminiClient in production). Its failure degrades to the harvested terms;
index failures propagate so the caller can degrade to an empty list.
"""
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol

from storefront_discovery.clients.typesense_client import TypesenseClient
from storefront_discovery.core.constants.suggestions import (
    COLORS,
    GENERATION_INSTRUCTIONS,
    HIGH_QUALITY_SIMILARITY,
    MAX_SIMILARITY_TO_QUERY,
    MAX_SUGGESTIONS,
    PREFIX_PRODUCTS_PARAMS,
    SIMILAR_PRODUCTS_PARAMS,
    STOP_WORDS,
)

logger = logging.getLogger(__name__)

_DUPLICATE_NOTE = re.compile(r"\s*\(duplicate\)", re.IGNORECASE)
_DUPLICATE_REMARK = re.compile(r"\s*\(.*?duplicate.*?\)", re.IGNORECASE)
_CORRECTION_REMARK = re.compile(r"\s*\((?:[^)]*(corrected|original|same)\b[^)]*)\)", re.IGNORECASE)
_CORRECTED_AS = re.compile(r"\s+corrected\s+as\s+.+$", re.IGNORECASE)
_LIST_MARKER = re.compile(r"^[\d\-•*.\s\"']+")
_TRAILING_QUOTES = re.compile(r"[\"']+$")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")
_PUNCTUATION = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


@dataclass
class Candidate:
    term: str
    similarity: float
    source: str


def calculate_similarity(first: str, second: str) -> float:
    """Score how alike two strings look, 0-100."""
    s1, s2 = first.lower(), second.lower()

    if s1 == s2:
        return 100
    if s1 in s2 or s2 in s1:
        return 80

    longer, shorter = (s1, s2) if len(s1) > len(s2) else (s2, s1)

    # characters of the shorter string found in order in the longer one
    matches = 0
    position = 0
    for char in shorter:
        found = longer.find(char, position)
        if found != -1:
            matches += 1
            position = found + 1

    similarity = matches / len(longer) * 60

    length_diff = len(longer) - len(shorter)
    if length_diff <= 1:
        similarity += 20
    elif length_diff <= 2:
        similarity += 10
    elif length_diff <= 3:
        similarity += 5

    if s1[0] == s2[0]:
        similarity += 10

    longest_common = 0
    for i in range(len(shorter)):
        for j in range(i + 2, len(shorter) + 1):
            if j - i > longest_common and shorter[i:j] in longer:
                longest_common = j - i
    similarity += longest_common * 2

    return min(100, similarity)


def is_meaningful(suggestion: Optional[str]) -> bool:
    """Reject suggestions made only of stop words and/or colour names."""
    if not suggestion:
        return False
    words = suggestion.lower().split()
    if not words:
        return False
    return not all(word in STOP_WORDS or word in COLORS for word in words)


def is_acceptable(original_query: str, term: str) -> bool:
    if not is_meaningful(term):
        return False
    if term.lower().strip() == original_query.lower().strip():
        return False
    return calculate_similarity(original_query, term) <= MAX_SIMILARITY_TO_QUERY


def clean_suggestion_text(text: str) -> str:
    if not text:
        return ""
    text = _CORRECTION_REMARK.sub("", text)
    return _CORRECTED_AS.sub("", text).strip()


def extract_candidates(original_query: str, hits: Iterable[Dict[str, Any]]) -> List[Candidate]:
    """Collect product terms from index hits, best match first."""
    candidates: List[Candidate] = []
    seen: set[str] = set()

    def add(term: Optional[str], source: str) -> None:
        if not term:
            return
        cleaned = _DUPLICATE_NOTE.sub("", term).strip()
        lowered = cleaned.lower()
        if 2 <= len(cleaned) < 45 and lowered not in seen:
            seen.add(lowered)
            candidates.append(Candidate(cleaned, calculate_similarity(original_query, cleaned), source))

    for hit in hits:
        document = hit.get("document") or {}
        title = (document.get("title") or "").strip()
        if title:
            words = title.split()
            if len(title) < 45:
                add(title, "full_title")
            if len(words) >= 2:
                add(" ".join(words[:2]), "title_start")
            if len(words) >= 3:
                add(" ".join(words[:3]), "title_start")
            for word in words:
                clean_word = _NON_ALNUM.sub("", word)
                if 4 <= len(clean_word) < 25 and clean_word[0].isascii() and clean_word[0].isalpha():
                    add(clean_word, "word")

        vendor = document.get("vendor")
        if isinstance(vendor, str) and len(vendor) < 30:
            add(vendor, "vendor")

    candidates.sort(key=lambda c: c.similarity, reverse=True)
    return candidates


def parse_generated_suggestions(original_query: str, text: str) -> List[str]:
    """Turn the generator's one-per-line answer into clean suggestions."""
    suggestions: List[str] = []
    for line in (text or "").split("\n"):
        line = _LIST_MARKER.sub("", line.strip())
        line = _TRAILING_QUOTES.sub("", line).strip()
        line = _DUPLICATE_NOTE.sub("", line).strip()
        line = _DUPLICATE_REMARK.sub("", line).strip()
        line = clean_suggestion_text(line)
        if 2 <= len(line) < 50 and is_acceptable(original_query, line):
            suggestions.append(line)
    return suggestions[:MAX_SUGGESTIONS]


def _fold(text: str) -> str:
    return _WHITESPACE.sub(" ", _PUNCTUATION.sub(" ", text)).strip()


def merge_suggestions(original_query: str, generated: List[str], candidates: List[Candidate]) -> List[str]:
    """Combine generated and harvested terms, dropping near-duplicates."""
    pool = [Candidate(term, calculate_similarity(original_query, term), "generated") for term in generated]
    pool.extend(candidates)

    cleaned: List[Candidate] = []
    for candidate in pool:
        term = clean_suggestion_text(_DUPLICATE_NOTE.sub("", candidate.term).strip())
        if term:
            cleaned.append(Candidate(term, candidate.similarity, candidate.source))
    cleaned.sort(key=lambda c: c.similarity, reverse=True)

    unique: List[str] = []
    folded_seen: List[str] = []
    for candidate in cleaned:
        if len(unique) >= MAX_SUGGESTIONS:
            break
        if not is_acceptable(original_query, candidate.term):
            continue
        current = _fold(candidate.term.lower().strip())
        duplicate = any(
            existing == current
            or (current in existing and len(current) >= 5)
            or (existing in current and len(existing) >= 5)
            for existing in folded_seen
        )
        if not duplicate:
            folded_seen.append(current)
            unique.append(candidate.term)
    return unique


class SuggestionService:
    def __init__(
        self,
        client_provider: Callable[[], TypesenseClient],
        generator: Optional[TextGenerator],
        collection: str = "products",
    ):
        self._client_provider = client_provider
        self._generator = generator
        self._collection = collection

    async def _prefix_terms(self, client: TypesenseClient, first_char: str) -> List[str]:
        params = {"q": first_char, **PREFIX_PRODUCTS_PARAMS}
        result = await client.search_documents(self._collection, params)
        terms: List[str] = []
        for hit in result.get("hits") or []:
            words = ((hit.get("document") or {}).get("title") or "").split()
            if len(words) >= 2:
                terms.append(" ".join(words[:2]))
        return terms[:4]

    async def suggest(self, original_query: str) -> List[str]:
        query = (original_query or "").strip()
        if not query or self._generator is None:
            return []

        client = self._client_provider()
        similar = await client.search_documents(self._collection, {"q": query, **SIMILAR_PRODUCTS_PARAMS})
        candidates = extract_candidates(query, similar.get("hits") or [])
        fallback = [c.term for c in candidates if is_acceptable(query, c.term)][:MAX_SUGGESTIONS]

        high_quality = [
            c.term for c in candidates
            if c.similarity > HIGH_QUALITY_SIMILARITY and is_acceptable(query, c.term)
        ]
        if len(high_quality) >= 2:
            logger.info(f"suggestions q={query!r} source=index count={len(high_quality[:MAX_SUGGESTIONS])}")
            return high_quality[:MAX_SUGGESTIONS]

        context_terms = [c.term for c in candidates[:MAX_SUGGESTIONS] if len(c.term) >= 3]
        if not context_terms and len(query) >= 2:
            context_terms = await self._prefix_terms(client, query[0].lower())
        if not context_terms:
            return fallback

        prompt = f'{GENERATION_INSTRUCTIONS}\n\n"{query}" Products: {", ".join(context_terms)}'
        try:
            text = await self._generator.generate(prompt)
        except Exception as e:
            logger.warning(f"suggestion generation failed q={query!r}: {e}")
            return fallback

        merged = merge_suggestions(query, parse_generated_suggestions(query, text), candidates)
        logger.info(f"suggestions q={query!r} source=generator count={len(merged)}")
        return merged or fallback
