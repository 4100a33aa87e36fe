"""
Suggestion constants — lookup policy, limits and the word lists used to
reject meaningless suggestions.
"""

MAX_SUGGESTIONS: int = 6

# Candidates scoring above this are returned without asking the text generator
HIGH_QUALITY_SIMILARITY: int = 40
# Candidates scoring above this are treated as the same typo as the query
MAX_SIMILARITY_TO_QUERY: int = 90

# Lenient lookup used to harvest correctly spelled product terms
SIMILAR_PRODUCTS_PARAMS: dict[str, object] = {
    "query_by": "title,sku,handle,tags",
    "per_page": 12,
    "num_typos": 4,
    "prefix": True,
    "infix": "always",
    "drop_tokens_threshold": 0,
}

PREFIX_PRODUCTS_PARAMS: dict[str, object] = {
    "query_by": "title",
    "per_page": 4,
    "prefix": True,
}

GENERATION_INSTRUCTIONS: str = (
    "Correct spelling errors in the query to match product names. "
    "Return 6 corrected queries, one per line. Do NOT return the original query. "
    "Return only the corrected query text with no extra words or explanations."
)

STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "from", "as", "is", "was", "are", "were", "been", "be",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "must", "can", "this", "that", "these", "those",
    "i", "you", "he", "she", "it", "we", "they", "what", "which", "who",
    "when", "where", "why", "how", "all", "each", "every", "some", "any",
    "no", "not", "only", "just", "more", "most", "many", "much", "few",
    "little", "other", "another", "same", "different", "new", "old", "good",
    "bad", "best", "better", "big", "small", "large", "long", "short", "high",
    "low", "great", "very", "too", "so", "such", "here", "there", "up",
    "down", "out", "off", "over", "under", "again", "further", "then", "once",
    "about", "into", "through", "during", "before", "after", "above", "below",
    "between", "among", "within", "without", "throughout", "beside",
    "besides", "beyond", "across", "around", "near", "far", "inside",
    "outside", "behind", "toward", "towards", "upon", "against", "along",
    "amid", "amongst", "amidst", "via", "per", "plus", "minus", "except",
    "including", "excluding", "concerning", "regarding", "considering",
    "following", "according", "depending",
})

COLORS: frozenset[str] = frozenset({
    "red", "blue", "green", "yellow", "orange", "purple", "pink", "brown",
    "black", "white", "gray", "grey", "silver", "gold", "beige", "tan",
    "navy", "maroon", "olive", "lime", "aqua", "cyan", "teal", "turquoise",
    "violet", "indigo", "magenta", "coral", "salmon", "khaki", "ivory",
    "cream", "peach", "lavender", "plum", "mint", "amber", "bronze", "copper",
    "charcoal", "slate", "burgundy", "crimson", "emerald", "jade", "ruby",
    "sapphire", "topaz", "amethyst", "pearl", "ebony",
})
