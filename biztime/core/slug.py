import re

from slugify import slugify

# Characters dropped outright before slugifying
REMOVED_CHARS = re.compile(r"[*+~.()'\"!:@]")

# Symbols spelled out instead of silently vanishing
REPLACEMENTS = [["&", "and"], ["$", "dollar"]]


def slugify_code(value) -> str:
    """
    Normalize a free-text identifier into a company/industry code.

    "Turbo!"       -> "turbo"
    "Big Co. Inc"  -> "big-co-inc"
    "Café & Co"    -> "cafe-and-co"

    Normalizing an already-normalized code returns it unchanged.
    """
    text = REMOVED_CHARS.sub("", str(value))
    return slugify(text, lowercase=True, replacements=REPLACEMENTS)
