import re
import unicodedata

SLUG_PATTERN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


def oxford_join(items: list[str]) -> str:
    n = len(items)
    if n == 0:
        return ""
    if n == 1:
        return items[0]
    if n == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + f", and {items[-1]}"


def slugify(value: str) -> str:
    # "Graphics Cards & GPUs" -> "graphics-cards-gpus"
    s = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    s = re.sub(r"[^a-z0-9]+", "-", s.lower())
    return s.strip("-")


def contains_ci(haystack, needle: str) -> bool:
    if haystack is None:
        return False
    return needle.casefold() in str(haystack).casefold()
