from typing import Iterable, List, Sequence, Tuple


def normalize_keywords(keywords: Iterable[str]) -> Tuple[str, ...]:
    """
    Lower-cases keywords once per crawl.
    Duplicates that only differed by case collapse onto the first occurrence.
    """
    return tuple(dict.fromkeys(keyword.lower() for keyword in keywords))


def find_matching_keywords(name: str, normalized_keywords: Sequence[str]) -> List[str]:
    """
    Returns every keyword contained in the lower-cased name, in keyword order.
    """
    lowered = name.lower()
    return [keyword for keyword in normalized_keywords if keyword in lowered]
