from typing import Callable, List, Optional


def csv_to_list(
    v: str | List[str] | None,
    *,
    normalize: Optional[Callable[[str], str]] = None,
) -> List[str]:
    """
    Split a comma-separated env value (or pass a list through) into clean items.
    Blank items are dropped and repeats keep their first position.
    """
    if v is None:
        return []
    raw = v if isinstance(v, (list, tuple, set)) else str(v).split(",")

    out: List[str] = []
    for item in raw:
        s = str(item).strip() if item is not None else ""
        if s and normalize is not None:
            s = normalize(s)
        if s and s not in out:
            out.append(s)
    return out
