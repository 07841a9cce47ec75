"""Per-document registry guaranteeing unique heading anchor ids"""


class AnchorRegistry:
    """Hands out anchor ids that are unique (case-insensitively) within one document.

    The first claim of an id returns it unchanged; later claims get '-2', '-3', ...
    skipping any suffixed id that is already taken. Create one per render and
    discard it afterwards.
    """

    def __init__(self) -> None:
        self._used: dict[str, int] = {}

    def __contains__(self, anchor: str) -> bool:
        return anchor.lower() in self._used

    def claim(self, preferred: str) -> str:
        base = preferred or "section"
        key = base.lower()
        if key not in self._used:
            self._used[key] = 1
            return base

        suffix = self._used[key]
        while True:
            suffix += 1
            candidate = f"{base}-{suffix}"
            if candidate.lower() not in self._used:
                break

        self._used[key] = suffix
        self._used[candidate.lower()] = 1
        return candidate
