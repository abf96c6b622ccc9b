"""
Unique Name Cache

Hands out identifiers that are unique within one generated document.
"""

class UniqueNameCache:  # pylint: disable=too-few-public-methods
    """Disambiguates identifiers that transliterate to the same text."""

    def __init__(self):
        self._counters = {}
        self._taken = set()

    def get_unique_name(self, prefix: str) -> str:
        """
        Get a unique name with the given prefix.

        The first request for a prefix returns it unchanged; later requests
        append ``_1``, ``_2``, ... skipping anything already handed out.
        """
        if prefix not in self._taken:
            self._taken.add(prefix)
            self._counters.setdefault(prefix, 0)
            return prefix

        count = self._counters.get(prefix, 0)
        while True:
            count += 1
            candidate = f"{prefix}_{count}"
            if candidate not in self._taken:
                break
        self._counters[prefix] = count
        self._taken.add(candidate)
        return candidate
