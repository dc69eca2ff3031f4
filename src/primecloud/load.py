from collections import Counter
from threading import Lock


class InstanceTally:
    """Counts how many responses each numbers-service instance served."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._counts: Counter[str] = Counter()

    def record(self, instance_id: str) -> None:
        with self._lock:
            self._counts[instance_id] += 1

    def counts(self) -> dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def total(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    def summary(self) -> str:
        counts = self.counts()
        total = sum(counts.values())
        if not total:
            return "no responses recorded"
        return ", ".join(
            f"{instance_id}: {count} ({count / total:.0%})"
            for instance_id, count in sorted(counts.items())
        )
