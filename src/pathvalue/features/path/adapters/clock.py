"""src/pathvalue/features/path/adapters/clock.py
What: ClockDecoder turning epoch seconds into ``datetime`` values.
Why: Keep timestamp conversion swappable so tests can pin timezones."""

from __future__ import annotations

from datetime import datetime, tzinfo

from pathvalue.features.path.usecases.ports import ClockDecoder


class LocalClockDecoder(ClockDecoder):
    """Decode timestamps in ``tz``; ``None`` gives naive local time."""

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz: tzinfo | None = tz

    def decode(self, raw_timestamp: float) -> datetime:
        return datetime.fromtimestamp(raw_timestamp, self._tz)


__all__ = ["LocalClockDecoder"]
