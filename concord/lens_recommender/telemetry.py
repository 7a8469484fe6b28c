"""
Per-session recommendation telemetry.

Local-only counters the host keeps next to its session. Nothing in the
recommendation pipeline reads them.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class LensEvent:
    lens_id: str
    turn_index: int


@dataclass
class SessionTelemetry:
    """Append-only log of what happened to shown recommendations."""

    recommendations_shown: int = 0
    opened_lens: List[LensEvent] = field(default_factory=list)
    dismissed: List[LensEvent] = field(default_factory=list)
    time_to_action: List[float] = field(default_factory=list)  # milliseconds

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'SessionTelemetry':
        """
        Rebuild telemetry from its dict form.

        Raises:
            ValueError: If the dict does not have the expected shape
        """
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("Telemetry must be an object")
        try:
            return cls(
                recommendations_shown=int(data.get('recommendations_shown', 0)),
                opened_lens=[LensEvent(e['lens_id'], int(e['turn_index']))
                             for e in data.get('opened_lens', [])],
                dismissed=[LensEvent(e['lens_id'], int(e['turn_index']))
                           for e in data.get('dismissed', [])],
                time_to_action=[float(ms) for ms in data.get('time_to_action', [])],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed telemetry: {e}") from e


def create_session_telemetry() -> SessionTelemetry:
    return SessionTelemetry()


def record_recommendation_shown(telemetry: SessionTelemetry) -> None:
    telemetry.recommendations_shown += 1


def record_lens_opened(telemetry: SessionTelemetry, lens_id: str, turn_index: int) -> None:
    telemetry.opened_lens.append(LensEvent(lens_id, turn_index))


def record_dismissal(telemetry: SessionTelemetry, lens_id: str, turn_index: int) -> None:
    telemetry.dismissed.append(LensEvent(lens_id, turn_index))


def record_time_to_action(telemetry: SessionTelemetry, ms: float) -> None:
    telemetry.time_to_action.append(ms)


def summarize_telemetry(telemetry: SessionTelemetry) -> Dict[str, Any]:
    """
    Summarize a session's telemetry for dashboards.

    Returns:
        Dict with shown/opened/dismissed counts, open and dismissal
        rates (None when nothing was shown) and mean time to action
        (None when no samples)
    """
    shown = telemetry.recommendations_shown
    opened = len(telemetry.opened_lens)
    dismissed = len(telemetry.dismissed)
    samples = telemetry.time_to_action

    return {
        'shown': shown,
        'opened': opened,
        'dismissed': dismissed,
        'open_rate': opened / shown if shown else None,
        'dismissal_rate': dismissed / shown if shown else None,
        'mean_time_to_action_ms': sum(samples) / len(samples) if samples else None,
    }
