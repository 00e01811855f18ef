"""Application state management helpers.

The dataclass holds everything a Chartify session needs between Streamlit
reruns: the ingested table, the latest error, the busy flag and the chart
selections.  It is plain Python so tests can drive it without Streamlit.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, MutableMapping, Optional

from engine.models import ChartKind, ChartRequest, Table

SESSION_KEY = "chartify_state"


@dataclass
class AppState:
    """Container for the Chartify session state."""

    table: Table = field(default_factory=Table.empty)
    error: Optional[str] = None
    is_loading: bool = False
    chart_kind: ChartKind = ChartKind.BAR
    x_field: str = ""
    y_field: str = ""
    show_preview: bool = True
    show_grid: bool = True
    show_legend: bool = True
    dark_mode: bool = False
    upload_token: int = 0

    @property
    def has_data(self) -> bool:
        return not self.table.is_empty

    def chart_request(self) -> Optional[ChartRequest]:
        """Return the current request, or ``None`` until both axes are chosen."""

        if not self.x_field or not self.y_field:
            return None
        return ChartRequest(kind=self.chart_kind, x_field=self.x_field, y_field=self.y_field)


class AppStateManager:
    """Light-weight session state manager.

    Besides the dataclass-backed attributes, UI code may keep ad-hoc keys
    (widget bookkeeping and the like) in ``extras``.
    """

    def __init__(self, initial: AppState | None = None) -> None:
        self._state: AppState = initial or AppState()
        self._extras: Dict[str, Any] = {}

    @property
    def state(self) -> AppState:
        return self._state

    def get(self, key: str, default: Any | None = None) -> Any:
        if hasattr(self._state, key):
            return getattr(self._state, key)
        return self._extras.get(key, default)

    def set(self, key: str, value: Any) -> AppState:
        if hasattr(self._state, key):
            setattr(self._state, key, value)
        else:
            self._extras[key] = value
        return self._state

    def update(self, updates: Mapping[str, Any] | None = None, **kwargs: Any) -> AppState:
        payload: Dict[str, Any] = dict(updates or {})
        payload.update(kwargs)
        for key, value in payload.items():
            self.set(key, value)
        return self._state

    def as_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self._state, f.name) for f in fields(AppState)}
        data.update(self._extras)
        return data


def ensure_session_state(store: MutableMapping[str, Any], *, dark_mode: bool | None = None) -> AppStateManager:
    """Return the manager kept in ``store``, creating it on first use.

    ``dark_mode`` seeds the theme flag only when the manager is created, so a
    toggle made during the session survives reruns.
    """

    manager = store.get(SESSION_KEY)
    if isinstance(manager, AppStateManager):
        return manager
    state = AppState()
    if dark_mode is not None:
        state.dark_mode = bool(dark_mode)
    manager = AppStateManager(state)
    store[SESSION_KEY] = manager
    return manager


__all__ = [
    "AppState",
    "AppStateManager",
    "SESSION_KEY",
    "ensure_session_state",
]
