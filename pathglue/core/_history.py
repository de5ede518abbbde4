from __future__ import annotations

import inspect
import time
from datetime import datetime, timezone
from functools import wraps

import polars as pl

from ..utils.validation import jsonify

__all__ = ["HistoryMixin"]


class HistoryMixin:
    """Append-only, in-memory log of graph mutations.

    Every wrapped mutator bumps the structural version held in ``self._state``;
    events are only recorded while history is enabled.
    """

    # Mutating methods to wrap. Add here if you add new mutators.
    _MUTATORS = ("add_node", "add_edge", "remove_node", "remove_edge")

    def _init_history(self, enabled: bool = True):
        self._history_enabled = bool(enabled)
        self._history = []           # list[dict]
        self._history_clock0 = time.perf_counter_ns()
        self._install_history_hooks()

    def _utcnow_iso(self) -> str:
        return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _log_event(self, op: str, **fields):
        if not self._history_enabled:
            return
        evt = {
            "version": self._state.version,
            "ts_utc": self._utcnow_iso(),
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        for k, v in fields.items():
            evt[k] = jsonify(v)
        self._history.append(evt)

    def _log_mutation(self, name=None):
        def deco(fn):
            op = name or fn.__name__
            sig = inspect.signature(fn)

            @wraps(fn)
            def wrapper(*args, **kwargs):
                bound = sig.bind(*args, **kwargs)
                bound.apply_defaults()
                result = fn(*args, **kwargs)
                self._state.bump()
                payload = dict(bound.arguments)
                payload["result"] = result
                self._log_event(op, **payload)
                return result

            return wrapper

        return deco

    def _install_history_hooks(self):
        for name in self._MUTATORS:
            fn = getattr(self, name, None)
            # Avoid double-wrapping
            if fn is not None and getattr(fn, "__wrapped__", None) is None:
                setattr(self, name, self._log_mutation(name)(fn))

    def history(self, as_df: bool = False):
        """
        Return the mutation history.

        Parameters
        ----------
        as_df : bool, default False
            If True, return a polars DataFrame; otherwise a list of dicts.

        Returns
        -------
        list[dict] or polars.DataFrame
            Each event carries ``version``, ``ts_utc`` (UTC ISO-8601),
            ``mono_ns`` (monotonic nanoseconds since the graph was created),
            ``op``, the call arguments and ``result``.
        """
        if as_df:
            return pl.DataFrame(self._history, infer_schema_length=None, strict=False)
        return list(self._history)

    def export_history(self, path: str) -> int:
        """
        Write the mutation history to disk.

        Parameters
        ----------
        path : str
            Output path. Supported extensions: ``.parquet``, ``.ndjson`` (or
            ``.jsonl``), ``.json``, ``.csv``. Unknown extensions default to
            parquet by appending ``.parquet``.

        Returns
        -------
        int
            Number of events written; 0 (and no file) for an empty history.
        """
        if not self._history:
            return 0
        df = self.history(as_df=True)
        p = str(path).lower()
        if p.endswith(".parquet"):
            df.write_parquet(path)
        elif p.endswith(".ndjson") or p.endswith(".jsonl"):
            df.write_ndjson(path)
        elif p.endswith(".json"):
            df.write_json(path)
        elif p.endswith(".csv"):
            df.write_csv(path)
        else:
            df.write_parquet(f"{path}.parquet")
        return df.height

    def enable_history(self, flag: bool = True):
        """Start (True) or pause (False) recording. Versions keep counting."""
        self._history_enabled = bool(flag)

    def clear_history(self):
        self._history.clear()

    def mark(self, label: str):
        """Insert a manual ``op='mark'`` event; ignored while history is paused."""
        self._log_event("mark", label=label)
