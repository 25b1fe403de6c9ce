# agent/diagnosis_view.py

"""
State behind the diagnosis screen.

    idle --submit--> loading --complete--> result --submit--> loading ...

The Streamlit page keeps one DiagnosisView per browser session (in
st.session_state) and only ever mutates it from its own script run,
so there is nothing to lock.
"""

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import List, Mapping, Optional

from agent.disease_matcher import DISEASE_KB, KnowledgeEntry, MatchResult, diagnose

logger = logging.getLogger(__name__)

IDLE = "idle"
LOADING = "loading"
RESULT = "result"


@dataclass
class ViewState:
    query: str = ""
    is_loading: bool = False
    results: Optional[List[MatchResult]] = None


class DiagnosisView:

    def __init__(self, table: Mapping[str, KnowledgeEntry] = DISEASE_KB):
        self.table = table
        self.state = ViewState()
        self.history = []

    @property
    def phase(self) -> str:
        if self.state.is_loading:
            return LOADING
        if self.state.results is None:
            return IDLE
        return RESULT

    def can_submit(self, query: str) -> bool:
        return bool((query or "").strip()) and not self.state.is_loading

    def submit(self, query: str) -> bool:
        """Start a diagnosis for `query`. Blank queries (and re-submits while loading) are ignored."""
        if not self.can_submit(query):
            logger.debug("Submit ignored (phase=%s, blank=%s)", self.phase, not (query or "").strip())
            return False

        self.state.query = query
        self.state.is_loading = True
        logger.info("Diagnosis requested for %r", query)
        return True

    def complete(self) -> List[MatchResult]:
        if not self.state.is_loading:
            raise RuntimeError("complete() called with no diagnosis in progress")

        results = diagnose(self.state.query, self.table)
        self.state.results = results
        self.state.is_loading = False
        self._record(self.state.query, results)
        logger.info("Diagnosis finished: %d match(es)", len(results))
        return results

    def wait_and_complete(self, delay: float, sleep=time.sleep) -> List[MatchResult]:
        # no cancellation: once the wait starts, its result is always applied
        if delay > 0:
            sleep(delay)
        return self.complete()

    def clear_history(self):
        self.history = []

    def _record(self, query, results):
        top = results[0] if results else None
        self.history.insert(0, {
            "time": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "query": query,
            "matches": len(results),
            "top_match": top.name if top else "",
            "top_percent": top.match_percent if top else 0,
        })
