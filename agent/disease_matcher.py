# agent/disease_matcher.py

"""
Disease matcher: takes a comma-separated symptom string and ranks the
diseases in the knowledge base by how much of each disease's symptom
list the user covered.

A user symptom "hits" a known symptom when either one contains the other,
so "ache" hits "headache" and "bad headache" hits "headache" too. This is
loose on purpose and also means a single letter can hit a lot of symptoms.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

from agent.settings import MAX_RESULTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KnowledgeEntry:
    name: str
    symptoms: Tuple[str, ...]
    evidence: str


@dataclass(frozen=True)
class MatchResult:
    name: str
    match_percent: int
    evidence: str
    matched_symptoms: Tuple[str, ...] = ()


def _entry(name, symptoms, evidence):
    return name, KnowledgeEntry(name=name, symptoms=tuple(symptoms), evidence=evidence)


# Knowledge base: each disease mapped to its key symptoms + a short explanation.
# Order matters: it is the tie-break order for equal scores.
DISEASE_KB: Mapping[str, KnowledgeEntry] = MappingProxyType(dict([
    _entry(
        "covid-19",
        ["fever", "cough", "headache", "fatigue", "loss of taste", "loss of smell", "shortness of breath"],
        "Fever and cough are common COVID-19 symptoms. Headache often accompanies viral infections.",
    ),
    _entry(
        "influenza",
        ["fever", "cough", "headache", "body aches", "fatigue", "chills"],
        "High fever with cough and body aches are classic influenza symptoms.",
    ),
    _entry(
        "common cold",
        ["cough", "runny nose", "sore throat", "sneezing", "headache"],
        "Runny nose and sneezing are typical cold symptoms without high fever.",
    ),
    _entry(
        "migraine",
        ["headache", "nausea", "sensitivity to light", "visual disturbances"],
        "Severe headache with sensitivity to light suggests migraine.",
    ),
    _entry(
        "allergies",
        ["sneezing", "runny nose", "itchy eyes", "cough"],
        "Sneezing with itchy eyes indicates allergic reaction.",
    ),
]))


def tokenize(query: str) -> List[str]:
    """'Fever,  COUGH ,,' -> ['fever', 'cough']"""
    tokens = [t.strip() for t in (query or "").lower().split(",")]
    return [t for t in tokens if t]


def symptom_matches(symptom: str, token: str) -> bool:
    if not token:
        return False
    return token in symptom or symptom in token


def matched_symptoms(entry: KnowledgeEntry, tokens: Sequence[str]) -> Tuple[str, ...]:
    return tuple(
        s for s in entry.symptoms
        if any(symptom_matches(s, t) for t in tokens)
    )


def _percent(part: int, whole: int) -> int:
    # round half up, without float noise
    return (200 * part + whole) // (2 * whole)


def score(entry: KnowledgeEntry, tokens: Sequence[str]) -> int:
    """
    Percentage (0-100) of the entry's symptoms hit by at least one token.
    Each known symptom counts once, however many tokens hit it.
    """
    if not entry.symptoms:
        return 0
    return _percent(len(matched_symptoms(entry, tokens)), len(entry.symptoms))


def diagnose(query: str, table: Mapping[str, KnowledgeEntry] = DISEASE_KB,
             limit: int = MAX_RESULTS) -> List[MatchResult]:
    """
    Rank every disease in `table` against the raw query.
    Returns at most `limit` results, best match first; diseases that
    scored 0 are left out. Equal scores keep the table order.
    """
    tokens = tokenize(query)
    results = []

    for entry in table.values():
        percent = score(entry, tokens)
        if percent <= 0:
            continue
        results.append(MatchResult(
            name=entry.name,
            match_percent=percent,
            evidence=entry.evidence,
            matched_symptoms=matched_symptoms(entry, tokens),
        ))

    # sorted() is stable, so ties stay in table order
    results = sorted(results, key=lambda r: r.match_percent, reverse=True)[:limit]
    logger.debug("diagnose: %d token(s) -> %d match(es)", len(tokens), len(results))
    return results
