# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: SourceRecordReader
# -----------------------------------------------------------------------------
from typing import Any, Callable, Dict, List, Mapping, Optional

import settings
from preprocessing.TextNormalizer import TextNormalizer

UNKNOWN = "unknown"
TAG_FIELDS = ("subject", "topic", "course")

IdStrategy = Callable[[Mapping[str, Any]], Optional[str]]


def _present(value: Any) -> bool:
    return value is not None and value != ""


def _id_from_oid_wrapper(doc: Mapping[str, Any]) -> Optional[str]:
    raw = doc.get("_id")
    if isinstance(raw, dict) and _present(raw.get("$oid")):
        return str(raw["$oid"])
    return None


def _id_from_underscore_id(doc: Mapping[str, Any]) -> Optional[str]:
    raw = doc.get("_id")
    if _present(raw) and not isinstance(raw, (dict, list)):
        return str(raw)
    return None


def _id_from_plain_id(doc: Mapping[str, Any]) -> Optional[str]:
    raw = doc.get("id")
    if _present(raw) and not isinstance(raw, (dict, list)):
        return str(raw)
    return None


# Tried in order; first non-None wins
ID_STRATEGIES: List[IdStrategy] = [
    _id_from_oid_wrapper,
    _id_from_underscore_id,
    _id_from_plain_id,
]


class SourceRecordReader:
    """
    Derives id, text and metadata from a raw question record
    (e.g. a MongoDB export: {"_id": {"$oid": ...}, "question": ..., "subject": ...}).
    """

    def __init__(self, id_strategies: Optional[List[IdStrategy]] = None):
        self.id_strategies = id_strategies or ID_STRATEGIES

    def extract_id(self, doc: Mapping[str, Any]) -> Optional[str]:
        for strategy in self.id_strategies:
            doc_id = strategy(doc)
            if doc_id:
                return doc_id
        return None

    @staticmethod
    def extract_text(doc: Mapping[str, Any]) -> Any:
        """
        First truthy of cleanedQuestion, question. Non-string values are
        returned as-is so the caller can count them as failures.
        """
        for key in ("cleanedQuestion", "question"):
            value = doc.get(key)
            if value:
                return value
        return None

    @staticmethod
    def build_metadata(doc: Mapping[str, Any], text: str) -> Dict[str, str]:
        meta: Dict[str, str] = {}
        for key in TAG_FIELDS:
            value = doc.get(key)
            meta[key] = str(value) if _present(value) else UNKNOWN
        meta["cleanedQuestion"] = TextNormalizer.strip_tags(text)[: settings.SNIPPET_MAX_CHARS]
        return meta

    @staticmethod
    def describe(doc: Any, limit: int = 100) -> str:
        """Short repr of a record's id fields for log lines."""
        if not isinstance(doc, Mapping):
            return repr(doc)[:limit]
        return repr(doc.get("_id", doc.get("id")))[:limit]
