from __future__ import annotations
import logging
from collections.abc import Callable, Sequence
from typing import Any, Optional
from ticket_relay.shared.normalization import normalize_str_or_none


logger = logging.getLogger(__name__)

CASE_URL_FIELD = "URL_Selfservice"

CaseUrlStrategy = Callable[[Any], Optional[str]]


def _from_import_item_result(data: Any) -> Optional[str]:
    # importItemResult[0].returnValues.returnValue -> [{name, content}, ...]
    if not isinstance(data, dict):
        return None
    results = data.get("importItemResult")
    if not isinstance(results, list) or not results or not isinstance(results[0], dict):
        return None
    return_values = results[0].get("returnValues")
    if not isinstance(return_values, dict):
        return None
    entries = return_values.get("returnValue")
    if not isinstance(entries, list):
        return None

    for entry in entries:
        if isinstance(entry, dict) and entry.get("name") == CASE_URL_FIELD:
            return normalize_str_or_none(entry.get("content"))
    return None

def _from_top_level_field(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    return normalize_str_or_none(data.get(CASE_URL_FIELD))


CASE_URL_STRATEGIES: Sequence[tuple[str, CaseUrlStrategy]] = (
    ("importItemResult.returnValues", _from_import_item_result),
    ("top-level URL_Selfservice", _from_top_level_field),
)


def extract_case_url(
    data: Any,
    strategies: Sequence[tuple[str, CaseUrlStrategy]] = CASE_URL_STRATEGIES,
) -> Optional[str]:
    """Best-effort lookup of the self-service case URL in a success body.
        Strategies are tried in order and the first non-empty value wins.
        Returns None when no strategy matches; that is not an error.
        """

    for name, strategy in strategies:
        url = strategy(data)
        if url is not None:
            logger.debug("Case URL found via %s", name)
            return url
    return None

CASE_ID_FIELDS: tuple[str, ...] = ("caseId", "id", "ticketId")


def extract_case_id(data: Any) -> Optional[str]:
    """First non-empty of ``caseId``, ``id``, ``ticketId`` in a success body."""
    if not isinstance(data, dict):
        return None
    for field_name in CASE_ID_FIELDS:
        case_id = normalize_str_or_none(data.get(field_name))
        if case_id is not None:
            return case_id
    return None
