"""
Validation of exported documents and computed costs.
"""

import json
import math
from typing import Any, Dict, List, Union

from ..exceptions import MalformedDocumentError
from .logging import get_logger

logger = get_logger(__name__)


def parse_export(raw: Union[str, bytes], collection_name: str = "") -> List[Dict[str, Any]]:
    """
    Parse a newline-delimited JSON export into documents.

    Args:
        raw: Export body as returned by the indexing service
        collection_name: Collection the export belongs to, for error context

    Returns:
        Documents in export order

    Raises:
        MalformedDocumentError: If a line is not a JSON object
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")

    documents = []
    for line_number, line in enumerate(raw.split("\n"), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            document = json.loads(line)
        except json.JSONDecodeError as e:
            raise MalformedDocumentError(
                f"Export line {line_number} of '{collection_name}' is not valid JSON",
                details={"collection": collection_name, "line": line_number},
                original=e,
            ) from e
        if not isinstance(document, dict):
            raise MalformedDocumentError(
                f"Export line {line_number} of '{collection_name}' is not a JSON object",
                details={"collection": collection_name, "line": line_number},
            )
        documents.append(document)

    logger.debug("Export parsed", collection=collection_name, documents=len(documents))
    return documents


def ensure_valid_cost(cost: Any, field_name: str) -> Union[int, float]:
    """
    Check that a field cost is a finite, non-negative number.

    Raises:
        MalformedDocumentError: If the cost cannot be accumulated
    """
    if isinstance(cost, bool) or not isinstance(cost, (int, float)):
        raise MalformedDocumentError(
            f"Cost of field '{field_name}' is not a number",
            details={"field": field_name, "cost": repr(cost)},
        )
    if not math.isfinite(cost) or cost < 0:
        raise MalformedDocumentError(
            f"Cost of field '{field_name}' is invalid: {cost}",
            details={"field": field_name, "cost": repr(cost)},
        )
    return cost
