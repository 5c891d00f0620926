"""Serialization of a category's transaction history column.

The history is stored as JSON text shaped like
``{"2025-01-15": [{"amount": "45.50", "description": "Weekly shop"}]}``.
Amounts are written as decimal strings so no precision is lost; numeric
amounts written by older versions are still accepted on read.
"""

import json
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional

from errors import StorageError
from models.transaction import TransactionEntry

EMPTY_HISTORY = "{}"


def encode_history(history: Dict[str, List[TransactionEntry]]) -> str:
    """Encode a history mapping to its stored JSON text.

    Args:
        history: ISO date mapped to the entries recorded that day.

    Returns:
        JSON text; an empty history encodes to ``{}``.
    """
    return json.dumps(
        {
            day: [
                {"amount": str(entry.amount), "description": entry.description}
                for entry in entries
            ]
            for day, entries in history.items()
        }
    )


def decode_history(text: Optional[str]) -> Dict[str, List[TransactionEntry]]:
    """Decode stored JSON text back into a history mapping.

    Args:
        text: Stored column value. None or blank text decodes to an empty history.

    Returns:
        Dictionary of ISO date to TransactionEntry list, in stored order.

    Raises:
        StorageError: If the stored text is not a valid history document.
    """
    if text is None or not text.strip():
        return {}

    try:
        raw = json.loads(text)
        if not isinstance(raw, dict):
            raise ValueError("history must be a JSON object")

        history = {}
        for day, entries in raw.items():
            history[day] = [
                TransactionEntry(
                    amount=Decimal(str(entry["amount"])),
                    description=entry.get("description", ""),
                )
                for entry in entries
            ]
        return history
    except (ValueError, TypeError, KeyError, AttributeError, InvalidOperation) as e:
        raise StorageError(f"Corrupt transaction history: {e}") from e
