import json
from typing import Any

from valdn.exceptions.common_exceptions import PayloadDecodeException


def parse_json(text: str | bytes) -> Any:
    """Decode JSON text into dicts, lists and scalars.

    Raises:
        PayloadDecodeException: If the text is not valid JSON.
    """
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PayloadDecodeException(f"Invalid JSON: {e}", error_type="invalid_json") from e
