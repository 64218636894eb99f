import json
import logging
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


def encode_skills(skills: Sequence[str]) -> str:
    """list of skills -> json array text for the skills column"""
    return json.dumps(list(skills), ensure_ascii=False)


def decode_skills(raw: Optional[str]) -> List[str]:
    """
    json array text -> list of skills

    blank, malformed or non-array values come back as an empty list
    """
    if raw is None or not raw.strip():
        return []
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"could not decode stored skills {raw!r}: {e}")
        return []
    if not isinstance(value, list):
        logger.warning(f"stored skills is not a json array: {raw!r}")
        return []
    return [str(item) for item in value]
