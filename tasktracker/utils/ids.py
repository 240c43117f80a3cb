import re
import uuid

_ID_RE = re.compile(r"[0-9a-f]{32}")


def new_id() -> str:
    return uuid.uuid4().hex


def is_valid_id(value) -> bool:
    """True if ``value`` has the shape of an identifier issued by the stores."""
    return isinstance(value, str) and _ID_RE.fullmatch(value) is not None
