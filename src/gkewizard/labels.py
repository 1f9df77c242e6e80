import getpass
import re

from .core import CREATED_BY_LABEL, LABEL_KEY_PATTERN
from .exceptions import InvalidParameterError
from .logger import logger

_LABEL_KEY = re.compile(LABEL_KEY_PATTERN)
_DISALLOWED_LABEL_CHARACTERS = re.compile(r"[^a-z0-9-]")


def sanitize_label(value: str) -> str:
    """Lower-cases `value` and replaces anything outside [a-z0-9-] with a dash."""
    return _DISALLOWED_LABEL_CHARACTERS.sub("-", value.lower())


def parse_labels(text: str) -> dict[str, str]:
    """
    Parses 'foo=bar,whatnot=123' into an ordered mapping.
    Keys and values are lower-cased; keys must be valid GCP label names.
    """
    labels: dict[str, str] = {}
    for pair in text.lower().split(","):
        pair = pair.strip()
        if not pair:
            continue
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not _LABEL_KEY.match(key):
            raise InvalidParameterError(
                f"Invalid label '{pair}': expected key=value where the key starts "
                "with [a-z], ends with [a-z0-9] and has only [a-z0-9-] between"
            )
        labels[key] = value.strip()
    return labels


def current_username() -> str:
    try:
        return getpass.getuser()
    except (OSError, KeyError) as e:
        logger.debug(f"Could not determine the current user: {e}")
        return ""


def build_labels(text: str, username: str | None = None) -> dict[str, str]:
    """
    User labels followed by the synthetic created-by=<user> entry.
    A created-by label supplied by the user is kept as is.
    """
    labels = parse_labels(text)
    if username is None:
        username = current_username()
    creator = sanitize_label(username)
    if creator and CREATED_BY_LABEL not in labels:
        labels[CREATED_BY_LABEL] = creator
    return labels


def format_labels_argument(labels: dict[str, str]) -> str:
    """Renders labels as the single --labels=k1=v1,k2=v2 argument."""
    joined = ",".join(f"{k}={v}" for k, v in labels.items())
    return f"--labels={joined}".lower()
