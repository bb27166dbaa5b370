# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

import os
from datetime import timezone
from pathlib import Path

from dateutil.parser import isoparse


def normpath(path):
    """
    Normalize a bytes or str path to a Path object.

    Uses os.path.normpath (pure string manipulation) rather than
    Path.resolve(), since the playlist directory may not exist yet.
    """
    if type(path) == bytes:
        path = path.decode()
    return Path(os.path.normpath(os.path.expanduser(str(path))))


def first_value(value):
    """MPD reports repeated tags as lists; use the first occurrence."""
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def lower_keys(tags):
    return {str(k).lower(): first_value(v) for k, v in tags.items()}


def parse_timestamp(text):
    """Parse an RFC 3339 timestamp into an aware UTC datetime."""
    if not isinstance(text, str):
        raise ValueError(f'not a timestamp: {text!r}')
    value = isoparse(text.strip())
    if value.tzinfo is None:
        raise ValueError(f'timestamp without timezone: {text!r}')
    return value.astimezone(timezone.utc)


def format_timestamp(value):
    return value.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%fZ')
