"""
Desc Parser Module - Decodes pacman package description records

A desc record is a sequence of lines where a marker line such as %NAME%
announces that the following line holds the value of that field:

    %NAME%
    bash

    %VERSION%
    5.2.026-2
"""

from typing import Dict, Optional

from .models import PackageRecord

# Marker line -> PackageRecord attribute
FIELD_MARKERS = {
    '%NAME%': 'name',
    '%VERSION%': 'version',
}

REQUIRED_FIELDS = ('name', 'version')


def desc_fields(text: str) -> Dict[str, str]:
    """
    Collect the values of the recognised markers present in a desc record.

    Unknown markers are ignored. A marker on the last line has no value and
    is treated as absent.

    Args:
        text: Raw contents of a desc file

    Returns:
        PackageRecord attribute -> value, for markers actually present
    """
    fields = {}
    lines = text.splitlines()

    for idx, line in enumerate(lines):
        attribute = FIELD_MARKERS.get(line.strip())
        if attribute is None or idx + 1 >= len(lines):
            continue
        fields[attribute] = lines[idx + 1]

    return fields


def parse_desc(text: str) -> PackageRecord:
    """Parse one desc record; fields without a marker keep their default"""
    return PackageRecord(**desc_fields(text))


def parse_record(text: str) -> Optional[PackageRecord]:
    """
    Parse a desc record that must name a package and its version

    Returns:
        PackageRecord, or None when %NAME% or %VERSION% is missing or empty
    """
    fields = desc_fields(text)
    if not all(fields.get(attribute) for attribute in REQUIRED_FIELDS):
        return None
    return PackageRecord(**fields)
