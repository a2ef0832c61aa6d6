from checklist_splitter.naming.address import matches, normalize_address
from checklist_splitter.naming.classifier import checklist_name, classify
from checklist_splitter.naming.models import (
    Category,
    Classification,
    Counters,
    JobState,
    PackType,
)
from checklist_splitter.naming.uniquifier import uniquify

__all__ = [
    "Category",
    "Classification",
    "Counters",
    "JobState",
    "PackType",
    "checklist_name",
    "classify",
    "matches",
    "normalize_address",
    "uniquify",
]
