"""Decides the category and templated filename of a checklist page."""

from dataclasses import dataclass

from checklist_splitter.naming.address import matches
from checklist_splitter.naming.models import Category, Classification, Counters, PackType

NAME_TEMPLATES: dict[Category, str] = {
    Category.CHECKLIST: "{address} - INSPECTION CHECKLIST.pdf",
    Category.VOID_BMD_WORKS: "{address} - VOID BMD WORKS.pdf",
    Category.AC_GOLD_MTW: "{address} - AC GOLD MTW ({n}).pdf",
    Category.VOID_RECHARGEABLE_WORKS: "{address} - VOID RECHARGEABLE WORKS.pdf",
    Category.VOID_BMD_WORKS_NUMBERED: "{address} - VOID BMD WORKS ({n}).pdf",
}


@dataclass(frozen=True)
class _RuleSet:
    trigger_phrase: str
    triggered: Category
    default: Category


_RULES: dict[PackType, _RuleSet] = {
    PackType.AC_GOLD: _RuleSet(
        trigger_phrase="BMD WORKS REQUIRED",
        triggered=Category.VOID_BMD_WORKS,
        default=Category.AC_GOLD_MTW,
    ),
    PackType.BMD_PACK: _RuleSet(
        trigger_phrase="RECHARGE WORK",
        triggered=Category.VOID_RECHARGEABLE_WORKS,
        default=Category.VOID_BMD_WORKS_NUMBERED,
    ),
}


def checklist_name(address: str) -> str:
    """Fixed name of the cover page; page 1 is never classified."""
    return NAME_TEMPLATES[Category.CHECKLIST].format(address=address)


def classify(
    page_text: str,
    pack_type: PackType,
    counters: Counters,
    address: str,
) -> Classification:
    """Classify a non-blank page of the given pack.

    The trigger phrase wins; every other page falls into the pack's numbered
    category, whose counter is bumped before the name is formatted.

    Raises:
        ValueError: if pack_type is not a PackType member.
    """
    rules = _RULES.get(pack_type) if isinstance(pack_type, PackType) else None
    if rules is None:
        raise ValueError(f"Unsupported pack type '{pack_type}'")

    if matches(page_text, rules.trigger_phrase):
        name = NAME_TEMPLATES[rules.triggered].format(address=address)
        return Classification(category=rules.triggered, templated_name=name)

    number = counters.next(rules.default)
    name = NAME_TEMPLATES[rules.default].format(address=address, n=number)
    return Classification(category=rules.default, templated_name=name, number=number)
