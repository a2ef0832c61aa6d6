from dataclasses import dataclass, field
from enum import Enum


class PackType(str, Enum):
    """Selects the rule-set applied to pages after the checklist cover."""

    AC_GOLD = "AC_GOLD"
    BMD_PACK = "BMD_PACK"

    @classmethod
    def parse(cls, value: "str | PackType") -> "PackType":
        """Parse a user-supplied selector.

        Raises:
            ValueError: if value is not one of the supported pack types.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unsupported pack type '{value}'. Choose from: {[p.value for p in cls]}"
            ) from None


class Category(str, Enum):
    """Page categories; numbered ones carry their own counter."""

    CHECKLIST = "checklist"
    VOID_BMD_WORKS = "void_bmd_works"
    AC_GOLD_MTW = "ac_gold_mtw"
    VOID_RECHARGEABLE_WORKS = "void_rechargeable_works"
    VOID_BMD_WORKS_NUMBERED = "void_bmd_works_numbered"

    @property
    def is_numbered(self) -> bool:
        return self in (Category.AC_GOLD_MTW, Category.VOID_BMD_WORKS_NUMBERED)


@dataclass
class Counters:
    """Per-job numbering for the numbered categories, starting at 0."""

    ac_gold_mtw: int = 0
    bmd: int = 0

    def next(self, category: Category) -> int:
        """Increment and return the counter owned by a numbered category."""
        if category is Category.AC_GOLD_MTW:
            self.ac_gold_mtw += 1
            return self.ac_gold_mtw
        if category is Category.VOID_BMD_WORKS_NUMBERED:
            self.bmd += 1
            return self.bmd
        raise ValueError(f"Category '{category.value}' is not numbered")


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one page, before uniquification."""

    category: Category
    templated_name: str
    number: int | None = None


@dataclass
class JobState:
    """Mutable naming state owned by a single job."""

    counters: Counters = field(default_factory=Counters)
    used_names: set[str] = field(default_factory=set)
