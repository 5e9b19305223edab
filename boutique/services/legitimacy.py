"""
Legitimacy filtering for order lists.

Seeded, demo and test records live in the same tables as real orders.
A LegitimacyPolicy hides them from a listing without touching the rows:
it is an ordered list of exclusion rules over a flat mapping of fields
(email, order_number, total, item_count, ...), plus an optional allow-list
that is consulted first.
"""
import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExclusionRule:
    name: str
    field: str
    matcher: Callable[[Any], bool]
    description: str = ""

    def matches(self, fields: Mapping[str, Any]) -> bool:
        return self.matcher(fields.get(self.field))


def pattern_rule(name: str, field_name: str, *patterns: str) -> ExclusionRule:
    """Case-insensitive regex search; anchor the patterns yourself."""
    compiled = [re.compile(p, re.IGNORECASE) for p in patterns]

    def matcher(value):
        if value is None:
            return False
        return any(p.search(str(value)) for p in compiled)

    return ExclusionRule(name, field_name, matcher, description=", ".join(patterns))


def contains_rule(name: str, field_name: str, *needles: str) -> ExclusionRule:
    lowered = [n.lower() for n in needles]

    def matcher(value):
        if value is None:
            return False
        text = str(value).lower()
        return any(n in text for n in lowered)

    return ExclusionRule(name, field_name, matcher, description=", ".join(needles))


def equals_rule(name: str, field_name: str, *values: str) -> ExclusionRule:
    lowered = {v.lower() for v in values}

    def matcher(value):
        return value is not None and str(value).lower() in lowered

    return ExclusionRule(name, field_name, matcher, description=", ".join(values))


def at_most_rule(name: str, field_name: str, limit: float) -> ExclusionRule:
    """Matches value <= limit. A missing value also matches."""

    def matcher(value):
        return value is None or value <= limit

    return ExclusionRule(name, field_name, matcher, description=f"<= {limit}")


@dataclass
class FilterResult:
    kept: List[Any]
    total: int
    reasons: Dict[str, int] = field(default_factory=dict)

    @property
    def filtered(self) -> int:
        return self.total - len(self.kept)


@dataclass
class LegitimacyPolicy:
    name: str
    rules: Sequence[ExclusionRule]
    allow: Sequence[ExclusionRule] = ()

    def exclusion_reason(self, fields: Mapping[str, Any]) -> Optional[str]:
        if any(rule.matches(fields) for rule in self.allow):
            return None

        for rule in self.rules:
            if rule.matches(fields):
                return rule.name
        return None

    def is_legitimate(self, fields: Mapping[str, Any]) -> bool:
        return self.exclusion_reason(fields) is None

    def apply(
        self,
        records: Iterable[Any],
        extract: Callable[[Any], Mapping[str, Any]],
    ) -> FilterResult:
        records = list(records)
        kept = []
        reasons = Counter()

        for record in records:
            reason = self.exclusion_reason(extract(record))
            if reason is None:
                kept.append(record)
            else:
                reasons[reason] += 1

        if reasons:
            logger.info(
                f"{self.name}: kept {len(kept)} of {len(records)} "
                f"(excluded {dict(reasons)})"
            )

        return FilterResult(kept=kept, total=len(records), reasons=dict(reasons))

    def describe(self) -> Dict[str, List[str]]:
        return {
            "excluded": [f"{r.field}: {r.description}" for r in self.rules],
            "allowed": [f"{r.field}: {r.description}" for r in self.allow],
        }


# -------------------------
# Storefront order list
# -------------------------
ORDER_POLICY = LegitimacyPolicy(
    name="orders",
    rules=[
        at_most_rule("empty_items", "item_count", 0),
        pattern_rule(
            "dummy_email", "email",
            r"^demo@example\.",
            r"^dummy@",
            r"^sample@",
            r"^fake@",
            r"^placeholder@",
        ),
        pattern_rule(
            "dummy_order_number", "order_number",
            r"^DEMO-",
            r"^DUMMY-",
            r"^SAMPLE-",
            r"^ORD-000000$",
            r"^ORD-111111$",
            r"^ORD-999999$",
        ),
        at_most_rule("non_positive_total", "total", 0),
    ],
)


# -------------------------
# Admin custom orders
# -------------------------
DEMO_ACCOUNT = "demo@example.com"

CUSTOM_ORDER_EXCLUDED_EMAIL_PARTS = (
    "test-dummy@",
    "sample@",
    "placeholder@",
    "fake@",
    "dummy@",
    "noreply@",
    "donotreply@",
)

CUSTOM_ORDER_POLICY = LegitimacyPolicy(
    name="admin_custom_orders",
    allow=[equals_rule("demo_account", "email", DEMO_ACCOUNT)],
    rules=[
        contains_rule("placeholder_email", "email", *CUSTOM_ORDER_EXCLUDED_EMAIL_PARTS),
        equals_rule("test_email", "email", "test@example.com", "sample@example.com"),
    ],
)


def order_fields(order) -> Dict[str, Any]:
    return {
        "email": order.user.email if order.user else None,
        "order_number": order.order_number,
        "total": order.total,
        "item_count": len(order.items),
    }


def custom_order_fields(custom_order) -> Dict[str, Any]:
    return {
        "email": custom_order.user.email if custom_order.user else None,
    }
