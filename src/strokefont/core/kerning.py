"""Kerning selector parsing and matching.

A selector names the characters one side of a kerning rule applies to:

- a single character: ``"A"`` (also ``","`` and ``"-"`` on their own)
- an inclusive code-point range: ``"A-Z"``
- a comma-separated list of characters and ranges: ``"A,V,W"`` or ``"a-z,0-9"``
"""

import math
from dataclasses import dataclass

from strokefont.domain import KernRule
from strokefont.exceptions import KerningRuleError


@dataclass(frozen=True)
class CharRange:
    """Inclusive code-point range."""

    first: str
    last: str

    def __contains__(self, char: str) -> bool:
        return len(char) == 1 and ord(self.first) <= ord(char) <= ord(self.last)


SelectorItem = str | CharRange


def _parse_item(item: str, selector: str) -> SelectorItem:
    if len(item) == 1:
        return item
    if len(item) == 3 and item[1] == "-":
        if ord(item[0]) > ord(item[2]):
            raise KerningRuleError(f"range '{item}' in selector '{selector}' is reversed")
        return CharRange(item[0], item[2])
    raise KerningRuleError(
        f"selector item '{item}' in '{selector}' must be a single character or a range like A-Z"
    )


def parse_selector(selector: str) -> list[SelectorItem]:
    """Parse a selector into characters and ranges.

    Args:
        selector: Selector text

    Returns:
        Parsed items

    Raises:
        KerningRuleError: If the selector is empty or malformed
    """
    if not selector:
        raise KerningRuleError("selector must not be empty")

    if len(selector) == 1:
        return [selector]

    if not selector.strip():
        raise KerningRuleError("selector must not be blank")

    if "," not in selector:
        return [_parse_item(selector.strip(), selector)]

    items = [part.strip() for part in selector.split(",")]
    if any(not part for part in items):
        raise KerningRuleError(f"selector '{selector}' has an empty list item")
    return [_parse_item(part, selector) for part in items]


def selector_matches(selector: str, char: str) -> bool:
    """Check whether a selector covers a character.

    Examples:
        >>> selector_matches("A-Z", "B")
        True
        >>> selector_matches("A,V,W", "B")
        False
    """
    for item in parse_selector(selector):
        if isinstance(item, CharRange):
            if char in item:
                return True
        elif item == char:
            return True
    return False


def validate_rule(left: str, right: str, adjustment: float | int | str) -> KernRule:
    """Build a kerning rule, rejecting invalid input.

    Args:
        left: Selector for the first character
        right: Selector for the second character
        adjustment: Tightening in design units; numeric strings are accepted

    Returns:
        A validated KernRule

    Raises:
        KerningRuleError: If a selector is invalid or the adjustment is not a number
    """
    parse_selector(left)
    parse_selector(right)

    if isinstance(adjustment, bool):
        raise KerningRuleError("adjustment must be a number")
    try:
        value = float(adjustment)
    except (TypeError, ValueError) as e:
        raise KerningRuleError(f"adjustment {adjustment!r} is not a number") from e
    if not math.isfinite(value):
        raise KerningRuleError(f"adjustment {adjustment!r} is not a finite number")

    return KernRule(left=left, right=right, adjustment=value)


def total_adjustment(rules: list[KernRule], first: str, second: str) -> float:
    """Sum the adjustments of every rule matching a character pair.

    All matching rules contribute, in insertion order.
    """
    total = 0.0
    for rule in rules:
        if selector_matches(rule.left, first) and selector_matches(rule.right, second):
            total += rule.adjustment
    return total
