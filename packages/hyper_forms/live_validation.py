"""Translate server-side validation rules into HTML5 attributes."""

import logging
import re

__all__ = ["LiveValidation"]

logger = logging.getLogger(__name__)

NUMBER_TYPES = ("number", "range")
DATE_TYPES = ("date", "datetime-local", "month", "week", "time")

PATTERNS = {
    "integer": r"[+-]?\d+",
    "numeric": r"[+-]?\d*\.?\d+",
    "alpha": r"[a-zA-Z]+",
    "alpha_num": r"[a-zA-Z0-9]+",
    "alpha_dash": r"[a-zA-Z0-9_\-]+",
}

# /pattern/flags as written in rule strings
_DELIMITED = re.compile(r"^/(?P<pattern>.*)/[a-zA-Z]*$")


class LiveValidation:
    """Apply validation rules to a field as browser-side constraints.

    Rules come from ``FormContext.get_rules``, e.g. ``{"required": [], "max": ["20"]}``
    gives a text input ``required`` and ``maxlength="20"``. Rules without a
    browser equivalent are skipped.
    """

    def __init__(self, field):
        self.field = field

    def apply(self, rules: dict[str, list[str]]):
        for rule, params in rules.items():
            self.apply_rule(rule, params)
        return self.field

    def apply_rule(self, rule: str, params: list[str]):
        field = self.field

        match rule:
            case "required":
                field.set_attribute("required", True)

            case "email" | "url":
                if field.get_type() == "text":
                    field.set_type(rule)

            case "integer" | "numeric" | "alpha" | "alpha_num" | "alpha_dash":
                self._add_pattern(PATTERNS[rule])

            case "max" if params:
                if self._is_number():
                    field.set_attribute("max", params[0])
                else:
                    field.set_attribute("maxlength", params[0])

            case "min" if params:
                if self._is_number():
                    field.set_attribute("min", params[0])
                else:
                    field.set_attribute("minlength", params[0])

            case "between" if len(params) == 2:
                low, high = params
                if self._is_number():
                    field.set_attributes({"min": low, "max": high})
                else:
                    field.set_attributes({"minlength": low, "maxlength": high})

            case "in" if params:
                choices = "|".join(re.escape(p) for p in params)
                self._add_pattern(f"^(?:{choices})$")

            case "not_in" if params:
                choices = "|".join(re.escape(p) for p in params)
                self._add_pattern(f"^(?!(?:{choices})$).*$")

            case "regex" | "match" if params:
                self._add_pattern(self._strip_delimiters(params[0]))

            case "before" if params and field.get_type() in DATE_TYPES:
                field.set_attribute("max", params[0])

            case "after" if params and field.get_type() in DATE_TYPES:
                field.set_attribute("min", params[0])

            case "image" if field.get_type() == "file":
                field.set_attribute("accept", "image/*")

            case "mimes" if params and field.get_type() == "file":
                field.set_attribute("accept", ",".join(f".{ext}" for ext in params))

            case _:
                logger.debug("No live validation for rule %r on %r", rule, field.get_name())

    def _is_number(self) -> bool:
        return self.field.get_type() in NUMBER_TYPES

    def _add_pattern(self, pattern: str):
        """Set ``pattern``, keeping any pattern already on the field.

        Browsers anchor the whole pattern, so the earlier one becomes an
        anchored lookahead and both must match.
        """
        current = self.field.get_attribute("pattern")
        if current and current != pattern:
            pattern = f"(?=(?:{current})$)(?:{pattern})"
        self.field.set_attribute("pattern", pattern)

    @staticmethod
    def _strip_delimiters(pattern: str) -> str:
        match = _DELIMITED.match(pattern)
        return match.group("pattern") if match else pattern
