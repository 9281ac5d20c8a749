"""Built-in diagnostic scenarios for whitespace and invisible-character handling.

Run them with ``python main.py --check`` to confirm an installation collapses
the whitespace patterns real email clients produce.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, NamedTuple

from mailmark.pipeline import transform

_DOUBLE_SPACE_RE = re.compile(r" {2,}")


class Scenario(NamedTuple):
    name: str
    html: str
    check: Callable[[str], bool]


@dataclass
class CheckResult:
    name: str
    output: str
    passed: bool


def _equals(expected: str) -> Callable[[str], bool]:
    return lambda out: out == expected


def _no_double_spaces(out: str) -> bool:
    return not _DOUBLE_SPACE_RE.search(out)


SCENARIOS: List[Scenario] = [
    Scenario(
        "150 regular spaces",
        "<p>Before" + " " * 150 + "After</p>",
        _equals("Before After"),
    ),
    Scenario(
        "150 &nbsp; entities",
        "<p>Word" + "&nbsp;" * 150 + "another</p>",
        _equals("Word another"),
    ),
    Scenario(
        "email signature spacer",
        "<div>A new model I'm excited about</div>\n"
        "<div>" + "&nbsp;" * 150 + "</div>\n"
        "<div>Forwarded this email?</div>",
        _no_double_spaces,
    ),
    Scenario(
        "inline &nbsp; between spans",
        "<span>A</span>" + "&nbsp;" * 100 + "<span>B</span>",
        _equals("A B"),
    ),
    Scenario(
        "raw U+00A0 characters",
        "<p>X" + "\u00a0" * 50 + "Y</p>",
        _equals("X Y"),
    ),
    Scenario(
        "zero-width characters",
        "<p>A\u200b\u200c\u200d\u200e\u200f\u034fB</p>",
        _equals("AB"),
    ),
    Scenario(
        "150 em spaces",
        "<p>Before" + "\u2003" * 150 + "After</p>",
        _equals("Before After"),
    ),
    Scenario(
        "mixed Unicode spaces",
        "<p>A\u00a0\u2002\u2003\u2009\u200a\u3000B</p>",
        _equals("A B"),
    ),
]


def run_selfcheck(scenarios: List[Scenario] = SCENARIOS) -> List[CheckResult]:
    """Transform every scenario and report whether its check passed."""
    results = []
    for scenario in scenarios:
        out = transform(scenario.html)
        results.append(CheckResult(scenario.name, out, scenario.check(out)))
    return results
