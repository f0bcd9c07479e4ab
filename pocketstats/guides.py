"""Static learning material: the statistics cheat sheet and R basics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Section:
    """One titled block of a guide.

    Attributes:
        title: Heading shown above the block.
        lines: Bullet lines for prose sections, or source lines for code.
        code: Render ``lines`` as an indented code block instead of bullets.
    """

    title: str
    lines: Tuple[str, ...]
    code: bool = False


CHEAT_SHEET: Tuple[Section, ...] = (
    Section(
        "Hypotheses",
        (
            "H0: Null hypothesis (no effect/difference)",
            "H1: Alternative hypothesis (effect exists)",
        ),
    ),
    Section(
        "Errors",
        (
            "Type I error (False Positive): Reject H0 when it's true",
            "Type II error (False Negative): Fail to reject H0 when it's false",
        ),
    ),
    Section(
        "p-value",
        (
            "Probability of observing data at least this extreme if H0 is true",
            "Low p-value → evidence against H0",
        ),
    ),
    Section(
        "Confidence Interval (CI)",
        (
            "A range of plausible values for the true population parameter",
            "Common: 95% CI",
        ),
    ),
    Section("Correlation vs Causation", ("Correlation ≠ causation",)),
    Section(
        "Central Limit Theorem",
        ("Sample means → normal distribution as n increases",),
    ),
    Section(
        "Effect Size",
        ("Measures strength of effect, not just significance",),
    ),
)

R_BASICS: Tuple[Section, ...] = (
    Section(
        "Assigning values:",
        ("x <- 10", "y <- c(1,2,3,4,5)  # vector"),
        code=True,
    ),
    Section(
        "Basic statistics:",
        ("mean(y)", "median(y)", "var(y)", "sd(y)", "summary(y)"),
        code=True,
    ),
    Section(
        "Data frame:",
        ("df <- data.frame(", "  x = c(1,2,3),", "  y = c(4,5,6)", ")"),
        code=True,
    ),
    Section("Plotting:", ("plot(y)", "hist(y)"), code=True),
)


def render_sections(title: str, sections: Tuple[Section, ...]) -> str:
    """Render a guide as plain text with an underlined title."""
    out = [title, "=" * len(title)]
    for section in sections:
        out.append("")
        out.append(section.title)
        if section.code:
            out.extend(f"    {line}" for line in section.lines)
        else:
            out.extend(f"  • {line}" for line in section.lines)
    return "\n".join(out)


def render_cheat_sheet() -> str:
    return render_sections("Statistics Cheat Sheet", CHEAT_SHEET)


def render_r_basics() -> str:
    return render_sections("R Basics Tutorial", R_BASICS)
