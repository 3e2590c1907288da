"""
Truth-table grading (Protocol C).

Truth tables are graded row by row. Rows are enumerated most-significant
variable first, starting from the all-true assignment, which is the order the
catalog stores its tables in:

    n = 2  ->  TT, TF, FT, FF
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .result import TruthTableResult, TruthTableRowResult

if TYPE_CHECKING:
    from proofmaster.catalog.models import TruthTable

TRUE = "T"
FALSE = "F"
UNANSWERED = "?"


def enumerate_assignments(n: int) -> list[tuple[str, ...]]:
    """
    Enumerate all 2**n truth assignments for n variables.

    For row ``index`` and variable ``position`` the bit
    ``(index >> (n - 1 - position)) & 1`` selects the value; a clear bit is T.

    Args:
        n: Number of variables (>= 0)

    Returns:
        List of assignments, each a tuple of "T"/"F" values
    """
    if n < 0:
        raise ValueError("number of variables must be non-negative")
    return [
        tuple(
            FALSE if (index >> (n - 1 - position)) & 1 else TRUE
            for position in range(n)
        )
        for index in range(2 ** n)
    ]


def grade_truth_table(table: "TruthTable", selections: Sequence[str]) -> TruthTableResult:
    """
    Compare the user's selected result column against the stored table.

    Args:
        table: Stored truth table (rows in enumeration order)
        selections: One "T"/"F"/"?" per row; missing trailing rows count as "?"

    Returns:
        TruthTableResult with per-row outcomes
    """
    assignments = enumerate_assignments(len(table.variables))
    rows = []
    for index, (assignment, expected) in enumerate(zip(assignments, table.result_column)):
        submitted = selections[index].strip().upper() if index < len(selections) else UNANSWERED
        rows.append(
            TruthTableRowResult(
                index=index,
                assignment=assignment,
                expected=expected,
                submitted=submitted or UNANSWERED,
                correct=submitted == expected,
            )
        )
    return TruthTableResult(rows=rows)
