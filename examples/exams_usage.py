"""
Exam Results Example

This example demonstrates chaining where() filters over plain objects.
The order of criteria on the same level does not change the result.
"""

from __future__ import annotations

from types import SimpleNamespace

from fluent_collection import Collection


def exam(subject: str, status: str, month: int) -> SimpleNamespace:
    return SimpleNamespace(subject=subject, status=status, month=month)


exams = Collection([
    exam('Math', 'ok', 4),
    exam('Statistics', 'ok', 4),
    exam('Programming', 'ok', 4),
    exam('Accounting', 'failed', 4),

    exam('Math', 'ok', 5),
    exam('Statistics', 'failed', 5),
    exam('Programming', 'ok', 5),
    exam('Accounting', 'failed', 5),

    exam('Math', 'failed', 6),
    exam('Statistics', 'failed', 6),
    exam('Programming', 'ok', 6),
    exam('Accounting', 'ok', 6),
])


def main() -> None:
    # All passed exams
    passed_exams = exams.where_equals('status', 'ok')

    # All the exams in one month
    may_exams = exams.where_equals('month', 5)

    # The exams taken in May that were passed
    passed_exams_in_may = exams.where_equals('month', 5).where_equals('status', 'ok')

    # The exams taken after April that were failed
    failed_exams_after_april = exams.where_greater('month', 4).where('status', 'failed')

    # Same result, criteria in the other order
    assert failed_exams_after_april == exams.where('status', 'failed').where_greater('month', 4)

    # Math results overall
    math_results = exams.where('subject', 'Math').pluck_column('status')

    # How many Statistics exams were passed
    statistics_ok_count = exams.where('subject', 'Statistics').where('status', 'ok').count()

    print("Passed:", passed_exams.count())
    print("Taken in May:", may_exams.count())
    print("Passed in May:", passed_exams_in_may.pluck_column('subject').values())
    print("Failed after April:", failed_exams_after_april.pluck_column('subject').values())
    print("Math:", math_results.values())
    print("Statistics passed:", statistics_ok_count)

    for month, results in exams.group_by('month').items():
        ratio = results.where_equals('status', 'ok').count() / results.count()
        print(f"Month {month}: {ratio:.0%} passed")


if __name__ == "__main__":
    main()
