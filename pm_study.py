#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ProofMaster Study - Interactive command-line study tool for Book of Proof.

Usage:
    python pm_study.py <command> [options]

Commands:
    sections                List sections with exercise counts
    search TEXT             Find exercises by id, question or section title
    study [ID]              Work through exercises in order (from ID, or --section)
    random                  Random exercises you have not mastered yet
    practice                Open-answer practice problems
    flashcards DECK         Run through a flashcard deck
    query TEXT              Ask the math engine through a running ProofMaster service

While studying, type an answer or one of:
    :hint  :reveal  :remix  :next  :prev  :quit  (:table for truth tables)

Example:
    python pm_study.py study 1.1.A.1
    python pm_study.py query "power set of {1,2}" --base-url http://localhost:8000
"""

import argparse
import logging
import random
import sys

from proofmaster.answer import (
    check_exercise,
    feedback_for,
    grade_open_answer,
    grade_truth_table,
)
from proofmaster.answer.truth_table import FALSE, TRUE, UNANSWERED
from proofmaster.catalog import (
    ExerciseNotFound,
    TruthTableExercise,
    default_catalog,
    is_remixable,
    remix,
)
from proofmaster.progress import ProgressStore
from proofmaster.query import QueryClient, web_url

# Ensure UTF-8 encoding for Windows terminals
if sys.platform == 'win32':
    import codecs
    sys.stdout = codecs.getwriter('utf-8')(sys.stdout.buffer, 'strict')
    sys.stderr = codecs.getwriter('utf-8')(sys.stderr.buffer, 'strict')

COMMANDS = ":hint  :reveal  :remix  :next  :prev  :quit"
DEFAULT_BASE_URL = "http://localhost:8000"
TABLE_PROMPT = "Type :table to fill in the result column (T/F, blank to skip a row)."


def banner(title, write=print):
    write("\n" + "=" * 70)
    write(f"  {title}")
    write("=" * 70 + "\n")


def read_line(prompt, input_fn=input):
    """Read one line; None on end of input."""
    try:
        return input_fn(prompt)
    except EOFError:
        return None


def format_exercise(exercise):
    """Exercise header and question as shown in the terminal."""
    label = f"[{exercise.id}]"
    if exercise.remixed:
        label += " (remixed)"
    return f"{label}\n{exercise.question}"


def show_sections(catalog, write=print):
    for section in catalog.sections():
        count = sum(len(part) for part in catalog.by_section(section.key).values())
        write(f"  {section.key:<5} {section.title}  ({count} exercises)")


def show_search(catalog, text, write=print):
    found = catalog.search(text)
    if not found:
        write(f"No exercises match '{text}'.")
        return
    for exercise in found:
        write(f"  {exercise.id:<10} {exercise.question}")


def show_progress(catalog, progress, write=print):
    """Overall mastery followed by each section that has exercises."""
    overall = progress.overall(catalog)
    write(f"Mastered: {overall.completed}/{overall.total} ({overall.percentage}%)")
    for entry in progress.section_breakdown(catalog):
        agg = entry.aggregate
        write(f"  {entry.section:<5} {entry.title:<40} {agg.completed}/{agg.total} ({agg.percentage}%)")


def show_reveal(exercise, write=print):
    write(f"Answer: {exercise.answer}")
    if exercise.external_query_hint:
        write(f"Try it: {web_url(exercise.external_query_hint)}")


def ask_truth_table(exercise, input_fn=input, write=print):
    """
    Prompt for the result column of a truth-table exercise, one row at a time.

    Returns:
        List of selections, or a command string (":next", ":prev", ":quit")
        if the user bailed out part way
    """
    table = exercise.truth_table
    n = len(table.variables)
    write("  " + " | ".join(table.variables) + " | " + table.formula)
    selections = []
    for row in table.rows:
        prompt = "  " + " | ".join(row[:n]) + " | "
        while True:
            line = read_line(prompt, input_fn)
            if line is None:
                return ":quit"
            value = line.strip().upper() or UNANSWERED
            if value.lower() in (":next", ":prev", ":quit"):
                return value.lower()
            if value in (TRUE, FALSE, UNANSWERED):
                break
            write("  Enter T, F or ? (leave blank to skip).")
        selections.append(value)
    return selections


def study_exercise(exercise, progress, rng=None, input_fn=input, write=print):
    """
    Work one exercise until it is graded or the user moves on.

    Returns:
        "next", "prev" or "quit"
    """
    write(format_exercise(exercise))
    if isinstance(exercise, TruthTableExercise):
        write(TABLE_PROMPT)
    while True:
        line = read_line("> ", input_fn)
        if line is None:
            return "quit"
        text = line.strip()

        if not text:
            write(f"Type an answer, or one of {COMMANDS}")
            continue
        if text in (":next", ":prev", ":quit"):
            return text[1:]
        if text == ":hint":
            write(f"Hint: {exercise.hint}" if exercise.hint else "(No hint for this one)")
            continue
        if text == ":reveal":
            show_reveal(exercise, write)
            continue
        if text == ":remix":
            if not is_remixable(exercise):
                write("This exercise has no variants.")
                continue
            exercise = remix(exercise, rng)
            write(format_exercise(exercise))
            continue

        if isinstance(exercise, TruthTableExercise):
            if text != ":table":
                write(TABLE_PROMPT)
                continue
            selections = ask_truth_table(exercise, input_fn, write)
            if isinstance(selections, str):
                return selections[1:]
            result = grade_truth_table(exercise.truth_table, selections)
            for row in result.rows:
                if not row.correct:
                    write(f"  ✗ row {row.index + 1}: {' '.join(row.assignment)} -> {row.expected}")
            write(result.summary())
            progress.record(exercise.id, result.all_correct)
            return "next"

        result = check_exercise(text, exercise)
        progress.record(result.exercise_id, result.correct)
        if result.correct:
            write("✓ CORRECT")
        else:
            write("✗ INCORRECT")
        write(f"  Your answer: {result.student_answer}")
        write(f"  Book answer: {result.correct_answer}")
        return "next"


def run_study(catalog, progress, start, rng=None, input_fn=input, write=print):
    """Walk the catalog in order from start, wrapping at both ends."""
    exercise = start
    while True:
        write("")
        action = study_exercise(exercise, progress, rng, input_fn, write)
        if action == "quit":
            return
        exercise = catalog.next(exercise.id, -1 if action == "prev" else 1)


def run_random(catalog, progress, rng=None, input_fn=input, write=print):
    while True:
        write("")
        exercise = catalog.random_unmastered(progress, rng)
        if study_exercise(exercise, progress, rng, input_fn, write) == "quit":
            return


def run_practice(catalog, rng=None, input_fn=input, write=print, index=None):
    """
    Open-answer practice. Each problem is retried until it is answered
    correctly or skipped with :next.
    """
    problems = list(enumerate(catalog.practice))
    if index is not None:
        problems = [problems[index]]

    for number, problem in problems:
        write(f"\nProblem {number + 1}: {problem.question}")
        while True:
            line = read_line("> ", input_fn)
            if line is None or line.strip() == ":quit":
                return
            text = line.strip()
            if text == ":next":
                write(f"Answer: {problem.answer}")
                break
            if not text:
                write("Type an answer, :next to skip or :quit.")
                continue

            result = grade_open_answer(text, problem)
            feedback = feedback_for(result, rng)
            write(feedback.text)
            if feedback.reveal_hint:
                write(f"Hint: {problem.hint}")
            if result.correct:
                write(problem.explanation)
                break


def run_flashcards(deck, rng=None, input_fn=input, write=print):
    """
    Show each card, flip on Enter, then ask whether it was known.

    Returns:
        The finished (or abandoned) FlashcardRun
    """
    from proofmaster.drills import FlashcardRun

    run = FlashcardRun(deck, rng)
    banner(deck.title, write)
    while not run.done:
        card = run.current
        write(f"\n[{run.position + 1}/{len(run.cards)}] {card.question}")
        if read_line("(Enter to flip) ", input_fn) is None:
            break
        write(f"  {card.answer}")
        if card.law:
            write(f"  Law: {card.law}")
        if card.hint:
            write(f"  Hint: {card.hint}")

        line = read_line("Know it? [y/n/q] ", input_fn)
        if line is None or line.strip().lower() == "q":
            break
        if line.strip().lower().startswith("y"):
            run.mark_known()
        else:
            run.mark_review()

    write(f"\nKnown: {len(run.known)}  To review: {len(run.review)}")
    return run


def run_query(client, text, write=print):
    """Ask the proxy one question; returns a process exit code."""
    outcome = client.ask(text)
    if outcome is None:
        write("Enter a query.")
        return 2
    if outcome.ok:
        write(outcome.result)
        return 0
    write(outcome.error)
    return 1


def build_parser():
    parser = argparse.ArgumentParser(
        description="Interactive Book of Proof study tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python pm_study.py sections
  python pm_study.py study --section 2.2
  python pm_study.py practice --problem 4
  python pm_study.py flashcards page-1 --seed 7
        """
    )
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for remixes and drills (default: random)')
    parser.add_argument('--debug', action='store_true',
                        help='Verbose logging and tracebacks on error')

    sub = parser.add_subparsers(dest='command', required=True)
    sub.add_parser('sections', help='List sections')

    search = sub.add_parser('search', help='Search exercises')
    search.add_argument('text')

    study = sub.add_parser('study', help='Study exercises in order')
    study.add_argument('exercise_id', nargs='?', default=None,
                       help='Exercise to start from (default: first)')
    study.add_argument('--section', default=None,
                       help='Start from the first exercise of this section')

    sub.add_parser('random', help='Random unmastered exercises')

    practice = sub.add_parser('practice', help='Open-answer practice problems')
    practice.add_argument('--problem', type=int, default=None,
                          help='Only this problem (1-based)')

    flashcards = sub.add_parser('flashcards', help='Flashcard drill')
    flashcards.add_argument('deck', help='Deck key, e.g. page-1')

    query = sub.add_parser('query', help='Ask the math engine')
    query.add_argument('text')
    query.add_argument('--base-url', default=DEFAULT_BASE_URL,
                       help=f'ProofMaster service URL (default: {DEFAULT_BASE_URL})')
    return parser


def first_in_section(catalog, key):
    """First exercise of a section in declared order; None if it has none."""
    for part in catalog.by_section(key).values():
        return part[0]
    return None


def main(argv=None, input_fn=input, write=print):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    rng = random.Random(args.seed)
    catalog = default_catalog()
    progress = ProgressStore()

    try:
        if args.command == 'sections':
            show_sections(catalog, write)
        elif args.command == 'search':
            show_search(catalog, args.text, write)
        elif args.command == 'study':
            if args.section:
                start = first_in_section(catalog, args.section)
                if start is None:
                    write(f"Error: section '{args.section}' has no exercises")
                    return 1
            elif args.exercise_id:
                start = catalog.by_id(args.exercise_id)
            else:
                start = catalog.next(None, 1)
            run_study(catalog, progress, start, rng, input_fn, write)
            banner("PROGRESS", write)
            show_progress(catalog, progress, write)
        elif args.command == 'random':
            run_random(catalog, progress, rng, input_fn, write)
            banner("PROGRESS", write)
            show_progress(catalog, progress, write)
        elif args.command == 'practice':
            index = None
            if args.problem is not None:
                index = args.problem - 1
                if not 0 <= index < len(catalog.practice):
                    write(f"Error: no practice problem {args.problem} (1-{len(catalog.practice)})")
                    return 1
            run_practice(catalog, rng, input_fn, write, index)
        elif args.command == 'flashcards':
            deck = catalog.decks.get(args.deck)
            if deck is None:
                write(f"Error: unknown deck '{args.deck}' (choose from {', '.join(catalog.decks)})")
                return 1
            run_flashcards(deck, rng, input_fn, write)
        elif args.command == 'query':
            return run_query(QueryClient(args.base_url), args.text, write)
    except ExerciseNotFound as e:
        write(f"Error: {e}")
        return 1
    except Exception as e:
        write(f"\n❌ Error: {e}")
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
