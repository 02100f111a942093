"""
Interactive quiz session and result display for the command-line client.

Input and output are injectable callables so the session can be driven
without a terminal.
"""
from typing import Callable, List, Sequence

from quizwizard.models.quiz import AnswerResponse, Question, QuizSubmission, SubmissionResult

Prompt = Callable[[str], str]
Output = Callable[[str], None]


def parse_selection(raw: str) -> int:
    """Convert a 1-based option number into a 0-based answer index, or -1."""
    try:
        return int(raw.strip()) - 1
    except ValueError:
        return -1


def run_quiz(
    questions: Sequence[Question],
    category: str,
    prompt: Prompt = input,
    out: Output = print,
) -> QuizSubmission:
    if not questions:
        raise ValueError(f"no questions available for the {category} category")

    out(f"\nYou have selected the {category} category.")
    out(f"Please answer all {len(questions)} questions.")

    responses: List[AnswerResponse] = []
    for number, question in enumerate(questions, start=1):
        out(f"\n+++ Question {number}: {question.question} +++\n")
        for option, answer in enumerate(question.answers, start=1):
            out(f"{option}. {answer}")

        try:
            raw = prompt("\nEnter option number: ")
        except EOFError:
            raw = ""
        selection = parse_selection(raw)
        if selection == question.correct_answer_index:
            out(f"\nCorrect! {question.answers[selection]} is the right answer.")
        elif 0 <= selection < len(question.answers):
            out(f"\nIncorrect! {question.answers[selection]} is the wrong answer.")
        else:
            out("\nIncorrect! Your selection was invalid.")
            selection = -1

        responses.append(AnswerResponse(question=question, answer=selection))

    return QuizSubmission(category=category, question_responses=responses)


def display_results(result: SubmissionResult, out: Output = print) -> None:
    out("\n+++ Quiz Results +++")
    out(f"\nRaw score: {result.score_string}")
    out(f"Percentage score: {result.score_percentage:.0f}%")
    out(f"\n{result.comparison}")


def display_categories(categories: Sequence[str], out: Output = print) -> None:
    if not categories:
        out("\nNo categories are available at the moment")
        return
    out("")
    for number, category in enumerate(categories, start=1):
        out(f"{number}. {category}")
