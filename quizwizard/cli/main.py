"""QuizWizard command-line client."""
import argparse
from typing import List, Optional

from quizwizard.cli.client import ClientError, QuizClient
from quizwizard.cli.session import Output, Prompt, display_categories, display_results, run_quiz
from quizwizard.core.config import get_settings


def run_categories(client: QuizClient, out: Output = print) -> int:
    out("\n+++ QuizWizard Categories +++")
    try:
        categories = client.fetch_categories()
    except ClientError as e:
        out(f"\nFailed to fetch categories: {e.message}")
        return 1
    display_categories(categories, out)
    return 0


def run_start(client: QuizClient, category: str, prompt: Prompt = input, out: Output = print) -> int:
    out("\n+++ QuizWizard Starting +++")
    category = category.strip().lower() or "random"

    try:
        questions = client.fetch_questions(category)
    except ClientError as e:
        if "is not a valid category" in e.message:
            out(f"\nFailure: {category} is not a valid category.")
            out("\nUse the 'categories' command for a list of available categories.")
        elif "no questions available" in e.message:
            out(f"\nCurrently there are no questions available for the {category} category.")
            out("\nPlease choose a different category or try again later.")
        else:
            out(f"\nFailed to fetch questions: {e.message}")
        return 1

    if not questions:
        out(f"\nCurrently there are no questions available for the {category} category.")
        out("\nPlease choose a different category or try again later.")
        return 1

    submission = run_quiz(questions, category, prompt, out)

    try:
        result = client.submit_quiz(submission)
    except ClientError as e:
        out(f"\nFailed to submit answers: {e.message}")
        return 1

    display_results(result, out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="quizwizard", description="Take trivia quizzes from a QuizWizard server.")
    ap.add_argument("--api-url", dest="api_url", default=None, help="QuizWizard API base URL (defaults to API_URL)")
    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("categories", help="Retrieve a list of available quiz categories")
    start = sub.add_parser("start", help="Start the quiz")
    start.add_argument("-c", "--category", default="random", help="Specify the category for the quiz")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    with QuizClient(args.api_url or settings.API_URL, timeout=settings.REQUEST_TIMEOUT) as client:
        if args.command == "categories":
            code = run_categories(client)
        else:
            code = run_start(client, args.category)
    print()
    return code


if __name__ == "__main__":
    raise SystemExit(main())
