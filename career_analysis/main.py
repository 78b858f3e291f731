import argparse
import json
import sys
from pathlib import Path

import psycopg

from career_analysis.analysis.chat import CareerChatAdvisor
from career_analysis.analysis.exceptions import AnalysisError
from career_analysis.analysis.factory import AnalysisClientFactory
from career_analysis.analysis.models import Variant
from career_analysis.config.settings import Settings
from career_analysis.database.connection import close_pool, init_pool
from career_analysis.database.repositories.analysis_repository import AnalysisRepository
from career_analysis.extraction import media_types
from career_analysis.logging.logger import Log
from career_analysis.processing.exceptions import RequestValidationError
from career_analysis.processing.processor import build_processor
from career_analysis.processing.upload_store import UploadStore

_HISTORY_LABELS: dict[Variant, str] = {
    Variant.RESUME: "resume",
    Variant.LINKEDIN_PROFILE: "LinkedIn",
}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="career-analysis",
        description="Match a resume or LinkedIn profile export against a job description.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    analyze = commands.add_parser("analyze", help="Analyze a PDF, DOCX, JPG or PNG file")
    analyze.add_argument("file", type=Path)
    job = analyze.add_mutually_exclusive_group(required=True)
    job.add_argument("--job-description", default=None)
    job.add_argument("--job-description-file", type=Path, default=None)
    analyze.add_argument(
        "--variant",
        choices=[variant.value for variant in Variant],
        default=Variant.RESUME.value,
    )
    analyze.add_argument("--media-type", default=None)
    analyze.add_argument("--user-id", default=None)

    chat = commands.add_parser("chat", help="Ask the career advisor a single question")
    chat.add_argument("message")

    history = commands.add_parser("history", help="List a user's most recent analyses")
    history.add_argument("--user-id", required=True)
    history.add_argument(
        "--variant",
        choices=[variant.value for variant in Variant],
        default=Variant.RESUME.value,
    )
    history.add_argument("--limit", type=int, default=10)

    return parser.parse_args(argv)


def run_analyze(args: argparse.Namespace, settings: Settings) -> tuple[int, dict[str, object]]:
    """Store the file as an upload and run it through the pipeline.

    Configuration errors surface before anything is written to upload_dir.
    """
    processor = build_processor(settings)
    job_description = args.job_description
    if args.job_description_file is not None:
        job_description = args.job_description_file.read_text(encoding="utf-8")
    source: Path = args.file
    media_type = args.media_type or media_types.guess_from_filename(source.name)
    artifact = UploadStore(Path(settings.upload_dir)).save(
        source.read_bytes(), media_type, source.name
    )
    return processor.respond(artifact, job_description, Variant(args.variant), args.user_id)


def run_chat(args: argparse.Namespace, settings: Settings) -> tuple[int, dict[str, object]]:
    advisor = CareerChatAdvisor(AnalysisClientFactory.create(settings))
    try:
        response = advisor.reply([{"role": "user", "content": args.message}])
    except RequestValidationError as exc:
        return exc.status_code, {"error": exc.message}
    except AnalysisError:
        Log.exception("Chat request failed")
        return 500, {"error": "Failed to process chat request"}
    return 200, {"response": response}


def run_history(args: argparse.Namespace) -> tuple[int, object]:
    variant = Variant(args.variant)
    try:
        records = AnalysisRepository().list_recent(args.user_id, variant, limit=args.limit)
    except psycopg.Error:
        Log.exception(f"Error fetching {variant.value} analyses")
        return 500, {"error": f"Failed to fetch {_HISTORY_LABELS[variant]} analyses"}
    return 200, [
        {
            "id": record.id,
            "userId": record.user_id,
            "jobDescription": record.job_description,
            "analysis": record.analysis,
            "createdAt": record.created_at.isoformat() if record.created_at else None,
        }
        for record in records
    ]


def main(argv: list[str] | None = None) -> int:
    """Entry point: configure -> run one command -> print its JSON body."""
    args = parse_args(argv)
    settings = Settings()
    # stdout carries the JSON result
    Log.configure(settings.log_level, stream=sys.stderr)
    uses_database = settings.persist_results or args.command == "history"
    if uses_database:
        init_pool(settings)
        AnalysisRepository().ensure_tables()

    try:
        if args.command == "chat":
            status_code, body = run_chat(args, settings)
        elif args.command == "history":
            status_code, body = run_history(args)
        else:
            status_code, body = run_analyze(args, settings)
    finally:
        if uses_database:
            close_pool()

    output = sys.stdout if status_code == 200 else sys.stderr
    print(json.dumps(body, indent=2, ensure_ascii=False), file=output)
    return 0 if status_code == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
