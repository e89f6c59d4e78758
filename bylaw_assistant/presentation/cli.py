import json
import logging
import sys

import uvicorn

from bylaw_assistant.config.settings import settings
from bylaw_assistant.container import configure_container, container
from bylaw_assistant.core.services.answer_service import AnswerService
from bylaw_assistant.core.services.ingest_service import IngestService
from bylaw_assistant.core.services.search_service import SearchService

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)

USAGE = """Usage: python -m bylaw_assistant.presentation.cli <command> [args]
Commands:
  serve                 run the HTTP API
  ingest [--force]      index bylaw documents from DOCS_PATH
  search <query...>     search indexed bylaws
  answer <topic...>     show the verified answer for a topic"""


def cmd_serve():
    """Serve command - run the HTTP API."""
    from bylaw_assistant.presentation.api import create_app

    app = create_app(configure_container(settings))
    logger.info(f"Starting API on {settings.api_host}:{settings.api_port}")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


def cmd_ingest(args: list[str]):
    """Ingest command - index documents only."""
    configure_container(settings)
    ingest_service = container.resolve(IngestService)
    count = ingest_service.run(force="--force" in args)
    logger.info(f"Indexed {count} chunks")


def cmd_search(args: list[str]):
    """Search command - print the response envelope."""
    configure_container(settings)
    search_service = container.resolve(SearchService)
    response = search_service.execute({"query": " ".join(args)})
    print(json.dumps(response.to_dict(), indent=2))
    if not response.success:
        sys.exit(1)


def cmd_answer(args: list[str]):
    """Answer command - verified answer lookup, no external services."""
    answer = AnswerService().lookup(" ".join(args))
    print(f"{answer.title} ({answer.citation})\n")
    print(answer.answer)
    print(f"\nSource: {answer.source}")


def main():
    """CLI entry point."""
    if len(sys.argv) < 2:
        print(USAGE)
        sys.exit(1)

    command, args = sys.argv[1], sys.argv[2:]

    if command == "serve":
        cmd_serve()
    elif command == "ingest":
        cmd_ingest(args)
    elif command == "search" and args:
        cmd_search(args)
    elif command == "answer" and args:
        cmd_answer(args)
    else:
        print(f"Unknown command: {' '.join(sys.argv[1:])}")
        print(USAGE)
        sys.exit(1)


if __name__ == "__main__":
    main()
