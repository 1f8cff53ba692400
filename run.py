"""Entry point for batch document intelligence runs."""

import argparse
import json
import logging
import sys
from pathlib import Path

from src.config import load_config
from src.ingestion import JsonOutlineExtractor, SampleOutlineExtractor
from src.intelligence import DocumentIntelligenceService
from src.models import SourceDocument

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Rank document sections for a persona and job-to-be-done."
    )
    parser.add_argument("files", nargs="+", help="Documents to analyze")
    parser.add_argument("--persona", default="", help="Reader persona")
    parser.add_argument("--job", default="", help="Job to be done")
    parser.add_argument(
        "--output", default="output.json", help="Where to write the results"
    )
    parser.add_argument(
        "--config", default="config.yaml", help="YAML configuration file"
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Use the built-in sample outline instead of outline files",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Analyze the given documents and write the results as JSON."""
    args = parse_args(argv)
    config = load_config(args.config)

    logging.basicConfig(level=config.logging.level, format=config.logging.format)

    documents: list[SourceDocument] = []
    for file_name in args.files:
        try:
            documents.append(SourceDocument.from_path(file_name))
        except FileNotFoundError:
            logger.error("Skipping missing file: %s", file_name)

    extractor = SampleOutlineExtractor() if args.sample else JsonOutlineExtractor()
    service = DocumentIntelligenceService(config=config, extractor=extractor)
    results = service.process_documents(documents, args.persona, args.job)

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(
            [result.model_dump(mode="json", by_alias=True) for result in results],
            ensure_ascii=False,
            indent=2,
        ),
        encoding="utf-8",
    )
    logger.info("Wrote %d results to %s", len(results), output_path)

    return 0 if results else 1


if __name__ == "__main__":
    sys.exit(main())
