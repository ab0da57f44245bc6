"""Command-line entry points for the article and SME tools."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from teams_tools.config import (
    TeamsToolsConfig,
    create_article_pipeline,
    create_sme_pipeline,
    get_default_config_path,
    load_config,
)
from teams_tools.pipeline.base import Pipeline
from teams_tools.prompt import ConsolePrompter

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    config: Path | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


def build_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml if present)",
    )
    return parser


def resolve_config(args: CLIArgs) -> TeamsToolsConfig:
    """Load the given config, the default file if present, or built-in defaults."""
    if args.config is not None:
        return load_config(args.config)
    default_path = get_default_config_path()
    if default_path.exists():
        return load_config(default_path)
    return TeamsToolsConfig()


async def run(pipeline: Pipeline) -> None:
    """Run a pipeline against the terminal."""
    await pipeline.run(ConsolePrompter())


def _main(
    description: str,
    argv: list[str] | None,
    create_pipeline: Callable[[TeamsToolsConfig], Pipeline],
) -> None:
    ns = build_parser(description).parse_args(argv)

    try:
        args = CLIArgs(config=ns.config)
        config = resolve_config(args)
    except (ValidationError, ValueError, OSError) as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(str(e))
        sys.exit(1)

    logging.basicConfig(level=config.logging.level, format="%(message)s")

    try:
        asyncio.run(run(create_pipeline(config)))
    except KeyboardInterrupt:
        sys.exit(130)
    except EOFError:
        logger.error("Input closed before all questions were answered.")
        sys.exit(1)


def article_images_main(argv: list[str] | None = None) -> None:
    """Entry point for ``article-images``."""
    _main(
        "Fetch an author's articles and list the image URLs they embed.",
        argv,
        create_article_pipeline,
    )


def bulk_assign_sme_main(argv: list[str] | None = None) -> None:
    """Entry point for ``bulk-assign-sme``."""
    _main(
        "Create a user group from email addresses and assign it as SMEs on a tag.",
        argv,
        create_sme_pipeline,
    )
