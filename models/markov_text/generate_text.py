#!/usr/bin/env python3
"""
Markov Chain Text Generation Script

Reads a source text, trains a generator on it and prints the generated text.

Usage:
    markov-text --length 100 --size 2 --file pushkin.txt
    python -m models.markov_text.generate_text --length 50 --size 3 --file ./my_text.txt --seed 7

Flags left out are taken from ``configs/markov_text.yaml`` (or the
environment-specific file selected with ``--env``).
"""
import os
import sys
import argparse

from models.markov_text.config import load_config, resolve_samples_dir
from models.markov_text.errors import MarkovTextError
from models.markov_text.generator import Generator
from utils.loggers.json_logger import get_logger

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def parse_args(argv=None):
    """
    Parse command-line arguments.

    Args:
        argv (list, optional): Arguments to parse (default: ``sys.argv[1:]``)

    Returns:
        argparse.Namespace: Parsed arguments; unset options are None
    """
    parser = argparse.ArgumentParser(
        description="Generate text with a Markov chain trained on a source file")
    parser.add_argument("--length", type=int,
                        help="Number of tokens to generate")
    parser.add_argument("--size", type=int,
                        help="Tokens per sample; the next token depends on size - 1 previous ones")
    parser.add_argument("--file",
                        help="Source text file, as a path or a name in the samples directory")
    parser.add_argument("--seed", type=int,
                        help="Random seed for reproducible output")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--env", choices=["development", "test", "production"],
                        default="development", help="Environment (default: development)")
    parser.add_argument("--log-file", help="Write JSON logs to this file")

    return parser.parse_args(argv)


def resolve_source_path(source_file, samples_dir):
    """
    Find a source file: as given first, then inside the samples directory.

    Returns:
        str: The path to read
    """
    if os.path.isfile(source_file):
        return source_file
    return os.path.join(samples_dir, source_file)


def read_source_text(source_path):
    """
    Read a source text file.

    Raises:
        OSError: If the file cannot be read
    """
    with open(source_path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv=None):
    """
    Run the command line tool.

    Returns:
        int: Process exit code
    """
    args = parse_args(argv)
    config = load_config(environment=args.env, config_path=args.config)

    logger = get_logger("markov_text", log_file=args.log_file or config.get("log_file"))

    sequence_length = args.length if args.length is not None else config.get("sequence_length")
    if sequence_length is None:
        print("Use `--length` option to specify sentence length")
        return EXIT_USAGE

    sample_size = args.size if args.size is not None else config.get("sample_size")
    if sample_size is None:
        print("Use `--size` option to specify sample size")
        return EXIT_USAGE

    source_file = args.file or config.get("source_file")
    if not source_file:
        print("Use `--file` option to specify source file")
        return EXIT_USAGE

    seed = args.seed if args.seed is not None else config.get("seed")

    source_path = resolve_source_path(source_file, resolve_samples_dir(config))
    try:
        source_text = read_source_text(source_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Error while reading source file", extra={
            "metrics": {"path": source_path, "error": str(e)}
        })
        print(f"Error while reading source file:\n{e}")
        return EXIT_ERROR

    if len(source_text) == 0:
        print("File with source text is empty!")
        return EXIT_ERROR

    logger.info("Generation requested", extra={
        "metrics": {
            "source": source_path,
            "sequence_length": sequence_length,
            "sample_size": sample_size,
            "seed": seed
        }
    })

    try:
        generator = Generator(
            source_text,
            sequence_length=sequence_length,
            sample_size=sample_size,
            seed=seed,
            logger=logger
        )
        output = generator.generate_text()
    except MarkovTextError as e:
        print(f"Error: {e}")
        return EXIT_ERROR

    print("Generated output: ")
    print(output)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
