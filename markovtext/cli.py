#!/usr/bin/env python3
"""
MarkovText CLI
==============
Command-line interface for building a Markov model from corpus files and
generating sentences from it.

Usage:
    markovtext generate -c book.txt -o 2
    markovtext generate --seed 6a4156e2 -n 3
    markovtext stats -c book.txt --json
    markovtext bench -i 5000
"""

import argparse
import json
import sys

from rich.console import Console

from markovtext import __version__

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def result(self, text: str):
        """Print essential output, even in quiet mode."""
        print(text)

    def json(self, data: dict):
        print(json.dumps(data, indent=2, ensure_ascii=False))

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)


def load_model(args, cfg):
    """Load the corpus named on the command line and build a model from it."""
    from markovtext import build_model, load_corpus

    paths = args.corpus or [cfg.corpus_path]
    corpus = load_corpus(paths, encoding=cfg.encoding)
    order = args.order if args.order is not None else cfg.order
    return build_model(corpus, order)


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output, cfg):
    """Generate sentences."""
    from markovtext import SentenceGenerator, SeededRandom, new_seed
    from markovtext.settings import get_setting

    count = args.count if args.count is not None else get_setting("generation.default_count", 1)
    if count < 1:
        out.error("Count must be at least 1")
        return 1

    model = load_model(args, cfg)

    seed = args.seed or new_seed(get_setting("generation.seed_length", 8))
    generator = SentenceGenerator(model, max_word_count=cfg.max_word_count)
    sentences = generator.generate_batch(count, SeededRandom(seed))

    if args.json:
        out.json({'seed': seed, 'order': model.order, 'sentences': sentences})
        return 0

    out.print()
    for sentence in sentences:
        out.result(sentence)
    out.print()
    out.print(f"Seed: {seed}")
    return 0


def cmd_stats(args, out: Output, cfg):
    """Show statistics of the model built from the corpus."""
    from markovtext.ui import stats_table

    stats = load_model(args, cfg).stats()

    if args.json:
        out.json(stats.to_dict())
        return 0

    out.console.print(stats_table(stats))
    return 0


def cmd_bench(args, out: Output, cfg):
    """Time model building and seeded generation."""
    from markovtext import SentenceGenerator, SeededRandom, build_model, load_corpus
    from markovtext.profiler import Profiler
    from markovtext.settings import get_setting
    from markovtext.ui import bench_table

    iterations = args.iterations
    if iterations is None:
        iterations = get_setting("bench.iterations", 1000)
    if iterations < 1:
        out.error("Iterations must be at least 1")
        return 1
    seed = args.seed or get_setting("bench.seed", "6a4156e2")
    order = args.order if args.order is not None else cfg.order

    profiler = Profiler(enabled=True)
    profiler.start()

    with profiler.stage("load"):
        corpus = load_corpus(args.corpus or [cfg.corpus_path], encoding=cfg.encoding)
    with profiler.stage("build"):
        model = build_model(corpus, order)

    generator = SentenceGenerator(model, max_word_count=cfg.max_word_count)
    for _ in range(iterations):
        with profiler.stage("generate"):
            generator.generate(SeededRandom(seed))

    profiler.stop()

    if args.json:
        out.json(profiler.to_dict())
        return 0

    out.console.print(bench_table(profiler))
    return 0


# =============================================================================
# Main
# =============================================================================

def add_model_arguments(p: argparse.ArgumentParser):
    p.add_argument('--corpus', '-c', nargs='+', metavar='PATH',
                   help='Corpus text file(s), joined with newlines (default: bundled sample)')
    p.add_argument('--order', '-o', type=int, help='Order of the Markov chain (default: 2)')


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='markovtext',
        description='MarkovText - Markov Chain Sentence Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -c book.txt
  %(prog)s generate -c book.txt -o 3 -n 5
  %(prog)s generate --seed 6a4156e2
  %(prog)s stats -c book.txt --json
  %(prog)s bench -i 5000
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging and tracebacks')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate sentences')
    add_model_arguments(p)
    p.add_argument('--seed', '-s', help='Seed for reproducible output (default: random)')
    p.add_argument('-n', '--count', type=int, help='Number of sentences (default: 1)')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- stats ---
    p = subparsers.add_parser('stats', help='Show model statistics')
    add_model_arguments(p)
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- bench ---
    p = subparsers.add_parser('bench', help='Benchmark build and generation')
    add_model_arguments(p)
    p.add_argument('--iterations', '-i', type=int, help='Sentences to generate (default: 1000)')
    p.add_argument('--seed', '-s', help='Seed used for every iteration')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cmd_map = {'gen': 'generate', 'g': 'generate'}
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    from markovtext import MarkovTextError, get_config
    from markovtext.ui import setup_logging

    try:
        cfg = get_config()
    except (OSError, ValueError) as e:
        out.error(f"Invalid configuration: {e}")
        return 1

    setup_logging('DEBUG' if args.verbose else cfg.log_level)

    commands = {
        'generate': cmd_generate,
        'stats': cmd_stats,
        'bench': cmd_bench,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out, cfg)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except (MarkovTextError, OSError, ValueError) as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
