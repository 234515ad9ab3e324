#!/usr/bin/env python3
"""
PassKit CLI
===========
Command-line interface for passphrase generation.

Usage:
    passkit generate -n 5 --garble 2 --digit anywhere
    passkit generate --list longlist --count 3 --plain
    passkit count -n 6 --digit end
    passkit variants castle
    passkit lists
"""

import argparse
import logging
import sys

from passkit import __version__

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

DIGIT_CHOICES = ['none', 'end', 'anywhere']

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet

    def print(self, *args, **kwargs):
        if not self.quiet:
            print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def success(self, msg: str):
        if not self.quiet:
            print(f"OK: {msg}")


def setup_logging(verbose: bool = False):
    """Configure root logging for CLI use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_kit(args):
    """Create a PassKit for the word list chosen on the command line."""
    from passkit import PassKit
    from passkit.generators import load_word_file

    if getattr(args, 'file', None):
        return PassKit(words=load_word_file(args.file))
    return PassKit(wordlist=getattr(args, 'list', None))


def build_config(args, kit):
    """Merge command-line settings over the configured defaults."""
    from passkit.errors import ConfigError
    from passkit.settings import get_setting

    max_words = get_setting('limits.max_word_count', 64)
    if args.words is not None and args.words > max_words:
        raise ConfigError(f"Word count must be at most {max_words}.")

    cfg = kit.make_config(
        word_count=args.words,
        separator=args.separator,
        garble_max=args.garble,
        digit_policy=args.digit,
    )
    if cfg.garble_max > cfg.word_count:
        logger.debug(f"Clamping garble max {cfg.garble_max} to word count {cfg.word_count}")
        cfg = cfg.clamped()
    return cfg


def copy_to_clipboard(text: str, out: Output) -> bool:
    """Copy text to the system clipboard. Returns False if unavailable."""
    import pyperclip

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.warning(f"Clipboard unavailable: {e}")
        return False
    out.success("Copied to clipboard")
    return True


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate passphrases."""
    from passkit.ui import render_result

    if args.count < 1:
        out.error("Count must be at least 1.")
        return 1

    kit = build_kit(args)
    cfg = build_config(args, kit)
    results = kit.generate_many(args.count, cfg)

    if args.plain or out.quiet:
        for result in results:
            print(result.passphrase)
    else:
        summary = kit.words.summary(cfg.effective_garble_max)
        for result in results:
            render_result(result, summary=summary)

    if args.copy:
        copy_to_clipboard(results[-1].passphrase, out)

    return 0


def cmd_count(args, out: Output):
    """Show the search space of a configuration."""
    from passkit.ui import render_space

    kit = build_kit(args)
    cfg = build_config(args, kit)
    space = kit.count(cfg)

    if args.plain or out.quiet:
        print(f"{space.count} {space.bits:.2f}")
        return 0

    render_space(space, cfg, summary=kit.words.summary(cfg.effective_garble_max))
    return 0


def cmd_variants(args, out: Output):
    """List garbled variants of a word."""
    from passkit.generators import garbled_variants
    from passkit.ui import render_variants

    word = args.word.strip()
    if not word:
        out.error("Word cannot be empty")
        return 1

    variants = garbled_variants(word)
    if args.plain or out.quiet:
        for variant in sorted(variants):
            print(variant)
        return 0

    render_variants(word, variants)
    return 0


def cmd_lists(args, out: Output):
    """List bundled word lists."""
    from passkit.config import default_wordlist
    from passkit.generators import list_builtin
    from passkit.ui import render_lists

    lists = list_builtin()
    if args.plain or out.quiet:
        for name, size in lists.items():
            print(f"{name}\t{size}")
        return 0

    render_lists(lists, default=default_wordlist())
    return 0


# =============================================================================
# Main
# =============================================================================

def _add_common(p):
    p.add_argument('--plain', '-p', action='store_true', help='Plain output (no panels)')
    p.add_argument('--verbose', '-v', action='store_true', help='Show debug logging')


def _add_wordlist_args(p):
    group = p.add_mutually_exclusive_group()
    group.add_argument('--list', '-l', help='Built-in word list (see: passkit lists)')
    group.add_argument('--file', '-f', help='Word list file (newline or comma separated)')


def _add_config_args(p):
    p.add_argument('-n', '--words', type=int, help='Words per passphrase (default: 4)')
    p.add_argument('-s', '--separator', help='Separator between words, max 4 chars (default: "-")')
    p.add_argument('-g', '--garble', type=int, help='Max garbled words (default: 0)')
    p.add_argument('-d', '--digit', choices=DIGIT_CHOICES, help='Add a digit (default: none)')


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='passkit',
        description='PassKit - Memorable Passphrase Generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate
  %(prog)s generate -n 5 -s . --garble 2 --digit anywhere
  %(prog)s generate --file words.txt --count 5 --plain
  %(prog)s count -n 6 --list longlist --digit end
  %(prog)s variants castle
  %(prog)s lists
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate passphrases')
    _add_config_args(p)
    _add_wordlist_args(p)
    p.add_argument('--count', '-c', type=int, default=1, help='Number of passphrases (default: 1)')
    p.add_argument('--copy', action='store_true', help='Copy the (last) passphrase to the clipboard')
    _add_common(p)

    # --- count ---
    p = subparsers.add_parser('count', aliases=['c'], help='Show search space and entropy')
    _add_config_args(p)
    _add_wordlist_args(p)
    _add_common(p)

    # --- variants ---
    p = subparsers.add_parser('variants', aliases=['v'], help='Show garbled variants of a word')
    p.add_argument('word', help='Word to garble')
    _add_common(p)

    # --- lists ---
    p = subparsers.add_parser('lists', aliases=['ls'], help='Show built-in word lists')
    _add_common(p)

    # Parse
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'c': 'count',
        'v': 'variants',
        'ls': 'lists',
    }
    command = cmd_map.get(args.command, args.command)

    setup_logging(getattr(args, 'verbose', False))

    # Output handler
    out = Output(quiet=getattr(args, 'quiet', False))

    # Dispatch
    commands = {
        'generate': cmd_generate,
        'count': cmd_count,
        'variants': cmd_variants,
        'lists': cmd_lists,
    }

    handler = commands.get(command)
    if handler:
        from passkit.errors import PassKitError

        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except (PassKitError, OSError) as e:
            out.error(str(e))
            if getattr(args, 'verbose', False):
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
