#!/usr/bin/env python3
"""
CLI wrapper for rendering source distributions.

Usage:
    python tools/histogram.py list                        # show all registered sources
    python tools/histogram.py show "eprng bytes"          # histogram of one source
    python tools/histogram.py show RANDU --size 2000 --seed 7 --ascii
"""

import argparse
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)


def cmd_list(args):
    """Show all registered sources."""
    from tools.sources import get_sources

    sources = get_sources()
    print(f"\n{'Name':<30s} {'Domain':<10s}  Description")
    print("-" * 90)
    for s in sources:
        desc = s.description[:45] if s.description else ""
        print(f"  {s.name:<28s} {s.domain:<10s}  {desc}")

    domains = sorted(set(s.domain for s in sources))
    print(f"\nTotal: {len(sources)} sources  |  domains: {', '.join(domains)}")
    return 0


def cmd_show(args):
    """Generate one buffer from a source and print its distribution."""
    import eprng
    from tools.sources import get_sources, seed_adapter

    sources = {s.name: s for s in get_sources()}
    if args.name not in sources:
        print(f"Unknown source: {args.name!r}")
        print(f"Available: {', '.join(sorted(sources.keys()))}")
        return 1

    src = sources[args.name]
    print(f"\n{src.name}  [{src.domain}]  size={args.size} seed={args.seed}")
    if src.description:
        print(f"  {src.description}")
    print()

    data = seed_adapter(src.gen_fn)(args.seed, args.size)
    table = eprng.distribution(data)
    options = eprng.ASCII_GLYPHS if args.ascii else {}
    print(eprng.render(table, **options))
    print(f"{len(table)} distinct values, {table.total} total")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="eprng distribution CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    sub = parser.add_subparsers(dest='command')

    sub.add_parser('list', help='Show all registered sources')

    p_show = sub.add_parser('show', help='Render the histogram of one source')
    p_show.add_argument('name', help='Source name (e.g. "eprng bytes")')
    p_show.add_argument('--size', type=int, default=16384,
                        help='Number of values to generate (default: 16384)')
    p_show.add_argument('--seed', type=int, default=42,
                        help='Seed for the source rng (default: 42)')
    p_show.add_argument('--ascii', action='store_true',
                        help='Use ASCII glyphs instead of block characters')

    args = parser.parse_args(argv)

    if args.command == 'list':
        return cmd_list(args)
    elif args.command == 'show':
        return cmd_show(args)
    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
