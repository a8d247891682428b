# src/color_macro_expander/demo.py
import argparse
import json
import logging
import sys


def main(argv=None):
    """CLI demo: expand #Color(...) invocations and print target source or diagnostics."""
    from .expansion.color.emit import UnknownSurfaceError
    from .expansion.orchestrator import expand_all

    parser = argparse.ArgumentParser(
        prog="color-macro-demo",
        description="Expand #Color(...) invocations into color constructor expressions.",
    )
    parser.add_argument(
        "invocations",
        nargs="*",
        help='Invocations to expand (e.g. \'#Color(rgba: 154, 234, 98, 0.5)\')',
    )
    parser.add_argument("--surface", default=None, help="Target surface (swiftui, uikit, appkit, css)")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    invocations = args.invocations or ['#Color(hex: "#336699")']

    try:
        results = expand_all(invocations, surface=args.surface)
    except UnknownSurfaceError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False))
    else:
        for r in results:
            print(r.render(), file=sys.stdout if r.ok else sys.stderr)
    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
