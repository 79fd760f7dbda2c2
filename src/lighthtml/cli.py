"""
CLI interface for lighthtml.

Builds the sample document and prints it rendered in view or edit mode,
optionally walking it node by node or passing it through a visitor.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import get_config
from .context import HtmlContext, state_for
from .dom import Mode, Node
from .sample import build_sample_document
from .traversal import STRATEGIES, create_iterator
from .visitor import RenderingVisitor


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="lighthtml",
        description="Render a small in-memory HTML document in view or edit mode",
    )

    parser.add_argument(
        "--mode",
        "-m",
        choices=[m.value for m in Mode],
        help="Rendering mode: view (outer HTML) or edit (inner HTML). Default from config",
    )

    parser.add_argument(
        "--traverse",
        "-t",
        nargs="?",
        const="",
        metavar="{" + ",".join(STRATEGIES) + "}",
        help="Also render every node in traversal order. Strategy defaults to config",
    )

    parser.add_argument(
        "--visit",
        action="store_true",
        help="Also print the output of the rendering visitor",
    )

    parser.add_argument(
        "--recursive",
        "-r",
        action="store_true",
        help="Let the visitor descend into children (with --visit)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log mode transitions and lifecycle hooks to stderr",
    )

    return parser.parse_args(args)


def configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else get_config().logging.level
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def render_report(
    document: Node,
    context: HtmlContext,
    walk: bool = False,
    strategy: str = "depth",
    visit: bool = False,
    recursive: bool = False,
) -> str:
    """Render the document and the requested extra sections as one string."""
    sections = [context.render_html(document)]

    if walk:
        sections.append(f"-- {strategy}-first traversal --")
        iterator = create_iterator(document, strategy)
        while iterator.has_next():
            sections.append(context.render_html(iterator.next()))

    if visit:
        visitor = RenderingVisitor(recursive=recursive)
        document.accept_visitor(visitor)
        sections.append("-- visitor --")
        sections.extend(visitor.rendered)

    return "\n".join(sections)


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)
    configure_logging(parsed.verbose)
    cfg = get_config()

    try:
        mode = Mode.parse(parsed.mode or cfg.render.default_mode)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    strategy = parsed.traverse or cfg.traversal.strategy

    document = build_sample_document()
    document.set_mode(mode)
    context = HtmlContext(state_for(mode))

    try:
        output = render_report(
            document,
            context,
            walk=parsed.traverse is not None,
            strategy=strategy,
            visit=parsed.visit,
            recursive=parsed.recursive,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
