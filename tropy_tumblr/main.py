"""Main module for Tropy to Tumblr."""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Mapping, Optional

from tabulate import tabulate

from tropy_tumblr.export.payload import extract_selection, has_items
from tropy_tumblr.models import ConfigurationError, ExportSelection, PluginOptions
from tropy_tumblr.tumblr.uploader import TumblrUploader
from tropy_tumblr.utils.auth import load_options_file
from tropy_tumblr.utils.file_utils import get_file_metadata

logger = logging.getLogger(__name__)


def get_context_logger(context: Any) -> Any:
    """Return the logger Tropy passes in the plugin context, if any."""
    if context is None:
        return logger
    if isinstance(context, Mapping):
        return context.get("logger") or logger
    return getattr(context, "logger", None) or logger


class TropyToTumblr:
    """Tropy export plugin posting the selected items' photos to Tumblr."""

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        context: Any = None,
        uploader: Optional[TumblrUploader] = None,
    ):
        """Initialize the plugin.

        Args:
            options: Plugin options from Tropy's preferences, merged over the defaults
            context: Tropy plugin context; its logger receives all plugin output
            uploader: Uploader to use instead of one built from the options
        """
        self.options = PluginOptions.from_options(options)
        self.context = context
        self.logger = get_context_logger(context)
        self.uploader = uploader or TumblrUploader(self.options)

    @property
    def blog_name(self) -> str:
        return self.options.blog_name

    def export(self, data: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        """Export hook called by Tropy with the JSON-LD of the selected items.

        Failures are logged and never raised back to Tropy.

        Returns:
            The Tumblr response when the post was created, None otherwise
        """
        self.logger.info("TropyToTumblr.export() received data: %s", data)

        if not has_items(data):
            self.logger.info("No items found in the Tropy export data.")
            return None

        try:
            selection = extract_selection(data)
        except Exception as e:
            self.logger.error("Failed to read photos from the Tropy export: %s", e)
            return None

        if selection.is_empty():
            self.logger.info("No local photos found among the selected items.")
            return None

        self.logger.info(
            'Posting %d photo(s) to Tumblr blog "%s" with tags: %s',
            len(selection.photo_paths),
            self.blog_name,
            selection.tags,
        )

        try:
            result = self.uploader.post_photos(
                selection.photo_paths, selection.caption, selection.tags
            )
        except Exception as e:
            self.logger.error("Failed to post photos to Tumblr: %s", e)
            return None

        self.logger.info("Posted to Tumblr successfully: %s", result)
        return result


def print_selection(selection: ExportSelection) -> None:
    """Print the photos and tags that would be posted."""
    rows: List[List[Any]] = []
    for path in selection.photo_paths:
        metadata = get_file_metadata(path)
        if metadata is None:
            rows.append([path, "", "", ""])
            continue
        rows.append(
            [
                metadata.filename,
                metadata.mime_type,
                f"{metadata.width}x{metadata.height}",
                metadata.size,
            ]
        )

    if rows:
        print("\nPhotos to post:")
        print(
            tabulate(
                rows,
                headers=["Filename", "MIME Type", "Dimensions", "Size"],
                tablefmt="psql",
            )
        )
        print(f"\nTotal photos: {len(rows)}")
    else:
        print("No local photos found among the selected items.")

    print(f"Tags: {', '.join(str(tag) for tag in selection.tags) or '(none)'}")


def load_export_file(export_path: str) -> Any:
    """Read a Tropy JSON-LD export file."""
    with open(export_path, "r", encoding="utf-8") as export_file:
        return json.load(export_file)


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Tropy to Tumblr")
    parser.add_argument("export_file", type=str, help="Tropy JSON-LD export file")
    parser.add_argument(
        "--options",
        type=str,
        help="JSON file with blogName, consumerKey, consumerSecret, token and tokenSecret",
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Show what would be posted without posting"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the Tropy to Tumblr CLI."""
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        data = load_export_file(args.export_file)
    except (OSError, ValueError) as e:
        logger.error("Could not read export file %s: %s", args.export_file, e)
        return 1

    if args.dry_run:
        print_selection(extract_selection(data))
        return 0

    options: Dict[str, Any] = {}
    if args.options:
        try:
            options = load_options_file(args.options)
        except ConfigurationError as e:
            logger.error("%s", e)
            return 1

    plugin = TropyToTumblr(options)
    return 0 if plugin.export(data) is not None else 1


if __name__ == "__main__":
    sys.exit(main())
