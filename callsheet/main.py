import argparse
import json
import mimetypes
import sys
from pathlib import Path

from callsheet.config.settings import Settings
from callsheet.document.data_url import encode_data_url
from callsheet.extraction.exceptions import ExtractionError
from callsheet.logging.logger import Log
from callsheet.pipeline.exceptions import ExtractionFailedError
from callsheet.pipeline.service import build_service

_PLAIN_TEXT_SUFFIXES = {".txt", ".csv", ".md"}


def read_content(path: Path) -> tuple[str, str | None]:
    """Return (content, mime_hint) for a file on disk.

    Plain text files are passed as-is; everything else is wrapped in a
    base64 data URL carrying its guessed MIME type.
    """
    mime_type, _ = mimetypes.guess_type(path.name)
    if path.suffix.lower() in _PLAIN_TEXT_SUFFIXES:
        return path.read_text(encoding="utf-8", errors="replace"), mime_type or "text/plain"
    if mime_type is None:
        mime_type = "application/octet-stream"
    return encode_data_url(path.read_bytes(), mime_type), mime_type


def main(argv: list[str] | None = None) -> int:
    """Entry point: extract contacts from a call sheet and print them as JSON."""
    parser = argparse.ArgumentParser(description="Extract contacts from a call sheet.")
    parser.add_argument("path", type=Path, help="call sheet file (PDF, DOCX, XLSX, image or text)")
    parser.add_argument("--mime-type", default=None, help="override the guessed MIME type")
    parser.add_argument("--normalized-only", action="store_true", help="print only the normalized result")
    args = parser.parse_args(argv)

    settings = Settings()
    # stdout carries the JSON result.
    Log.configure(settings.log_level, sys.stderr)

    content, mime_hint = read_content(args.path)
    service = build_service(settings)
    try:
        result = service.extract_contacts(content, args.mime_type or mime_hint, args.path.name)
    except (ExtractionFailedError, ExtractionError) as exc:
        Log.error(f"Extraction failed: {exc}")
        return 1

    payload = result.normalized.to_dict() if args.normalized_only else result.to_dict()
    json.dump(payload, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
