"""Rasterizes PDF pages to PNG data URLs with poppler (via pdf2image)."""

import base64
from pathlib import Path

from pdf2image import convert_from_path
from pdf2image.exceptions import PDFInfoNotInstalledError, PDFPageCountError, PDFSyntaxError

from callsheet.document.exceptions import ToolUnavailableError
from callsheet.logging.logger import Log


class PopplerRasterizer:
    """Renders the first pages of a PDF into ``data:image/png`` strings."""

    def __init__(self, dpi: int = 150, poppler_path: str | None = None) -> None:
        self._dpi = dpi
        self._poppler_path = poppler_path

    def rasterize(self, pdf_path: Path, output_dir: Path, max_pages: int) -> list[str]:
        """Render pages ``1..max_pages`` into *output_dir* and return them encoded.

        Rendering problems that point at a damaged file are logged and yield an
        empty list; the caller decides how to report that.

        Raises:
            ToolUnavailableError: if the poppler binaries are not installed.
        """
        try:
            paths = convert_from_path(
                str(pdf_path),
                dpi=self._dpi,
                first_page=1,
                last_page=max_pages,
                fmt="png",
                output_folder=str(output_dir),
                output_file="page",
                paths_only=True,
                poppler_path=self._poppler_path,
            )
        except PDFInfoNotInstalledError as exc:
            raise ToolUnavailableError(
                "PDF processing tools not installed. Please install poppler-utils."
            ) from exc
        except FileNotFoundError as exc:
            raise ToolUnavailableError(
                f"PDF processing tools not installed ({exc.filename}). "
                "Please install poppler-utils."
            ) from exc
        except (PDFPageCountError, PDFSyntaxError) as exc:
            Log.error(f"Failed to convert PDF to images: {exc}")
            return []

        images = [self._encode(Path(p)) for p in sorted(paths)[:max_pages]]
        Log.info(f"PDF converted to images: {len(images)} pages at {self._dpi} DPI")
        return images

    @staticmethod
    def _encode(image_path: Path) -> str:
        encoded = base64.b64encode(image_path.read_bytes()).decode("ascii")
        return f"data:image/png;base64,{encoded}"
