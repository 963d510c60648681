from pathlib import Path

from callsheet.extraction.exceptions import ExtractionError

PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(name: str, prompt_dir: Path | None = None) -> str:
    """Load a bundled prompt template by file name.

    Args:
        name: File name inside the prompt directory, e.g.
              ``extraction_text_prompt.txt``.
        prompt_dir: Directory to read from. Defaults to the bundled prompts.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    path = (prompt_dir or PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the JSON schema describing an ExtractionResult.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    if path is None:
        path = PROMPT_DIR / "extraction_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExtractionError(f"Failed to load JSON schema: {exc}") from exc
