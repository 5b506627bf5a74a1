import asyncio
from dataclasses import dataclass

from ai_log_errors import FormatError


@dataclass(frozen=True)
class LogEntry:
    question: str
    answer: str


def split_log(content):
    """First line is the question, everything after it is the answer."""
    lines = content.split("\n")
    if len(lines) < 2:
        raise FormatError(
            "Log file must have at least two lines (question, then answer)."
        )
    return LogEntry(question=lines[0], answer="\n".join(lines[1:]))


def _read_text(path):
    # newline="" keeps the file's line endings untouched
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


async def read_log_file(path):
    try:
        content = await asyncio.to_thread(_read_text, path)
    except (OSError, UnicodeDecodeError) as e:
        raise FormatError(f"Could not read log file {path}: {e}") from e
    return split_log(content)
