"""Reformat a question/answer log with an AI tool and append it to a Notion page.

Usage:
    python scripts/ai_log.py my_log.txt

The log file's first line is the question, the rest is the answer.
"""
import sys
import asyncio

from ai_log_errors import AiLogError, ExternalToolError, NetworkError
from ai_log_settings import load_settings
from log_reader import read_log_file
from notion_blocks import markdown_to_blocks
from notion_publisher import NotionPublisher
from prompt_builder import build_prompt
from reformatter import make_reformatter

USAGE = "Usage: python scripts/ai_log.py <log-file>"


async def run(log_file_path, reformatter, publisher):
    print(f"📄 Processing log file [{log_file_path}]...")
    entry = await read_log_file(log_file_path)
    print("🤖 Read question and answer from the log file.")

    print("💬 Asking the reformatter to restructure the answer...")
    prompt = build_prompt(entry.question, entry.answer)
    markdown = await reformatter.reformat(prompt)
    print("📝 Received the restructured content.")

    blocks = markdown_to_blocks(markdown)
    return await publisher.publish(entry.question, blocks)


def _report(error):
    print(f"❌ ai_log failed: {error}", file=sys.stderr)
    if isinstance(error, ExternalToolError) and error.stderr:
        print(error.stderr.rstrip(), file=sys.stderr)
    if isinstance(error, NetworkError):
        if error.body:
            print(f"   Response: {error.body}", file=sys.stderr)
        if error.appended:
            print(f"   {error.appended} blocks were already appended before the failure.", file=sys.stderr)


async def main(argv, settings=None, reformatter=None, http_client=None):
    if len(argv) != 1:
        print(USAGE, file=sys.stderr)
        return 2

    try:
        # Settings first: a missing page id must stop us before any process or network call
        if settings is None:
            settings = load_settings()
        if reformatter is None:
            reformatter = make_reformatter(settings)
        async with NotionPublisher(settings, client=http_client) as publisher:
            await run(argv[0], reformatter, publisher)
    except AiLogError as e:
        _report(e)
        return 1
    return 0


def cli():
    sys.exit(asyncio.run(main(sys.argv[1:])))


if __name__ == "__main__":
    cli()
