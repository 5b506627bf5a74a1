"""Line-based markdown to Notion block conversion.

Only three shapes are recognised, matching what the reformat prompt asks for:
`### ` headings, `- ` list items and plain paragraphs. Blank lines are dropped.
"""
from dataclasses import dataclass

HEADING_MARKER = "### "
LIST_MARKER = "- "

HEADING = "heading_3"
BULLETED_ITEM = "bulleted_list_item"
PARAGRAPH = "paragraph"
DIVIDER = "divider"


@dataclass(frozen=True)
class Block:
    type: str
    content: str = ""

    def to_notion(self):
        if self.type == DIVIDER:
            return {"type": DIVIDER, DIVIDER: {}}
        return {
            "type": self.type,
            self.type: {
                "rich_text": [{"type": "text", "text": {"content": self.content}}],
            },
        }


def heading(content):
    return Block(HEADING, content)


def bulleted_item(content):
    return Block(BULLETED_ITEM, content)


def paragraph(content):
    return Block(PARAGRAPH, content)


def divider():
    return Block(DIVIDER)


def line_to_block(line):
    """Returns the block for one markdown line, or None for a blank line."""
    if line.startswith(HEADING_MARKER):
        return heading(line[len(HEADING_MARKER):])
    if line.startswith(LIST_MARKER):
        return bulleted_item(line[len(LIST_MARKER):])
    if line.strip():
        return paragraph(line)
    return None


def markdown_to_blocks(markdown):
    blocks = []
    for line in markdown.split("\n"):
        block = line_to_block(line)
        if block is not None:
            blocks.append(block)
    return blocks
