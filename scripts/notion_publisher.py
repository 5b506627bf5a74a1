import httpx

from ai_log_errors import NetworkError
from notion_blocks import divider

# Notion rejects append requests with more than 100 children
MAX_BLOCKS_PER_REQUEST = 100


def chunk_blocks(blocks, size=MAX_BLOCKS_PER_REQUEST):
    return [blocks[i:i + size] for i in range(0, len(blocks), size)]


class NotionPublisher:
    """Appends blocks to the configured Notion page.

    Batches are sent one after another; Notion appends at the end of the
    page, so order on the page follows call order. A failed call stops the
    run and whatever was already appended stays there.
    """

    def __init__(self, settings, client=None):
        self.settings = settings
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def _get_client(self):
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    def _children_url(self):
        return f"{self.settings.notion_api_url}/blocks/{self.settings.notion_page_id}/children"

    def _headers(self):
        return {
            "Authorization": f"Bearer {self.settings.notion_api_key}",
            "Notion-Version": self.settings.notion_version,
            "Content-Type": "application/json",
        }

    async def append_children(self, blocks):
        payload = {"children": [block.to_notion() for block in blocks]}
        try:
            response = await self._get_client().patch(
                self._children_url(), headers=self._headers(), json=payload
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"Notion API returned {e.response.status_code}",
                status=e.response.status_code,
                body=e.response.text,
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Notion API request failed: {e}") from e

    async def publish(self, title, blocks):
        batches = chunk_blocks(blocks)
        appended = 0
        try:
            for i, batch in enumerate(batches, start=1):
                print(f"  📦 Appending batch {i}/{len(batches)} ({len(batch)} blocks)")
                await self.append_children(batch)
                appended += len(batch)

            # Trailing divider separates this entry from the next one
            await self.append_children([divider()])
        except NetworkError as e:
            e.appended = appended
            raise

        print(f'✅ Added "{title}" to the Notion page ({appended} blocks + divider).')
        return appended
