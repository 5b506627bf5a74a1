"""Reformatters turn the raw answer prompt into structured markdown.

ShellReformatter pipes the prompt into a chat CLI (default: `gemini chat`).
GeminiReformatter calls the Gemini API directly through google-genai.
"""
import abc
import asyncio
import base64

import httpx
from google import genai
from google.genai import errors as genai_errors

from ai_log_errors import ConfigError, ExternalToolError


class Reformatter(abc.ABC):
    @abc.abstractmethod
    async def reformat(self, prompt):
        """Return the markdown for prompt, or raise ExternalToolError."""


class ShellReformatter(Reformatter):
    def __init__(self, command="gemini chat"):
        self.command = command

    def build_command(self, prompt):
        # base64 survives quotes, backticks and newlines in the prompt
        encoded = base64.b64encode(prompt.encode("utf-8")).decode("ascii")
        return f'echo "{encoded}" | base64 --decode | {self.command}'

    async def reformat(self, prompt):
        try:
            proc = await asyncio.create_subprocess_shell(
                self.build_command(prompt),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()
        except OSError as e:
            raise ExternalToolError(f"Could not start '{self.command}': {e}") from e

        err_text = stderr.decode("utf-8", errors="replace")
        if err_text:
            raise ExternalToolError(
                f"'{self.command}' wrote to stderr", stderr=err_text, returncode=proc.returncode
            )
        if proc.returncode != 0:
            raise ExternalToolError(
                f"'{self.command}' exited with status {proc.returncode}", returncode=proc.returncode
            )
        return stdout.decode("utf-8", errors="replace")


class GeminiReformatter(Reformatter):
    def __init__(self, api_key, model="gemini-2.5-flash", client=None):
        self.api_key = api_key
        self.model = model
        self._client = client

    def _get_client(self):
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def reformat(self, prompt):
        try:
            response = await self._get_client().aio.models.generate_content(
                model=self.model, contents=prompt
            )
        except genai_errors.APIError as e:
            raise ExternalToolError(f"Gemini API error: {e}", stderr=str(e)) from e
        except httpx.HTTPError as e:
            raise ExternalToolError(f"Could not reach the Gemini API: {e}", stderr=str(e)) from e

        text = response.text
        if not text:
            raise ExternalToolError(f"Gemini ({self.model}) returned an empty response")
        return text


def make_reformatter(settings):
    if settings.reformatter == "shell":
        return ShellReformatter(settings.reformat_command)
    if settings.reformatter == "gemini":
        return GeminiReformatter(settings.gemini_api_key, settings.gemini_model)
    raise ConfigError(f"Unknown reformatter '{settings.reformatter}'")
