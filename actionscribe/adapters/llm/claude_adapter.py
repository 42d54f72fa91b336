"""Claude CLI adapter — implements LLMPort."""

import asyncio
import shutil
from datetime import datetime
from typing import Optional

from actionscribe.config import ProviderConfig
from actionscribe.domain.errors import ProviderFailure


async def _start_subprocess(cmd_args):
    """Spawn a subprocess with piped stdout/stderr."""
    return await asyncio.create_subprocess_exec(
        *cmd_args,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )


class ClaudeAdapter:
    """Executes one-shot `claude --print` calls. Implements LLMPort protocol.

    The CLI carries its own credentials and has no sampling flags, so
    ``temperature`` is accepted for interface compatibility and ignored.
    """

    def __init__(self, config: Optional[ProviderConfig] = None):
        self.config = config or ProviderConfig(name="claude", model="")

    @property
    def is_configured(self) -> bool:
        return shutil.which("claude") is not None

    async def execute(
        self,
        message: str,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        _ = temperature
        args = ["claude", "--print", "--output-format", "text"]
        model = model or self.config.model
        if model:
            args.extend(["--model", model])
        args.append(message)
        print(f"[{datetime.now().isoformat()}] Executing with Claude CLI")

        try:
            proc = await _start_subprocess(args)
        except FileNotFoundError as e:
            raise ProviderFailure("claude CLI not found on PATH") from e

        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(),
                timeout=self.config.timeout_seconds,
            )
        except asyncio.TimeoutError:
            proc.kill()
            await proc.wait()
            raise ProviderFailure(f"Timeout ({self.config.timeout_seconds:.0f}s)")

        if proc.returncode != 0:
            err_text = stderr.decode("utf-8").strip() or stdout.decode("utf-8").strip()
            raise ProviderFailure(f"Exit code {proc.returncode}: {err_text}")

        print(f"[{datetime.now().isoformat()}] Completed")
        return stdout.decode("utf-8").strip()
