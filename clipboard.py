import subprocess
from typing import List, Optional

from exceptions import ClipboardError
from log_utils import get_logger

logger = get_logger(__name__)

DEFAULT_CLIPBOARD_COMMAND = ["wl-copy"]


def copy_to_clipboard(data: bytes, command: Optional[List[str]] = None) -> None:
    argv = list(command) if command else list(DEFAULT_CLIPBOARD_COMMAND)
    try:
        subprocess.run(argv, input=data, check=True)
    except FileNotFoundError as exc:
        raise ClipboardError(f"Clipboard command not found: {argv[0]}") from exc
    except subprocess.CalledProcessError as exc:
        raise ClipboardError(
            f"Clipboard command {argv[0]} failed with exit code {exc.returncode}"
        ) from exc
    logger.debug("Copied %d bytes via %s", len(data), argv[0])
