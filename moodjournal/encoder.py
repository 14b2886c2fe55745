import asyncio
import base64
import mimetypes

from .errors import FileReadError
from .logger import get_logger
from .schemas import SelectedFile

logger = get_logger("encoder")

DEFAULT_MIME_TYPE = "application/octet-stream"

def guess_type(filename: str) -> str:
    """MIME type guessed from the file name, or an empty string."""
    mime, _ = mimetypes.guess_type(filename)
    return mime or ""

def select_file(path: str) -> SelectedFile:
    """Describe a local file the way a browser file picker would."""
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    return SelectedFile(path=path, name=name, type=guess_type(name))

def strip_data_url_prefix(result: str) -> str:
    """Return everything after the first comma, or the whole string if there is none."""
    comma_idx = result.find(",")
    return result[comma_idx + 1:] if comma_idx >= 0 else result

def _read_as_data_url(file: SelectedFile) -> str:
    with open(file.path, "rb") as f:
        payload = base64.b64encode(f.read()).decode("ascii")
    return f"data:{file.type or DEFAULT_MIME_TYPE};base64,{payload}"

async def read_as_data_url(file: SelectedFile) -> str:
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, _read_as_data_url, file)
    except OSError as e:
        logger.error(f"Failed to read {file.path}: {e}")
        raise FileReadError() from e

async def encode(file: SelectedFile) -> str:
    """Read the whole file and return its base64 payload without the data-URL prefix."""
    return strip_data_url_prefix(await read_as_data_url(file))
