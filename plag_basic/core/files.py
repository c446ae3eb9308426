"""Reading submission directories from disk."""

from pathlib import Path
from typing import List, Tuple

from .log import base_logger

logger = base_logger.getChild('files')


def read_file(file_path: str) -> str:
    """
    Read a UTF-8 text file.

    Args:
        file_path: Path to the file

    Returns:
        File contents as string
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        return path.read_text(encoding='utf-8')
    except UnicodeDecodeError as e:
        raise ValueError(
            f"{path.name} cannot be read as an UTF-8 file! Please ensure it is in the UTF-8 format."
        ) from e


def read_directory(dir_path: str) -> List[Tuple[str, str]]:
    """
    Read every file (not subdirectory) in a directory.

    Any unreadable file aborts the whole read.

    Args:
        dir_path: Directory to read

    Returns:
        List of (file name, file contents), sorted by file name
    """
    path = Path(dir_path)
    if not path.exists():
        raise FileNotFoundError(f"Directory not found: {dir_path}")
    if not path.is_dir():
        raise NotADirectoryError(f"Not a directory: {dir_path}")

    contents = []
    for file_path in sorted(p for p in path.iterdir() if not p.is_dir()):
        contents.append((file_path.name, read_file(str(file_path))))

    logger.info(f"Read {len(contents)} files from {dir_path}")
    return contents
