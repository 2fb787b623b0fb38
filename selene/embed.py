"""Reading the files the server is bundled with."""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path

SQL_FILE_NAMES = (
    "users",
    "user_create",
    "user_read",
    "user_update_password",
    "user_update_points_increment",
    "user_delete",
)


def _subdirectory(parent: Path, name: str, what: str) -> Path:
    path = parent / name
    if not path.is_dir():
        raise FileNotFoundError(f"unembedding {what}: no directory {path}")
    return path


def _read(directory: Path, name: str, what: str) -> bytes:
    try:
        return (directory / name).read_bytes()
    except OSError as err:
        raise OSError(f"unembedding {what}: {err}") from err


@dataclass(frozen=True)
class EmbeddedData:
    """The files and directories the server runs with."""

    version: bytes
    words: bytes
    tls_cert_pem: bytes
    tls_key_pem: bytes
    static_dir: Path
    template_dir: Path
    sql_dir: Path

    def sql_files(self) -> list[io.BytesIO]:
        """The SQL files that set up user data, in the order they must run."""
        files = []
        for name in SQL_FILE_NAMES:
            file_name = f"{name}.sql"
            try:
                content = (self.sql_dir / file_name).read_bytes()
            except OSError as err:
                raise OSError(f"opening setup file {file_name}: {err}") from err
            files.append(io.BytesIO(content))
        return files


def unembed(root: str | Path) -> EmbeddedData:
    """Read the "embed" directory under root.

    Raises OSError if a required file or directory is missing.
    """
    embed_dir = _subdirectory(Path(root), "embed", "embed directory")
    return EmbeddedData(
        version=_read(embed_dir, "version.txt", "version"),
        words=_read(embed_dir, "words.txt", "words file"),
        tls_cert_pem=_read(embed_dir, "tls-cert.pem", "TLS cert PEM"),
        tls_key_pem=_read(embed_dir, "tls-key.pem", "TLS key PEM"),
        static_dir=_subdirectory(embed_dir, "static", "static file system"),
        template_dir=_subdirectory(embed_dir, "template", "template file system"),
        sql_dir=_subdirectory(embed_dir, "sql", "sql file system"),
    )