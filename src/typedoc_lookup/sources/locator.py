"""Mapping recorded source references to public repository locations."""

import asyncio
import posixpath
from dataclasses import dataclass
from pathlib import Path

import structlog

from typedoc_lookup.config import Settings
from typedoc_lookup.errors import (
    MissingSourceMap,
    NoMappingInSourceMap,
    SourceLocationError,
    StructuralDecodeError,
)
from typedoc_lookup.models import ResolvedLocation, SourceRef
from typedoc_lookup.sources.sourcemap import SourceMapConsumer, SourceMapError

log = structlog.get_logger()

DECLARATION_SUFFIX = ".d.ts"
DIST_SEGMENT = "/dist/"


@dataclass(frozen=True)
class VendoredPath:
    """A vendored declaration file path, split into its parts.

    ``node_modules/@scope/<package>/dist/<directory>/<basename>.d.ts``
    """

    package: str
    directory: str
    basename: str

    @property
    def declaration_file(self) -> str:
        return posixpath.join("dist", self.directory, self.basename + DECLARATION_SUFFIX)

    @property
    def original_file(self) -> str:
        return posixpath.join(self.directory, self.basename + ".ts")

    def source_map_path(self, vendored_root: Path) -> Path:
        return vendored_root / self.package / "dist" / self.directory / (self.basename + DECLARATION_SUFFIX + ".map")


class SourceLocator:
    """Resolves source references into followable URLs.

    References into the local project link straight to its repository.
    References into a vendored dependency's emitted declaration files are
    traced back through the companion source map to the dependency's own
    repository.
    """

    def __init__(
        self,
        project_repo_url: str,
        project_package: str,
        dependency_repo_url: str,
        vendored_prefix: str,
        vendored_root: Path,
        default_revision: str = "master",
    ) -> None:
        self.project_repo_url = project_repo_url.rstrip("/")
        self.project_package = project_package
        self.dependency_repo_url = dependency_repo_url.rstrip("/")
        self.vendored_prefix = vendored_prefix
        self.vendored_root = Path(vendored_root)
        self.default_revision = default_revision
        self.scope = vendored_prefix.removeprefix("node_modules/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "SourceLocator":
        return cls(
            project_repo_url=settings.project_repo_url,
            project_package=settings.project_package,
            dependency_repo_url=settings.dependency_repo_url,
            vendored_prefix=settings.vendored_prefix,
            vendored_root=settings.vendored_root,
            default_revision=settings.default_revision,
        )

    def is_vendored(self, ref: SourceRef) -> bool:
        return ref.file_name.startswith(self.vendored_prefix)

    def decode_vendored_path(self, file_name: str) -> VendoredPath:
        """Split a vendored declaration file path.

        Raises:
            StructuralDecodeError: The path is not an emitted declaration file.
        """
        if not file_name.endswith(DECLARATION_SUFFIX):
            raise StructuralDecodeError(file_name)

        dist_idx = file_name.find(DIST_SEGMENT)
        package = file_name[len(self.vendored_prefix) : dist_idx]
        if dist_idx == -1 or not package:
            raise StructuralDecodeError(file_name)

        emitted = file_name[dist_idx + len(DIST_SEGMENT) :]
        return VendoredPath(
            package=package,
            directory=posixpath.dirname(emitted),
            basename=posixpath.basename(emitted).removesuffix(DECLARATION_SUFFIX),
        )

    async def locate(self, ref: SourceRef, revision: str | None = None) -> ResolvedLocation:
        """Resolve a source reference at a repository revision.

        Args:
            ref: The recorded source reference.
            revision: Branch, tag or commit to link to. Defaults to the
                configured default revision.

        Raises:
            StructuralDecodeError: A vendored path is not a declaration file.
            MissingSourceMap: The companion source map does not exist.
            NoMappingInSourceMap: The source map has no original position
                for the reference's coordinates.
            SourceLocationError: The source map could not be read or decoded.
        """
        revision = revision or self.default_revision

        if not self.is_vendored(ref):
            return ResolvedLocation(
                file_name=ref.file_name,
                url=f"{self.project_repo_url}/blob/{revision}/{ref.file_name}",
                package=self.project_package,
                line=ref.line,
                column=ref.character,
            )

        vendored = self.decode_vendored_path(ref.file_name)
        map_path = vendored.source_map_path(self.vendored_root)

        try:
            text = await asyncio.to_thread(map_path.read_text, encoding="utf-8")
        except FileNotFoundError:
            log.debug("source_map_missing", path=str(map_path))
            raise MissingSourceMap(ref.file_name) from None
        except (OSError, UnicodeDecodeError) as e:
            raise SourceLocationError(f"Unreadable source map ({e})", ref.file_name) from e

        try:
            consumer = SourceMapConsumer.from_json(text)
        except SourceMapError as e:
            raise SourceLocationError(f"Undecodable source map ({e})", ref.file_name) from e

        with consumer:
            position = consumer.original_position_for(ref.line, ref.character)

        if position is None:
            raise NoMappingInSourceMap(ref.file_name)

        log.debug(
            "source_mapped",
            file_name=ref.file_name,
            original_line=position.line,
            original_column=position.column,
        )
        return ResolvedLocation(
            file_name=vendored.original_file,
            url=(
                f"{self.dependency_repo_url}/blob/{revision}/packages/"
                f"{vendored.package}/{vendored.original_file}#L{position.line}"
            ),
            package=self.scope + vendored.package,
            line=position.line,
            column=position.column,
        )

    def declaration_location(self, ref: SourceRef, revision: str | None = None) -> ResolvedLocation:
        """Location of a vendored declaration file itself, without source mapping."""
        revision = revision or self.default_revision
        vendored = self.decode_vendored_path(ref.file_name)
        return ResolvedLocation(
            file_name=vendored.declaration_file,
            url=f"{self.dependency_repo_url}/tree/{revision}/packages/{vendored.package}",
            package=self.scope + vendored.package,
            line=ref.line,
            column=ref.character,
        )
