# topmark:header:start
#
#   project      : BuildProps
#   file         : providers.py
#   file_relpath : src/buildprops/git/providers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Git metadata providers.

A provider answers one question: what are the commit date and short SHA of
``HEAD``? Three implementations exist, and `resolve_git_metadata` tries them in
order:

- `EnvGitInfoProvider`: metadata injected by CI through
  ``BUILDPROPS_GIT_SHA`` / ``BUILDPROPS_GIT_DATE``.
- `GitDirInfoProvider`: reads the repository in-process with dulwich
  (refs, ``packed-refs``, loose and packed objects, linked worktrees).
- `GitCommandInfoProvider`: shells out to the ``git`` executable (repository
  formats or extensions dulwich does not read).

If every provider fails, the build continues with the current time and the
``"unknown"`` SHA.
"""

from __future__ import annotations

import os
import subprocess
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from dulwich.errors import NotGitRepository, ObjectFormatException
from dulwich.objects import Commit
from dulwich.repo import Repo

from buildprops.config.logging import get_logger
from buildprops.constants import ENV_GIT_DATE, ENV_GIT_SHA, SHORT_SHA_LENGTH
from buildprops.core.errors import GitMetadataError
from buildprops.git.model import GitMetadata, format_commit_date, parse_commit_date, shorten_sha

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from dulwich.objects import ShaFile

    from buildprops.config.logging import BuildPropsLogger

logger: BuildPropsLogger = get_logger(__name__)


def utc_now() -> datetime:
    """Return the current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


class GitInfoProvider(Protocol):
    """Protocol for source-control metadata providers.

    Implementations return `None` when they have nothing to say (e.g. an
    environment variable is unset) and raise `GitMetadataError` when they tried
    and failed.
    """

    name: str

    def fetch(self) -> GitMetadata | None:
        """Return the metadata of ``HEAD``, or None if this provider does not apply."""
        ...


class EnvGitInfoProvider:
    """Metadata injected through the environment (CI systems, source tarballs)."""

    name = "environment"

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        *,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        self._environ: Mapping[str, str] = os.environ if environ is None else environ
        self._now = now

    def fetch(self) -> GitMetadata | None:
        """Return metadata from ``BUILDPROPS_GIT_SHA`` / ``BUILDPROPS_GIT_DATE``.

        Returns:
            GitMetadata | None: None when ``BUILDPROPS_GIT_SHA`` is unset or empty.
            A missing date falls back to the current time.

        Raises:
            GitMetadataError: If ``BUILDPROPS_GIT_DATE`` cannot be parsed.
        """
        sha: str = self._environ.get(ENV_GIT_SHA, "").strip()
        if not sha:
            return None
        raw_date: str = self._environ.get(ENV_GIT_DATE, "").strip()
        if raw_date:
            try:
                moment: datetime = parse_commit_date(raw_date)
            except ValueError as exc:
                raise GitMetadataError(f"Invalid {ENV_GIT_DATE} value {raw_date!r}") from exc
        else:
            moment = self._now()
        return GitMetadata(date=format_commit_date(moment), sha=shorten_sha(sha))


class GitDirInfoProvider:
    """Read ``HEAD`` in-process through dulwich, without a ``git`` process.

    dulwich discovers the repository upwards from ``start`` and understands
    loose and packed objects, ``packed-refs``, detached heads and ``.git``
    files (linked worktrees, submodules).
    """

    name = "git-dir"

    def __init__(self, start: Path | None = None) -> None:
        self._start: Path = start or Path.cwd()

    def fetch(self) -> GitMetadata:
        """Resolve ``HEAD`` and read its committer timestamp.

        Raises:
            GitMetadataError: If no repository is found, ``HEAD`` has no commit,
                or the object it names cannot be read as a commit.
        """
        try:
            repo: Repo = Repo.discover(str(self._start))
        except NotGitRepository as exc:
            raise GitMetadataError(f"No git repository found at or above {self._start}") from exc

        with repo:
            logger.trace("Found git repository at %s", repo.path)
            try:
                head: bytes = repo.head()
                obj: ShaFile = repo[head]
            except KeyError as exc:
                raise GitMetadataError(f"Cannot resolve HEAD in {repo.path} (no commits yet?)") from exc
            except (OSError, ObjectFormatException) as exc:
                raise GitMetadataError(f"Cannot read HEAD in {repo.path}: {exc}") from exc

            sha: str = head.decode("ascii")
            if not isinstance(obj, Commit):
                raise GitMetadataError(f"HEAD {sha} is not a commit")
            moment: datetime = datetime.fromtimestamp(obj.commit_time, tz=timezone.utc)

        return GitMetadata(date=format_commit_date(moment), sha=shorten_sha(sha))


class GitCommandInfoProvider:
    """Ask the ``git`` executable (works for linked worktrees too)."""

    name = "git-command"

    def __init__(self, cwd: Path | None = None, *, executable: str = "git") -> None:
        self._cwd: Path | None = cwd
        self._executable: str = executable

    def _run(self, *args: str) -> str:
        cmd: list[str] = [self._executable, *args]
        try:
            completed = subprocess.run(
                cmd,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise GitMetadataError(f"'{' '.join(cmd)}' failed: {exc}") from exc
        return completed.stdout.strip()

    def fetch(self) -> GitMetadata:
        """Run ``git rev-parse HEAD`` and ``git log -1 --format=%cI HEAD``.

        Raises:
            GitMetadataError: If a command fails or its output is unusable.
        """
        sha: str = self._run("rev-parse", "HEAD")
        commit_date_iso: str = self._run("log", "-1", "--format=%cI", "HEAD")
        if len(sha) < SHORT_SHA_LENGTH:
            raise GitMetadataError(f"Unexpected output from 'git rev-parse HEAD': {sha!r}")
        try:
            moment: datetime = parse_commit_date(commit_date_iso)
        except ValueError as exc:
            raise GitMetadataError(f"Unexpected commit date {commit_date_iso!r}") from exc
        return GitMetadata(date=format_commit_date(moment), sha=shorten_sha(sha))


# --- Resolution ---


def default_providers(root: Path | None = None) -> list[GitInfoProvider]:
    """Return the default provider chain for a repository rooted at (or above) ``root``."""
    return [
        EnvGitInfoProvider(),
        GitDirInfoProvider(root),
        GitCommandInfoProvider(root),
    ]


def resolve_git_metadata(
    providers: Sequence[GitInfoProvider] | None = None,
    *,
    now: Callable[[], datetime] = utc_now,
) -> GitMetadata:
    """Return metadata from the first provider that answers.

    Failures are logged, never raised: if no provider answers, the result is the
    current time with the ``"unknown"`` SHA.

    Args:
        providers (Sequence[GitInfoProvider] | None): Provider chain; defaults to
            `default_providers` for the current directory.
        now (Callable[[], datetime]): Clock used for the fallback date.

    Returns:
        GitMetadata: The resolved (or degraded) metadata.
    """
    chain: Sequence[GitInfoProvider] = default_providers() if providers is None else providers
    for provider in chain:
        try:
            meta: GitMetadata | None = provider.fetch()
        except GitMetadataError as exc:
            logger.debug("Provider %s could not determine commit date + SHA: %s", provider.name, exc)
            continue
        if meta is not None:
            logger.debug("Provider %s: date=%s sha=%s", provider.name, meta.date, meta.sha)
            return meta
    logger.info("No git HEAD commit found; using current date and 'unknown' SHA")
    return GitMetadata.unknown(now())
