# topmark:header:start
#
#   project      : BuildProps
#   file         : session.py
#   file_relpath : src/buildprops/build/session.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-invocation build state.

A `BuildSession` computes the git metadata, the derived `Versions` and the
post-override ``versions.properties`` map at most once, then hands the same
values to every task of the invocation. Nothing is cached at module level.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from buildprops.config.logging import get_logger
from buildprops.git.providers import default_providers, resolve_git_metadata, utc_now
from buildprops.properties.io import load_version_props
from buildprops.versioning.derive import derive_versions

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from datetime import datetime

    from buildprops.config import Config
    from buildprops.config.logging import BuildPropsLogger
    from buildprops.git.model import GitMetadata
    from buildprops.git.providers import GitInfoProvider
    from buildprops.versioning.model import Versions

logger: BuildPropsLogger = get_logger(__name__)


class BuildSession:
    """Memoized version state for one build invocation.

    Args:
        config (Config): Frozen configuration.
        providers (Sequence[GitInfoProvider] | None): Git metadata providers;
            defaults to `default_providers` rooted at ``config.root``.
        overrides (Mapping[str, str] | None): External overrides for
            ``versions.properties`` entries.
        now (Callable[[], datetime]): Clock for the metadata fallback date.
    """

    def __init__(
        self,
        config: Config,
        *,
        providers: Sequence[GitInfoProvider] | None = None,
        overrides: Mapping[str, str] | None = None,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        self.config: Config = config
        self.overrides: dict[str, str] = dict(overrides or {})
        self._providers: Sequence[GitInfoProvider] | None = providers
        self._now = now

    @functools.cached_property
    def git_metadata(self) -> GitMetadata:
        """Commit date + short SHA, resolved once."""
        providers: Sequence[GitInfoProvider] = (
            default_providers(self.config.root) if self._providers is None else self._providers
        )
        return resolve_git_metadata(providers, now=self._now)

    @functools.cached_property
    def versions(self) -> Versions:
        """Derived versions, computed once.

        Raises:
            VersionSplitError: If the ``SPLIT`` policy cannot split the base version.
        """
        meta: GitMetadata = self.git_metadata
        versions: Versions = derive_versions(
            self.config.base_version,
            self.config.base_version_suffix,
            meta.sha,
            meta.date,
        )
        logger.info("%s", versions)
        return versions

    @functools.cached_property
    def version_props(self) -> dict[str, str]:
        """The global ``versions.properties`` map with overrides applied, read once.

        Raises:
            PropertiesFileError: If the file is missing or unreadable.
        """
        return load_version_props(self.config.versions_file, self.overrides)
