"""
This module defines the `PathResolver`, which enumerates the conventional
locations of a controller's views (and a view's controller) across the roots
of a multi-application Rails monorepo, and picks the first one that exists.

Enumeration is root-major: every extension is tried under the workspace root
before any `domains/<segment>` candidate, and those before any `apps/<segment>`
candidate. Existence probes run concurrently, but the winner is always the
lowest-index existing candidate, never the first probe to complete.
"""

from __future__ import annotations

import asyncio
import os
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path

from loguru import logger

from ..core import constants as cs
from ..core import logs as ls
from ..core.constants import ProbeStatus
from ..data_models.models import DEFAULT_CONVENTIONS, NavigationConventions, ProbeResult
from ..infrastructure.decorators import async_timing_decorator

type ProbeFunc = Callable[[Path], Awaitable[ProbeResult]]


async def probe_path(path: Path) -> ProbeResult:
    """
    Checks whether `path` exists without blocking the event loop.

    Args:
        path (Path): The candidate to check.

    Returns:
        ProbeResult: `EXISTS`, `MISSING`, or `ERROR` for any other OS failure.
    """
    try:
        await asyncio.to_thread(os.stat, path)
    except FileNotFoundError:
        return ProbeResult(path=path, status=ProbeStatus.MISSING)
    except OSError as e:
        logger.debug(ls.PROBE_FAILED.format(path=path, error=e))
        return ProbeResult(path=path, status=ProbeStatus.ERROR, error=str(e))
    return ProbeResult(path=path, status=ProbeStatus.EXISTS)


class PathResolver:
    """
    Builds and probes candidate controller and view paths.

    Args:
        conventions (NavigationConventions): Directory names, suffixes and the
            ordered view extensions to build candidates from.
        probe (ProbeFunc): Coroutine function checking one path; replaceable for
            synthetic layouts and latency tests.
    """

    def __init__(
        self,
        conventions: NavigationConventions = DEFAULT_CONVENTIONS,
        probe: ProbeFunc = probe_path,
    ):
        self.conventions = conventions
        self.probe = probe

    def resolve_roots(self, workspace_root: Path | str, identity: str) -> list[Path]:
        """
        Returns the base directories to search for `identity`, in precedence order.

        The workspace root always comes first. A namespaced identity such as
        `cms/emr/orders` adds one root per multi-root prefix, e.g.
        `domains/cms` and `apps/cms`.
        """
        root = Path(workspace_root)
        roots = [root]
        segment, separator, _ = identity.partition(cs.PATH_SEPARATOR)
        if separator and segment:
            roots.extend(root / prefix / segment for prefix in self.conventions.multi_root_prefixes)
        logger.debug(
            ls.ROOTS_RESOLVED.format(
                count=len(roots), identity=identity, roots=[str(r) for r in roots]
            )
        )
        return roots

    def build_view_candidates(
        self, roots: Sequence[Path], identity: str, action: str
    ) -> list[Path]:
        conv = self.conventions
        candidates = [
            root / conv.app_dir / conv.views_dir / identity / f"{action}{extension}"
            for root in roots
            for extension in conv.view_extensions
        ]
        logger.debug(
            ls.CANDIDATES_BUILT.format(
                count=len(candidates), kind=cs.FileKind.VIEW, target=f"{identity}#{action}"
            )
        )
        return candidates

    def build_controller_candidates(
        self, roots: Sequence[Path], identity: str
    ) -> list[Path]:
        conv = self.conventions
        candidates = [
            root / conv.app_dir / conv.controllers_dir / f"{identity}{conv.controller_file_suffix}"
            for root in roots
        ]
        logger.debug(
            ls.CANDIDATES_BUILT.format(
                count=len(candidates), kind=cs.FileKind.CONTROLLER, target=identity
            )
        )
        return candidates

    async def probe_all(self, candidates: Sequence[Path]) -> list[ProbeResult]:
        """
        Probes every candidate concurrently and returns results in input order.

        A probe that raises instead of returning is recorded as `ERROR`, so one
        failing candidate never aborts the others.
        """
        settled = await asyncio.gather(
            *(self.probe(path) for path in candidates), return_exceptions=True
        )
        results: list[ProbeResult] = []
        for path, outcome in zip(candidates, settled, strict=True):
            if isinstance(outcome, BaseException):
                if isinstance(outcome, asyncio.CancelledError):
                    raise outcome
                logger.warning(ls.PROBE_UNEXPECTED.format(path=path, error=outcome))
                results.append(
                    ProbeResult(path=path, status=ProbeStatus.ERROR, error=str(outcome))
                )
            else:
                results.append(outcome)
        return results

    @async_timing_decorator
    async def find_first_existing(self, candidates: Sequence[Path]) -> Path | None:
        """
        Returns the lowest-index candidate that exists, or None.

        Args:
            candidates (Sequence[Path]): Candidates in precedence order.

        Returns:
            Path | None: The winning candidate, independent of probe completion order.
        """
        for result in await self.probe_all(candidates):
            if result.exists:
                logger.debug(ls.FIRST_EXISTING.format(path=result.path))
                return result.path
        logger.debug(ls.NO_EXISTING.format(count=len(candidates)))
        return None
