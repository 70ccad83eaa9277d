from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from rails_navigator.core.constants import VIEW_EXTENSIONS, ProbeStatus
from rails_navigator.data_models.models import NavigationConventions, ProbeResult
from rails_navigator.navigation.path_resolver import (
    PathResolver,
    ProbeFunc,
    probe_path,
)

WORKSPACE = Path("/repo")


def fake_probe(
    existing: set[Path], delays: dict[Path, float] | None = None
) -> ProbeFunc:
    delays = delays or {}

    async def _probe(path: Path) -> ProbeResult:
        await asyncio.sleep(delays.get(path, 0))
        status = ProbeStatus.EXISTS if path in existing else ProbeStatus.MISSING
        return ProbeResult(path=path, status=status)

    return _probe


class TestResolveRoots:
    def test_single_segment_identity_uses_workspace_only(self) -> None:
        resolver = PathResolver()

        assert resolver.resolve_roots(WORKSPACE, "orders") == [WORKSPACE]

    def test_namespaced_identity_adds_domain_and_app_roots(self) -> None:
        resolver = PathResolver()

        roots = resolver.resolve_roots(WORKSPACE, "cms/emr/orders")

        assert roots == [
            WORKSPACE,
            WORKSPACE / "domains" / "cms",
            WORKSPACE / "apps" / "cms",
        ]

    @pytest.mark.parametrize("identity", ["cms/orders", "a/b/c/d", "x/y"])
    def test_namespaced_identity_triples_root_count(self, identity: str) -> None:
        resolver = PathResolver()

        single = resolver.resolve_roots(WORKSPACE, identity.split("/")[-1])
        namespaced = resolver.resolve_roots(WORKSPACE, identity)

        assert len(namespaced) == 3 * len(single)

    def test_prefixes_follow_conventions(self) -> None:
        resolver = PathResolver(NavigationConventions(multi_root_prefixes=("engines",)))

        roots = resolver.resolve_roots("/repo", "cms/orders")

        assert roots == [WORKSPACE, WORKSPACE / "engines" / "cms"]


class TestBuildCandidates:
    def test_view_candidates_are_root_major_extension_minor(self) -> None:
        resolver = PathResolver()
        roots = resolver.resolve_roots(WORKSPACE, "cms/emr/orders")

        candidates = resolver.build_view_candidates(roots, "cms/emr/orders", "index")

        assert len(candidates) == len(roots) * len(VIEW_EXTENSIONS)
        for i, root in enumerate(roots):
            for j, extension in enumerate(VIEW_EXTENSIONS):
                expected = root / "app" / "views" / "cms" / "emr" / "orders" / f"index{extension}"
                assert candidates[i * len(VIEW_EXTENSIONS) + j] == expected

    def test_view_candidates_with_synthetic_extensions(self) -> None:
        resolver = PathResolver(NavigationConventions(view_extensions=(".a", ".b")))

        candidates = resolver.build_view_candidates([Path("/r1"), Path("/r2")], "posts", "show")

        assert candidates == [
            Path("/r1/app/views/posts/show.a"),
            Path("/r1/app/views/posts/show.b"),
            Path("/r2/app/views/posts/show.a"),
            Path("/r2/app/views/posts/show.b"),
        ]

    def test_controller_candidates_one_per_root(self) -> None:
        resolver = PathResolver()
        roots = resolver.resolve_roots(WORKSPACE, "cms/orders")

        candidates = resolver.build_controller_candidates(roots, "cms/orders")

        assert candidates == [
            WORKSPACE / "app/controllers/cms/orders_controller.rb",
            WORKSPACE / "domains/cms/app/controllers/cms/orders_controller.rb",
            WORKSPACE / "apps/cms/app/controllers/cms/orders_controller.rb",
        ]


class TestFindFirstExisting:
    @pytest.mark.asyncio
    async def test_returns_lowest_index_regardless_of_latency(self) -> None:
        candidates = [Path(f"/c{i}") for i in range(5)]
        existing = {candidates[1], candidates[3], candidates[4]}
        delays = {candidates[1]: 0.05, candidates[3]: 0.0, candidates[4]: 0.0}
        resolver = PathResolver(probe=fake_probe(existing, delays))

        assert await resolver.find_first_existing(candidates) == candidates[1]

    @pytest.mark.asyncio
    async def test_result_independent_of_completion_order(self) -> None:
        candidates = [Path(f"/c{i}") for i in range(4)]
        existing = set(candidates[1:])
        fast_first = {path: 0.01 * (len(candidates) - i) for i, path in enumerate(candidates)}
        slow_first = {path: 0.01 * i for i, path in enumerate(candidates)}

        fast = await PathResolver(probe=fake_probe(existing, fast_first)).find_first_existing(candidates)
        slow = await PathResolver(probe=fake_probe(existing, slow_first)).find_first_existing(candidates)

        assert fast == slow == candidates[1]

    @pytest.mark.asyncio
    async def test_returns_none_when_nothing_exists(self) -> None:
        resolver = PathResolver(probe=fake_probe(set()))

        assert await resolver.find_first_existing([Path("/a"), Path("/b")]) is None

    @pytest.mark.asyncio
    async def test_empty_candidates(self) -> None:
        assert await PathResolver(probe=fake_probe(set())).find_first_existing([]) is None

    @pytest.mark.asyncio
    async def test_raising_probe_counts_as_missing(self) -> None:
        candidates = [Path("/broken"), Path("/ok")]

        async def probe(path: Path) -> ProbeResult:
            if path == candidates[0]:
                raise RuntimeError("disk on fire")
            return ProbeResult(path=path, status=ProbeStatus.EXISTS)

        resolver = PathResolver(probe=probe)

        assert await resolver.find_first_existing(candidates) == candidates[1]
        results = await resolver.probe_all(candidates)
        assert results[0].status == ProbeStatus.ERROR
        assert results[0].error == "disk on fire"

    @pytest.mark.asyncio
    async def test_probes_run_concurrently(self) -> None:
        candidates = [Path(f"/c{i}") for i in range(10)]
        in_flight = 0
        peak = 0

        async def probe(path: Path) -> ProbeResult:
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return ProbeResult(path=path, status=ProbeStatus.MISSING)

        await PathResolver(probe=probe).find_first_existing(candidates)

        assert peak == len(candidates)


class TestProbePath:
    @pytest.mark.asyncio
    async def test_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "index.html.erb"
        target.write_text("<h1/>")

        result = await probe_path(target)

        assert result.status == ProbeStatus.EXISTS
        assert result.exists

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        result = await probe_path(tmp_path / "missing.html.erb")

        assert result.status == ProbeStatus.MISSING
        assert result.error is None

    @pytest.mark.asyncio
    async def test_os_error_is_reported_as_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")

        result = await probe_path(blocker / "index.html.erb")

        assert result.status == ProbeStatus.ERROR
        assert not result.exists
        assert result.error


class TestRootMajorScenario:
    @pytest.mark.asyncio
    async def test_earlier_root_wins_over_earlier_extension(
        self, tmp_path: Path, write_file
    ) -> None:
        identity = "cms/emr/orders"
        domain_view = write_file(f"domains/cms/app/views/{identity}/list.text.erb")
        write_file(f"apps/cms/app/views/{identity}/list.html.erb")
        resolver = PathResolver()

        roots = resolver.resolve_roots(tmp_path, identity)
        found = await resolver.find_first_existing(
            resolver.build_view_candidates(roots, identity, "list")
        )

        assert found == domain_view

    @pytest.mark.asyncio
    async def test_extension_order_decides_within_a_root(
        self, tmp_path: Path, write_file
    ) -> None:
        write_file("app/views/orders/index.json.jbuilder")
        html_view = write_file("app/views/orders/index.html.erb")
        resolver = PathResolver()

        found = await resolver.find_first_existing(
            resolver.build_view_candidates([tmp_path], "orders", "index")
        )

        assert found == html_view
