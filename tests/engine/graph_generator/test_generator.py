# SPDX-FileCopyrightText: Copyright (c) 2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from commit_graph.config.commands import CommitCommand, TagCommand
from commit_graph.config.errors import InvalidGraphParametersError
from commit_graph.config.graph_params import GraphParams
from commit_graph.engine.emitter import CommandEmitter
from commit_graph.engine.graph_generator import CommandLog, GraphGenerator

# --- Concrete scenarios ---


@pytest.mark.parametrize("branching_factor", [1, 2, 7])
def test_depth_one_is_a_single_tagged_root(generator: GraphGenerator, branching_factor: int) -> None:
    log = generator.generate(depth=1, branching_factor=branching_factor)
    assert log.to_dicts() == [
        {"type": "commit", "id": "1", "message": "Commit 1", "parents": [], "tree": {"path.txt": "1"}},
        {"type": "tag", "name": "tag-1", "on": "1"},
    ]


def test_depth_two_binary(generator: GraphGenerator) -> None:
    log = generator.generate(depth=2, branching_factor=2)
    assert log.to_dicts() == [
        {"type": "commit", "id": "1", "message": "Commit 1", "parents": [], "tree": {"path.txt": "1"}},
        {"type": "commit", "id": "2", "message": "Commit 2", "parents": ["1"], "tree": {"path.txt": "1 -> 2"}},
        {"type": "tag", "name": "tag-2", "on": "2"},
        {"type": "commit", "id": "3", "message": "Commit 3", "parents": ["1"], "tree": {"path.txt": "1 -> 3"}},
        {"type": "tag", "name": "tag-3", "on": "3"},
    ]


def test_depth_three_binary(binary_tree_log: CommandLog) -> None:
    assert binary_tree_log.num_commits == 7
    assert binary_tree_log.num_tags == 4

    paths = {c.id: c.tree["path.txt"] for c in binary_tree_log.commits}
    assert paths == {
        "1": "1",
        "2": "1 -> 2",
        "3": "1 -> 2 -> 3",
        "4": "1 -> 2 -> 4",
        "5": "1 -> 5",
        "6": "1 -> 5 -> 6",
        "7": "1 -> 5 -> 7",
    }
    assert [t.on for t in binary_tree_log.tags] == ["3", "4", "6", "7"]
    assert sorted({len(p.split(" -> ")) for p in paths.values()}) == [1, 2, 3]


def test_depth_three_binary_order(binary_tree_log: CommandLog) -> None:
    rendered = [c.id if isinstance(c, CommitCommand) else f"tag:{c.on}" for c in binary_tree_log]
    assert rendered == ["1", "2", "3", "tag:3", "4", "tag:4", "5", "6", "tag:6", "7", "tag:7"]


# --- Properties ---

SHAPES = [(1, 1), (1, 3), (2, 1), (2, 4), (3, 3), (4, 2), (5, 1), (5, 3)]


@pytest.mark.parametrize("depth,branching_factor", SHAPES)
def test_commit_and_tag_counts(generator: GraphGenerator, depth: int, branching_factor: int) -> None:
    log = generator.generate(depth=depth, branching_factor=branching_factor)
    assert log.num_commits == sum(branching_factor**k for k in range(depth))
    assert log.num_tags == branching_factor ** (depth - 1)


@pytest.mark.parametrize("depth,branching_factor", SHAPES)
def test_references_point_backwards(generator: GraphGenerator, depth: int, branching_factor: int) -> None:
    log = generator.generate(depth=depth, branching_factor=branching_factor)

    seen: set[str] = set()
    tagged: set[str] = set()
    for command in log:
        if isinstance(command, CommitCommand):
            if command.id == "1":
                assert command.parents == []
            else:
                assert len(command.parents) == 1
                assert command.parents[0] in seen
            seen.add(command.id)
        else:
            assert isinstance(command, TagCommand)
            assert command.on in seen
            assert command.on not in tagged
            assert command.name == f"tag-{command.on}"
            tagged.add(command.on)


@pytest.mark.parametrize("depth,branching_factor", SHAPES)
def test_paths_follow_parents(generator: GraphGenerator, depth: int, branching_factor: int) -> None:
    log = generator.generate(depth=depth, branching_factor=branching_factor)

    paths: dict[str, list[str]] = {}
    for commit in log.commits:
        path = commit.tree["path.txt"].split(" -> ")
        assert path[-1] == commit.id
        if commit.parents:
            assert path[:-1] == paths[commit.parents[0]]
        else:
            assert path == [commit.id]
        paths[commit.id] = path
        assert commit.message == f"Commit {commit.id}"

    leaves = {t.on for t in log.tags}
    assert all(len(paths[leaf]) == depth for leaf in leaves)
    assert all(len(path) < depth for commit_id, path in paths.items() if commit_id not in leaves)


def test_ids_are_sequential(generator: GraphGenerator) -> None:
    log = generator.generate(depth=4, branching_factor=3)
    assert [c.id for c in log.commits] == [str(i) for i in range(1, 41)]


def test_generation_is_deterministic() -> None:
    emitter = CommandEmitter()
    first = emitter.serialize(GraphGenerator().generate(depth=4, branching_factor=3))
    second = emitter.serialize(GraphGenerator().generate(depth=4, branching_factor=3))
    assert first == second


def test_runs_do_not_share_state(generator: GraphGenerator) -> None:
    first = generator.generate(depth=2, branching_factor=2)
    second = generator.generate(depth=2, branching_factor=2)
    assert first is not second
    assert first.to_dicts() == second.to_dicts()
    assert second[0].id == "1"


def test_returned_log_is_frozen(binary_tree_log: CommandLog) -> None:
    assert binary_tree_log.is_frozen


def test_long_chain_does_not_recurse(generator: GraphGenerator) -> None:
    log = generator.generate(depth=1_000, branching_factor=1)
    assert log.num_commits == 1_000
    assert log.num_tags == 1
    last = log.commits[-1]
    assert last.parents == ["999"]
    assert last.tree["path.txt"].startswith("1 -> 2 -> 3")
    assert last.tree["path.txt"].endswith("998 -> 999 -> 1000")


def test_custom_path_file_name(generator: GraphGenerator) -> None:
    log = generator.generate(depth=2, branching_factor=1, path_file_name="lineage.txt")
    assert [c.tree for c in log.commits] == [{"lineage.txt": "1"}, {"lineage.txt": "1 -> 2"}]


def test_build_from_params(generator: GraphGenerator) -> None:
    log = generator.build(GraphParams(depth=3, branching_factor=2))
    assert log.num_commits == 7


# --- Invalid parameters ---


@pytest.mark.parametrize(
    "depth,branching_factor",
    [(0, 2), (2, 0), (-3, 2), (2.5, 2), ("2", 2), (2, None), (False, 1)],
)
def test_invalid_parameters_fail_fast(generator: GraphGenerator, depth, branching_factor) -> None:
    with pytest.raises(InvalidGraphParametersError):
        generator.generate(depth=depth, branching_factor=branching_factor)


def test_oversized_graph_is_rejected(generator: GraphGenerator) -> None:
    with pytest.raises(InvalidGraphParametersError, match="more than 100000 commits"):
        generator.generate(depth=50, branching_factor=10)


def test_cap_can_be_raised_per_run(generator: GraphGenerator) -> None:
    with pytest.raises(InvalidGraphParametersError):
        generator.generate(depth=3, branching_factor=2, max_commits=6)
    assert generator.generate(depth=3, branching_factor=2, max_commits=7).num_commits == 7
