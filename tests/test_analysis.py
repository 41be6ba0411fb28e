"""Tests for tree analyses: normalize, cycles, dependents, warnings."""

import copy

import pytest

from module_graph.analysis import (
    parse_circular,
    parse_dependents,
    parse_warnings,
    shorten_tree,
)
from module_graph.models import Dependency


# ── Helpers ───────────────────────────────────────────────────

def _edges(issuer, *targets):
    """Edges from ``issuer``; a target of ``(request, None)`` is a lost edge."""
    deps = []
    for target in targets:
        if isinstance(target, tuple):
            request, module_id = target
        else:
            request, module_id = f"./{target}", target
        deps.append(Dependency(request=request, issuer=issuer, id=module_id))
    return deps


def _tree(**modules):
    return {
        key: None if targets is None else _edges(key, *targets)
        for key, targets in modules.items()
    }


# ── Circular ──────────────────────────────────────────────────

class TestCircular:
    def test_two_node_cycle(self):
        assert parse_circular(_tree(A=["B"], B=["A"])) == [["A", "B"]]

    def test_self_loop(self):
        assert parse_circular(_tree(A=["A"])) == [["A"]]

    def test_acyclic(self):
        assert parse_circular(_tree(A=["B", "C"], B=["C"], C=[])) == []

    def test_empty(self):
        assert parse_circular({}) == []

    def test_prefix_is_dropped(self):
        tree = _tree(A=["B"], B=["C"], C=["D"], D=["B"])
        assert parse_circular(tree) == [["B", "C", "D"]]

    def test_discovery_follows_edge_order(self):
        tree = _tree(A=["B", "C"], B=["A"], C=["A"])
        assert parse_circular(tree) == [["A", "B"], ["A", "C"]]

    def test_consumed_node_not_reexpanded(self):
        # D is expanded under A first; reaching it again from E adds nothing new
        tree = _tree(A=["D"], D=["A"], E=["D"])
        assert parse_circular(tree) == [["A", "D"]]

    def test_consumed_node_still_closes_cycle(self):
        tree = _tree(A=["B"], B=["C", "A"], C=["B"])
        assert parse_circular(tree) == [["B", "C"], ["A", "B"]]

    def test_skips_lost_and_leaf(self):
        tree = _tree(A=[("x", None), "L"], L=None)
        assert parse_circular(tree) == []

    def test_does_not_mutate_input(self):
        tree = _tree(A=["B"], B=["A"])
        before = copy.deepcopy(tree)
        parse_circular(tree)
        assert tree == before

    def test_repeatable(self):
        tree = _tree(A=["B"], B=["A"])
        assert parse_circular(tree) == parse_circular(tree)


# ── Dependents ────────────────────────────────────────────────

class TestDependents:
    def test_inverts_edges(self):
        tree = _tree(C=["A"], B=["A", "C"], A=[("x", None)])
        assert parse_dependents(tree) == {"A": ["B", "C"], "C": ["B"]}

    def test_empty(self):
        assert parse_dependents({}) == {}

    def test_leaf_targets_included(self):
        tree = _tree(A=["L"], L=None)
        assert parse_dependents(tree) == {"L": ["A"]}

    def test_exact_inverse(self):
        tree = _tree(A=["B", "C"], B=["C"], C=["A"], D=["A"])
        index = parse_dependents(tree)
        for target, issuers in index.items():
            for issuer in issuers:
                assert any(dep.id == target for dep in tree[issuer])
        for issuer, deps in tree.items():
            for dep in deps:
                assert issuer in index[dep.id]


# ── Warnings ──────────────────────────────────────────────────

class TestWarnings:
    def test_lose(self):
        tree = {"A": [Dependency(request="x", issuer="A", id=None)]}
        assert parse_warnings(tree) == ['lose "x" from "A"']

    def test_skip(self):
        tree = _tree(A=["B"], B=None)
        assert parse_warnings(tree) == ['skip "B", issuers: "A"']

    def test_skip_more_than_two_issuers(self):
        tree = _tree(D=["L"], A=["L"], C=["L"], B=["L"], L=None)
        assert parse_warnings(tree) == ['skip "L", issuers: "A", "B" (2 more...)']

    def test_skip_without_issuers(self):
        assert parse_warnings({"orphan": None}) == ['skip "orphan", issuers: ']

    def test_builtin_summary(self):
        tree = _tree(A=[("path", "path"), ("fs", "fs"), ("./z", "z")], path=None, fs=None, z=None)
        assert parse_warnings(tree) == [
            'node "path", "fs"',
            'skip "z", issuers: "A"',
        ]

    def test_sorted(self):
        tree = _tree(
            A=[("zz", None), "B"],
            B=[("aa", None)],
            C=None,
        )
        warnings = parse_warnings(tree)
        assert warnings == sorted(warnings)
        assert len(warnings) == 3

    def test_uses_given_dependents(self):
        tree = _tree(B=None)
        assert parse_warnings(tree, {"B": ["X"]}) == ['skip "B", issuers: "X"']

    def test_non_ascii_quoted_verbatim(self):
        tree = {"A": [Dependency(request="./ünï", issuer="A", id=None)]}
        assert parse_warnings(tree) == ['lose "./ünï" from "A"']


# ── Normalize ─────────────────────────────────────────────────

class TestShortenTree:
    @pytest.fixture
    def tree(self):
        return {
            "/proj/src/a.ts": [
                Dependency(request="./b", issuer="/proj/src/a.ts", id="/proj/src/b.ts"),
                Dependency(request="gone", issuer="/proj/src/a.ts", id=None),
                Dependency(request="fs", issuer="/proj/src/a.ts", id="fs"),
                Dependency(request="../../lib", issuer="/proj/src/a.ts", id="/lib.js"),
            ],
            "/proj/src/b.ts": [],
            "fs": None,
            "/lib.js": None,
        }

    def test_relative_keys_and_ids(self, tree):
        short = shorten_tree("/proj", tree)
        assert list(short) == ["src/a.ts", "src/b.ts", "fs", "../lib.js"]
        deps = short["src/a.ts"]
        assert [d.id for d in deps] == ["src/b.ts", None, "fs", "../lib.js"]
        assert all(d.issuer == "src/a.ts" for d in deps)
        assert [d.request for d in deps] == ["./b", "gone", "fs", "../../lib"]
        assert short["fs"] is None

    def test_idempotent(self, tree):
        once = shorten_tree("/proj", tree)
        assert shorten_tree("/proj", once) == once

    def test_input_untouched(self, tree):
        shorten_tree("/proj", tree)
        assert "/proj/src/a.ts" in tree
        assert tree["/proj/src/a.ts"][0].issuer == "/proj/src/a.ts"
